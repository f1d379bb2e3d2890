"""
URL Configuration for authentication endpoints, mounted under /auth/.
"""
from django.urls import path

from . import views

app_name = 'auth'

urlpatterns = [
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),
    path('change-password/', views.change_password, name='change_password'),
    path('token/refresh/', views.token_refresh, name='token_refresh'),
]
