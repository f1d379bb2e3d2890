"""
Back-office user management, mounted under /admin/.
"""
from django.urls import path

from . import views

app_name = 'admin_users'

urlpatterns = [
    path('users/', views.admin_user_list, name='user_list'),
    path('users/<int:user_id>/', views.admin_user_delete, name='user_delete'),
    path('users/<int:user_id>/role/', views.admin_user_role, name='user_role'),
    path('users/<int:user_id>/active/', views.admin_user_active, name='user_active'),
]
