"""
Back-office URL configuration for site settings, mounted under /admin/.
"""
from django.urls import path

from . import views

app_name = 'admin_settings'

urlpatterns = [
    path('settings/', views.admin_settings, name='settings'),
    path('settings/<str:key>/', views.admin_setting_detail, name='setting_detail'),
]
