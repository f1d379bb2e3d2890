"""
Public URL configuration for site settings, mounted under /site/.
"""
from django.urls import path

from . import views

app_name = 'site_settings'

urlpatterns = [
    path('config/', views.site_config, name='site_config'),
]
