"""
Media library URLs, mounted under /admin/.
"""
from django.urls import path

from . import views

app_name = 'admin_media'

urlpatterns = [
    path('media/', views.media_list, name='media_list'),
    path('media/upload/', views.media_upload, name='media_upload'),
    path('media/<int:pk>/', views.media_detail, name='media_detail'),
]
