"""
Back-office page URLs, mounted under /admin/.
"""
from django.urls import path

from . import views

app_name = 'admin_pages'

urlpatterns = [
    path('pages/', views.admin_page_list, name='page_list'),
    path('pages/<int:pk>/', views.admin_page_detail, name='page_detail'),
    path('pages/<int:pk>/publish/', views.admin_page_publish, name='page_publish'),
]
