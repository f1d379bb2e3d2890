"""
Public content URLs, mounted at the site root.
"""
from django.urls import path

from . import views

app_name = 'content'

urlpatterns = [
    path('', views.home, name='home'),
    path('pages/<slug:slug>/', views.page_detail, name='page_detail'),
]
