"""
Public and member event URLs, mounted under /events/.
"""
from django.urls import path

from . import views

app_name = 'events'

urlpatterns = [
    path('', views.event_list, name='event_list'),
    path('<int:pk>/', views.event_detail, name='event_detail'),
    path('<int:pk>/registration/', views.event_registration, name='event_registration'),
]
