"""
Back-office event URLs, mounted under /admin/.
"""
from django.urls import path

from . import views

app_name = 'admin_events'

urlpatterns = [
    path('events/', views.admin_event_list, name='event_list'),
    path('events/<int:pk>/', views.admin_event_detail, name='event_detail'),
    path('events/<int:pk>/publish/', views.admin_event_publish, name='event_publish'),
    path('events/<int:pk>/registrations/', views.admin_event_registrations, name='event_registrations'),
    path('events/<int:pk>/photos/', views.admin_event_photos, name='event_photos'),
    path('registrations/<int:pk>/', views.admin_registration_delete, name='registration_delete'),
    path('photos/<int:pk>/', views.admin_photo_detail, name='photo_detail'),
]
