"""
Member area event URLs, mounted under /member/.
"""
from django.urls import path

from . import views

app_name = 'member_events'

urlpatterns = [
    path('registrations/', views.my_registrations, name='my_registrations'),
]
