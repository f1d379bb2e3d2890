"""
Member area account endpoints, mounted under /member/.
"""
from django.urls import path

from . import views

app_name = 'member_accounts'

urlpatterns = [
    path('profile/', views.user_profile, name='profile'),
]
