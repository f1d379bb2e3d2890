"""
Member area cafeteria URLs, mounted under /member/.
"""
from django.urls import path

from . import views

app_name = 'member_cafeteria'

urlpatterns = [
    path('cafeteria/', views.member_catalog, name='catalog'),
    path('orders/', views.my_orders, name='orders'),
    path('orders/<int:pk>/cancel/', views.my_order_cancel, name='order_cancel'),
]
