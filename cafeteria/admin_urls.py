"""
Back-office cafeteria URLs, mounted under /admin/cafeteria/.
"""
from django.urls import path

from . import views

app_name = 'admin_cafeteria'

urlpatterns = [
    # Categories
    path('categories/', views.category_list, name='category_list'),
    path('categories/<int:pk>/', views.category_detail, name='category_detail'),

    # Products
    path('products/', views.product_list, name='product_list'),
    path('products/available/', views.available_products, name='available_products'),
    path('products/<int:pk>/', views.product_detail, name='product_detail'),
    path('products/<int:pk>/toggle-availability/', views.product_toggle_availability, name='product_toggle_availability'),
    path('products/<int:pk>/toggle-active/', views.product_toggle_active, name='product_toggle_active'),

    # Stock
    path('stock/', views.stock_list, name='stock_list'),
    path('stock/bulk/', views.stock_bulk_update, name='stock_bulk_update'),
    path('products/<int:pk>/stock/', views.stock_set, name='stock_set'),
    path('products/<int:pk>/stock/adjust/', views.stock_adjust, name='stock_adjust'),
    path('stats/', views.cafeteria_stats, name='stats'),

    # Orders
    path('orders/', views.order_list, name='order_list'),
    path('orders/<int:pk>/', views.order_detail, name='order_detail'),
    path('orders/<int:pk>/status/', views.order_status, name='order_status'),
    path('pos/orders/', views.pos_order_create, name='pos_order_create'),
]
