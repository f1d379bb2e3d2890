from django.contrib import admin

from .models import CafeteriaOrder, OrderItem, Product, ProductCategory


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'display_order', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'stock', 'is_available', 'is_active']
    list_filter = ['category', 'is_available', 'is_active']
    search_fields = ['name']


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ['product', 'quantity', 'price']


@admin.register(CafeteriaOrder)
class CafeteriaOrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'total', 'status', 'channel', 'created_at']
    list_filter = ['status', 'channel', 'payment_method']
    search_fields = ['user__email', 'user__name', 'customer_name']
    inlines = [OrderItemInline]
