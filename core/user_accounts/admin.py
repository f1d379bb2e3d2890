from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin configuration for User model"""
    list_display = ['email', 'name', 'role', 'is_active', 'created_at']
    list_filter = ['role', 'is_active']
    search_fields = ['email', 'name']
    readonly_fields = ['last_login', 'created_at', 'updated_at']

    fieldsets = (
        ('User Information', {
            'fields': ('email', 'name', 'image')
        }),
        ('Role & Status', {
            'fields': ('role', 'is_active')
        }),
        ('Authentication', {
            'fields': ('password', 'last_login', 'created_at', 'updated_at')
        }),
    )
