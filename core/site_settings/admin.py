from django.contrib import admin

from .models import Setting
from .services import SettingsService


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    """Admin configuration for Setting model"""
    list_display = ['key', 'value', 'group', 'type']
    list_filter = ['group', 'type']
    search_fields = ['key', 'label', 'value']

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        SettingsService.invalidate(obj.key)
