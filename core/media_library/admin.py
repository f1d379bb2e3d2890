from django.contrib import admin

from .models import Media


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'mime_type', 'size', 'created_at']
    list_filter = ['type']
    search_fields = ['name', 'alt']
    readonly_fields = ['file_path', 'url', 'mime_type', 'size', 'created_at']
