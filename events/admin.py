from django.contrib import admin

from .models import Event, EventRegistration, Photo


class PhotoInline(admin.TabularInline):
    model = Photo
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['title', 'date', 'location', 'is_published']
    list_filter = ['is_published']
    search_fields = ['title', 'location']
    inlines = [PhotoInline]


@admin.register(EventRegistration)
class EventRegistrationAdmin(admin.ModelAdmin):
    list_display = ['user', 'event', 'created_at']
    list_filter = ['event']
    search_fields = ['user__email', 'user__name', 'event__title']
