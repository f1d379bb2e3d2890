"""
Event Models
Events published by the association, member registrations and photos.
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from core.base.managers import PublishedManager
from core.base.models import PublishableMixin, TimestampMixin


class Event(TimestampMixin, PublishableMixin):
    title = models.CharField(max_length=200)
    description = models.TextField(help_text="Rich text (HTML) description")
    date = models.DateTimeField(db_index=True)
    location = models.CharField(max_length=255)
    image = models.CharField(max_length=500, blank=True, default='')
    payment_link = models.URLField(
        max_length=500,
        blank=True,
        default='',
        help_text="External payment link (e.g. SumUp) shown to registered members"
    )

    objects = PublishedManager()

    class Meta:
        db_table = 'events'
        ordering = ['date']
        verbose_name = 'Event'
        verbose_name_plural = 'Events'

    def __str__(self):
        return f"{self.title} ({self.date:%Y-%m-%d})"

    @property
    def is_past(self):
        return self.date < timezone.now()

    def delete(self, *args, **kwargs):
        """Refuse deletion while members are registered."""
        registration_count = self.registrations.count()
        if registration_count:
            raise ValidationError(
                f"Cannot delete event: {registration_count} registration(s) exist"
            )
        return super().delete(*args, **kwargs)


class EventRegistration(models.Model):
    """A member's registration to an event; one per (user, event)."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='event_registrations'
    )
    event = models.ForeignKey(
        Event,
        on_delete=models.PROTECT,
        related_name='registrations'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'event_registrations'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'event'], name='unique_registration_per_event'),
        ]

    def __str__(self):
        return f"{self.user} -> {self.event}"


class Photo(models.Model):
    url = models.CharField(max_length=500)
    caption = models.CharField(max_length=255, blank=True, default='')
    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name='photos',
        null=True,
        blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'photos'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.caption or self.url
