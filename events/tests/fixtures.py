"""
Shared builders for event tests.
"""
from datetime import timedelta

from django.utils import timezone

from events.models import Event, EventRegistration


def create_event(title='General Assembly', days=7, is_published=True, **extra):
    """Event ``days`` from now (negative for past events)."""
    defaults = {
        'description': '<p>Annual meeting</p>',
        'location': 'Room 101',
    }
    defaults.update(extra)
    return Event.objects.create(
        title=title,
        date=timezone.now() + timedelta(days=days),
        is_published=is_published,
        **defaults
    )


def register(user, event):
    return EventRegistration.objects.create(user=user, event=event)
