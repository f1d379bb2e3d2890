import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from core.base.page_cache import revalidate_paths
from events.models import Event, EventRegistration
from events.services.paths import event_paths

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for member registrations to events"""

    @staticmethod
    def is_registered(user, event_id) -> bool:
        return EventRegistration.objects.filter(user=user, event_id=event_id).exists()

    @staticmethod
    def register(user, event_id: int) -> EventRegistration:
        """
        Register a member to an event.

        Validates:
        - Event exists and is published
        - Event is not in the past
        - Member not already registered (also enforced by a unique constraint)
        """
        try:
            event = Event.objects.get(pk=event_id)
        except Event.DoesNotExist:
            raise ValidationError('Event does not exist')

        if not event.is_published:
            raise ValidationError('Event is not available')

        if event.is_past:
            raise ValidationError('Event has already taken place')

        if RegistrationService.is_registered(user, event.pk):
            raise ValidationError('You are already registered for this event')

        try:
            with transaction.atomic():
                registration = EventRegistration.objects.create(user=user, event=event)
        except IntegrityError:
            raise ValidationError('You are already registered for this event')

        revalidate_paths(*event_paths(event.pk))
        logger.info("User %s registered to event %s", user.pk, event.pk)
        return registration

    @staticmethod
    @transaction.atomic
    def unregister(user, event_id: int) -> None:
        """
        Cancel the caller's own registration; only for events still to come.
        """
        try:
            event = Event.objects.get(pk=event_id)
        except Event.DoesNotExist:
            raise ValidationError('Event does not exist')

        if event.is_past:
            raise ValidationError('Cannot unregister from a past event')

        deleted, _ = EventRegistration.objects.filter(user=user, event=event).delete()
        if not deleted:
            raise ValidationError('You are not registered for this event')

        revalidate_paths(*event_paths(event.pk))
        logger.info("User %s unregistered from event %s", user.pk, event.pk)

    @staticmethod
    @transaction.atomic
    def remove(registration_id: int) -> None:
        """Back-office removal of any registration."""
        try:
            registration = EventRegistration.objects.get(pk=registration_id)
        except EventRegistration.DoesNotExist:
            raise ValidationError(f"No registration found with ID '{registration_id}'")

        event_id = registration.event_id
        registration.delete()
        revalidate_paths(*event_paths(event_id))
