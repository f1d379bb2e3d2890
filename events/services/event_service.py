import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from core.base.page_cache import revalidate_paths
from events.dtos import EventCreateDTO, EventUpdateDTO
from events.models import Event
from events.services.paths import event_paths

logger = logging.getLogger(__name__)


class EventService:
    """Service for Event business logic"""

    @staticmethod
    def get(event_id) -> Event:
        try:
            return Event.objects.get(pk=event_id)
        except Event.DoesNotExist:
            raise ValidationError(f"No event found with ID '{event_id}'")

    @staticmethod
    @transaction.atomic
    def create(dto: EventCreateDTO) -> Event:
        event = Event(
            title=dto.title,
            description=dto.description,
            date=dto.date,
            location=dto.location,
            image=dto.image or '',
            payment_link=dto.payment_link or '',
            is_published=dto.is_published,
        )
        event.full_clean()
        event.save()

        revalidate_paths(*event_paths())
        logger.info("Event '%s' created", event.title)
        return event

    @staticmethod
    @transaction.atomic
    def update(dto: EventUpdateDTO) -> Event:
        event = EventService.get(dto.event_id)

        for field in ('title', 'description', 'date', 'location', 'image', 'payment_link', 'is_published'):
            value = getattr(dto, field)
            if value is not None:
                setattr(event, field, value)

        event.full_clean()
        event.save()

        revalidate_paths(*event_paths(event.pk))
        return event

    @staticmethod
    @transaction.atomic
    def set_published(event_id: int, is_published: bool) -> Event:
        event = EventService.get(event_id)
        event.is_published = is_published
        event.save(update_fields=['is_published', 'updated_at'])

        revalidate_paths(*event_paths(event.pk))
        return event

    @staticmethod
    @transaction.atomic
    def delete(event_id: int) -> None:
        """
        Delete an event.

        Validates:
        - No registrations exist (model guard)
        """
        event = EventService.get(event_id)
        title = event.title
        event.delete()

        revalidate_paths(*event_paths(event_id))
        logger.info("Event '%s' deleted", title)
