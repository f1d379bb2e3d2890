from django.core.exceptions import ValidationError
from django.db import transaction

from core.base.page_cache import revalidate_paths
from events.dtos import PhotoCreateDTO
from events.models import Event, Photo
from events.services.paths import event_paths


class PhotoService:
    """Service for event photos"""

    @staticmethod
    def _get(photo_id) -> Photo:
        try:
            return Photo.objects.get(pk=photo_id)
        except Photo.DoesNotExist:
            raise ValidationError(f"No photo found with ID '{photo_id}'")

    @staticmethod
    @transaction.atomic
    def add(dto: PhotoCreateDTO) -> Photo:
        if not Event.objects.filter(pk=dto.event_id).exists():
            raise ValidationError('Event does not exist')

        photo = Photo.objects.create(event_id=dto.event_id, url=dto.url, caption=dto.caption or '')
        revalidate_paths(*event_paths(dto.event_id))
        return photo

    @staticmethod
    @transaction.atomic
    def update_caption(photo_id: int, caption: str) -> Photo:
        photo = PhotoService._get(photo_id)
        photo.caption = caption
        photo.save(update_fields=['caption'])
        revalidate_paths(*event_paths(photo.event_id))
        return photo

    @staticmethod
    @transaction.atomic
    def delete(photo_id: int) -> None:
        photo = PhotoService._get(photo_id)
        event_id = photo.event_id
        photo.delete()
        revalidate_paths(*event_paths(event_id))
