"""
Media library: validated uploads to the default storage.
"""
import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import List

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import transaction

from .models import Media, MediaType

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = (
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/webp',
    'image/svg+xml',
    'application/pdf',
)


def media_type_for(mime_type: str) -> str:
    if mime_type.startswith('image/'):
        return MediaType.IMAGE
    if mime_type.startswith('video/'):
        return MediaType.VIDEO
    if mime_type.startswith('audio/'):
        return MediaType.AUDIO
    return MediaType.DOCUMENT


@dataclass
class UploadReport:
    """Outcome of a multi-file upload"""
    uploaded: List[Media] = field(default_factory=list)
    rejected: List[dict] = field(default_factory=list)


class MediaService:
    """Service for Media business logic"""

    @staticmethod
    def rejection_reason(uploaded_file):
        """Return why a file is refused, or None when it is acceptable."""
        mime_type = getattr(uploaded_file, 'content_type', '') or ''
        if mime_type not in ALLOWED_MIME_TYPES:
            return f"File type '{mime_type or 'unknown'}' is not allowed"
        max_size = settings.UPLOAD_MAX_FILE_SIZE
        if uploaded_file.size > max_size:
            return f"File exceeds the maximum size of {max_size // (1024 * 1024)} MB"
        return None

    @staticmethod
    def upload(files) -> UploadReport:
        """
        Store every acceptable file under a generated name and record it.

        Rejected files are reported with their reason; they do not abort the
        other uploads.
        """
        if not files:
            raise ValidationError('No file provided')

        report = UploadReport()
        for uploaded_file in files:
            reason = MediaService.rejection_reason(uploaded_file)
            if reason:
                report.rejected.append({'name': uploaded_file.name, 'reason': reason})
                continue
            report.uploaded.append(MediaService._store(uploaded_file))

        return report

    @staticmethod
    @transaction.atomic
    def _store(uploaded_file) -> Media:
        extension = os.path.splitext(uploaded_file.name)[1].lower()
        stored_name = default_storage.save(f"{uuid.uuid4()}{extension}", uploaded_file)

        media = Media.objects.create(
            name=uploaded_file.name,
            file_path=stored_name,
            url=default_storage.url(stored_name),
            type=media_type_for(uploaded_file.content_type),
            mime_type=uploaded_file.content_type,
            size=uploaded_file.size,
        )
        logger.info("Uploaded %s as %s (%d bytes)", media.name, stored_name, media.size)
        return media

    @staticmethod
    def _get(media_id) -> Media:
        try:
            return Media.objects.get(pk=media_id)
        except Media.DoesNotExist:
            raise ValidationError(f"No media found with ID '{media_id}'")

    @staticmethod
    @transaction.atomic
    def update_alt(media_id: int, alt: str) -> Media:
        media = MediaService._get(media_id)
        media.alt = alt
        media.save(update_fields=['alt'])
        return media

    @staticmethod
    @transaction.atomic
    def delete(media_id: int) -> None:
        """Remove the stored file (if still present) and the record."""
        media = MediaService._get(media_id)
        if media.file_path and default_storage.exists(media.file_path):
            default_storage.delete(media.file_path)
        media.delete()
        logger.info("Deleted media %s", media.file_path)
