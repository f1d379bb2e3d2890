from django.db import models


class MediaType(models.TextChoices):
    IMAGE = 'image', 'Image'
    VIDEO = 'video', 'Video'
    AUDIO = 'audio', 'Audio'
    DOCUMENT = 'document', 'Document'


class Media(models.Model):
    """Metadata of an uploaded file; the bytes live in the default storage."""
    name = models.CharField(max_length=255, help_text="Original file name")
    file_path = models.CharField(max_length=500, help_text="Storage name of the file")
    url = models.CharField(max_length=500)
    type = models.CharField(max_length=20, choices=MediaType.choices, default=MediaType.DOCUMENT, db_index=True)
    mime_type = models.CharField(max_length=100)
    size = models.PositiveIntegerField(help_text="Size in bytes")
    alt = models.CharField(max_length=255, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'media'
        ordering = ['-created_at', '-id']
        verbose_name = 'Media'
        verbose_name_plural = 'Media'

    def __str__(self):
        return self.name
