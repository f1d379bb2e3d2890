"""
Content Models
Editable pages of the public site, addressed by slug.
"""
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models

from core.base.managers import PublishedManager
from core.base.models import PublishableMixin, TimestampMixin

# Pages the public site links to; they can be edited but never deleted
SYSTEM_PAGE_SLUGS = ('home', 'presentation', 'team', 'legal', 'privacy')

slug_validator = RegexValidator(
    regex=r'^[a-z0-9-]+$',
    message='Slug may only contain lowercase letters, digits and hyphens'
)


class Page(TimestampMixin, PublishableMixin):
    slug = models.CharField(max_length=100, unique=True, validators=[slug_validator])
    title = models.CharField(max_length=200)
    content = models.TextField()
    meta_title = models.CharField(max_length=200, blank=True, default='')
    meta_description = models.CharField(max_length=500, blank=True, default='')

    objects = PublishedManager()

    class Meta:
        db_table = 'pages'
        ordering = ['title']

    def __str__(self):
        return self.title

    @property
    def is_system(self):
        return self.slug in SYSTEM_PAGE_SLUGS

    def delete(self, *args, **kwargs):
        if self.is_system:
            raise ValidationError('System pages cannot be deleted')
        return super().delete(*args, **kwargs)
