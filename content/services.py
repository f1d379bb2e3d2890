import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from core.base.page_cache import revalidate_paths

from .dtos import PageCreateDTO, PageUpdateDTO
from .models import Page

logger = logging.getLogger(__name__)


def page_paths(*slugs):
    """Public paths showing a page; the home page is served at '/'."""
    paths = {'/'}
    for slug in slugs:
        if slug:
            paths.add(f'/pages/{slug}/')
    return sorted(paths)


class PageService:
    """Service for content pages"""

    @staticmethod
    def get(page_id) -> Page:
        try:
            return Page.objects.get(pk=page_id)
        except Page.DoesNotExist:
            raise ValidationError(f"No page found with ID '{page_id}'")

    @staticmethod
    def get_published(slug):
        return Page.objects.published().filter(slug=slug).first()

    @staticmethod
    def _check_slug(slug, exclude_id=None):
        others = Page.objects.filter(slug=slug)
        if exclude_id is not None:
            others = others.exclude(pk=exclude_id)
        if others.exists():
            raise ValidationError({'slug': 'This slug is already in use'})

    @staticmethod
    @transaction.atomic
    def create(dto: PageCreateDTO) -> Page:
        PageService._check_slug(dto.slug)

        page = Page(
            slug=dto.slug,
            title=dto.title,
            content=dto.content,
            meta_title=dto.meta_title or '',
            meta_description=dto.meta_description or '',
            is_published=dto.is_published,
        )
        page.full_clean()
        page.save()

        revalidate_paths(*page_paths(page.slug))
        logger.info("Page '%s' created", page.slug)
        return page

    @staticmethod
    @transaction.atomic
    def update(dto: PageUpdateDTO) -> Page:
        """
        Update a page; a changed slug must stay unique and both the old and
        the new public paths are revalidated.
        """
        page = PageService.get(dto.page_id)
        old_slug = page.slug

        if dto.slug is not None and dto.slug != old_slug:
            if page.is_system:
                raise ValidationError({'slug': 'The slug of a system page cannot be changed'})
            PageService._check_slug(dto.slug, exclude_id=page.pk)

        for field in ('slug', 'title', 'content', 'meta_title', 'meta_description', 'is_published'):
            value = getattr(dto, field)
            if value is not None:
                setattr(page, field, value)

        page.full_clean()
        page.save()

        revalidate_paths(*page_paths(old_slug, page.slug))
        return page

    @staticmethod
    @transaction.atomic
    def set_published(page_id: int, is_published: bool) -> Page:
        page = PageService.get(page_id)
        page.is_published = is_published
        page.save(update_fields=['is_published', 'updated_at'])

        revalidate_paths(*page_paths(page.slug))
        return page

    @staticmethod
    @transaction.atomic
    def delete(page_id: int) -> None:
        """
        Delete a page.

        Validates:
        - Page is not one of the system pages (model guard)
        """
        page = PageService.get(page_id)
        slug = page.slug
        page.delete()

        revalidate_paths(*page_paths(slug))
        logger.info("Page '%s' deleted", slug)
