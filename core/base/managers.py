"""
Core Base Managers Module

Provides custom managers and querysets for base models.

Exports:
    QuerySets:
        - BaseQuerySet: filter_by_search_params
        - ActiveQuerySet: active(), inactive()
        - PublishedQuerySet: published(), drafts()

    Managers:
        - ActiveManager: For ActiveFlagMixin models
        - PublishedManager: For PublishableMixin models

Usage:
    from core.base.managers import ActiveManager

    class Product(ActiveFlagMixin, models.Model):
        objects = ActiveManager()

    Product.objects.active()
"""
from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Subclasses list the text fields searched by ``search`` in
    ``search_fields``.
    """
    search_fields = ('name',)

    def filter_by_search_params(self, query_params):
        """
        Apply the free text ``search`` filter from query parameters.

        Args:
            query_params: QueryDict or dict with an optional ``search`` key

        Returns:
            Filtered QuerySet
        """
        queryset = self

        search = (query_params.get('search') or '').strip()
        if search:
            condition = Q()
            for field in self.search_fields:
                condition |= Q(**{f'{field}__icontains': search})
            queryset = queryset.filter(condition)

        return queryset


class ActiveQuerySet(BaseQuerySet):
    """QuerySet for ActiveFlagMixin models."""

    def active(self):
        return self.filter(is_active=True)

    def inactive(self):
        return self.filter(is_active=False)


class ActiveManager(models.Manager.from_queryset(ActiveQuerySet)):
    pass


class PublishedQuerySet(BaseQuerySet):
    """QuerySet for PublishableMixin models."""
    search_fields = ('title',)

    def published(self):
        return self.filter(is_published=True)

    def drafts(self):
        return self.filter(is_published=False)


class PublishedManager(models.Manager.from_queryset(PublishedQuerySet)):
    pass
