from django.db import models


class TimestampMixin(models.Model):
    """
    Adds creation and modification timestamps.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified

    Usage:
        class Event(TimestampMixin):
            title = models.CharField(max_length=200)
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class ActiveFlagMixin(models.Model):
    """
    Mixin for catalog records that can be hidden without deletion.

    Fields:
        - is_active: Inactive records stay in the database (orders keep
          pointing at them) but are no longer offered

    Methods:
        - deactivate(): Marks record as inactive
        - reactivate(): Marks record as active again
    """
    is_active = models.BooleanField(
        default=True,
        help_text="Inactive records are hidden from members"
    )

    class Meta:
        abstract = True

    def deactivate(self):
        self.is_active = False
        self.save()

    def reactivate(self):
        self.is_active = True
        self.save()

    def update_fields(self, field_updates: dict):
        """
        Update several fields at once, validating before saving.

        Example:
            product.update_fields({'name': 'Espresso', 'price': Decimal('1.20')})
        """
        for field_name, value in field_updates.items():
            setattr(self, field_name, value)
        self.full_clean()
        self.save()
        return self


class PublishableMixin(models.Model):
    """Adds the publish flag shared by events and content pages."""
    is_published = models.BooleanField(
        default=False,
        help_text="Unpublished records are only visible in the back office"
    )

    class Meta:
        abstract = True
