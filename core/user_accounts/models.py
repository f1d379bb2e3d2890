"""
User Account Models
Handles authentication identity, role and account status.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.core.exceptions import ValidationError
from django.db import models

from core.base.managers import BaseQuerySet
from core.base.models import TimestampMixin
from core.permissions.core_config import Roles


class UserQuerySet(BaseQuerySet):
    search_fields = ('name', 'email')


class UserManager(BaseUserManager.from_queryset(UserQuerySet)):
    """
    Manager for User model.
    Handles user creation with a role.
    """

    def create_user(self, email, name, password=None, role=Roles.MEMBER, **extra_fields):
        """
        Create and save a user.

        Args:
            email: User's email address (used for authentication)
            name: User's display name
            password: User's password (will be hashed)
            role: Roles.ADMIN or Roles.MEMBER
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')

        user = self.model(
            email=self.normalize_email(email).lower(),
            name=name,
            role=role,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """
        Create and save an administrator.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(email=email, name=name, password=password, role=Roles.ADMIN, **extra_fields)


class User(TimestampMixin, AbstractBaseUser):
    """Association member or administrator, authenticated by email"""
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=Roles.choices, default=Roles.MEMBER, db_index=True)
    is_active = models.BooleanField(
        default=True,
        help_text="Inactive accounts cannot sign in; their history is kept"
    )
    image = models.CharField(max_length=500, blank=True, default='')

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.name} ({self.email})"

    def is_admin(self):
        return self.role == Roles.ADMIN

    # Django admin site integration
    @property
    def is_staff(self):
        return self.is_active and self.is_admin()

    @property
    def is_superuser(self):
        return self.is_staff

    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def delete(self, *args, **kwargs):
        """
        Refuse deletion while the user still owns orders or registrations.
        Deactivate the account instead to keep its history.
        """
        if self.cafeteria_orders.exists() or self.event_registrations.exists():
            raise ValidationError(
                "Cannot delete a user who has orders or event registrations. Deactivate the account instead."
            )
        return super().delete(*args, **kwargs)
