import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count

from core.permissions.core_config import Roles
from core.site_settings.services import SettingsService

from .dtos import PasswordChangeDTO, ProfileUpdateDTO, UserRegisterDTO
from .models import User

logger = logging.getLogger(__name__)


class UserAccountService:
    """Service for account lifecycle and back-office user management"""

    @staticmethod
    def with_activity_counts(queryset=None):
        queryset = User.objects.all() if queryset is None else queryset
        return queryset.annotate(
            registration_count=Count('event_registrations', distinct=True),
            order_count=Count('cafeteria_orders', distinct=True),
        )

    @staticmethod
    @transaction.atomic
    def register(dto: UserRegisterDTO) -> User:
        """
        Create an active member account.

        Validates:
        - Sign-up is open (setting registration_open)
        - Email not already used
        """
        if SettingsService.get('registration_open') == 'false':
            raise ValidationError('Registrations are closed')

        if User.objects.filter(email__iexact=dto.email).exists():
            raise ValidationError({'email': 'Email already registered'})

        user = User.objects.create_user(
            email=dto.email,
            name=dto.name,
            password=dto.password,
            role=Roles.MEMBER,
        )
        logger.info("New member registered: %s", user.email)
        return user

    @staticmethod
    @transaction.atomic
    def update_profile(user: User, dto: ProfileUpdateDTO) -> User:
        if dto.email is not None and dto.email != user.email:
            if User.objects.filter(email__iexact=dto.email).exclude(pk=user.pk).exists():
                raise ValidationError({'email': 'Email already registered'})
            user.email = dto.email
        if dto.name is not None:
            user.name = dto.name
        user.save()
        return user

    @staticmethod
    @transaction.atomic
    def change_password(user: User, dto: PasswordChangeDTO) -> User:
        if not user.check_password(dto.current_password):
            raise ValidationError({'current_password': 'Current password is incorrect'})
        user.set_password(dto.new_password)
        user.save()
        return user

    @staticmethod
    def _get_target(user_id) -> User:
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise ValidationError(f"No user found with ID '{user_id}'")

    @staticmethod
    @transaction.atomic
    def set_role(actor: User, user_id: int, role: str) -> User:
        """Change a user's role. Administrators cannot demote themselves."""
        target = UserAccountService._get_target(user_id)
        if target.pk == actor.pk and role != Roles.ADMIN:
            raise ValidationError('You cannot remove your own administrator role')

        target.role = role
        target.save()
        logger.info("User %s role set to %s by %s", target.email, role, actor.email)
        return target

    @staticmethod
    @transaction.atomic
    def set_active(actor: User, user_id: int, is_active: bool) -> User:
        """Activate or deactivate an account. Administrators cannot deactivate themselves."""
        target = UserAccountService._get_target(user_id)
        if target.pk == actor.pk and not is_active:
            raise ValidationError('You cannot deactivate your own account')

        target.is_active = is_active
        target.save()
        logger.info(
            "User %s %s by %s",
            target.email, 'activated' if is_active else 'deactivated', actor.email
        )
        return target

    @staticmethod
    @transaction.atomic
    def delete_user(actor: User, user_id: int) -> None:
        """
        Delete an account.

        Validates:
        - Not the caller's own account
        - No orders or event registrations (model guard)
        """
        target = UserAccountService._get_target(user_id)
        if target.pk == actor.pk:
            raise ValidationError('You cannot delete your own account')

        email = target.email
        target.delete()
        logger.info("User %s deleted by %s", email, actor.email)
