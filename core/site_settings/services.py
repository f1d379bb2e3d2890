"""
Settings accessor.

Read-through cache over the Setting table. Every write invalidates the
cache entries it touches, so a change is visible on the next request.
"""
import logging
from typing import Dict, Iterable, List

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.db import transaction

from core.base.page_cache import revalidate_paths
from core.site_settings.defaults import DEFAULTS_BY_KEY, PUBLIC_GROUPS
from core.site_settings.models import Setting, SettingType

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = 'site_setting:'

# Public responses rendering settings
SETTINGS_PATHS = ('/', '/site/config/')


def _cache_key(key):
    return f'{CACHE_KEY_PREFIX}{key}'


def _default_value(key):
    default = DEFAULTS_BY_KEY.get(key)
    return default['value'] if default else ''


class SettingsService:
    """Service for reading and writing site settings"""

    @staticmethod
    def get(key: str) -> str:
        """
        Return the value of a setting.

        Missing rows fall back to the seeded default value, then to ''.
        """
        cache_key = _cache_key(key)
        value = cache.get(cache_key)
        if value is not None:
            return value

        value = Setting.objects.filter(key=key).values_list('value', flat=True).first()
        if value is None:
            value = _default_value(key)

        cache.set(cache_key, value, settings.SITE_SETTINGS_CACHE_TTL)
        return value

    @staticmethod
    def get_many(keys: Iterable[str]) -> Dict[str, str]:
        keys = list(keys)
        found = cache.get_many([_cache_key(k) for k in keys])
        result = {}
        missing = []
        for key in keys:
            cached = found.get(_cache_key(key))
            if cached is None:
                missing.append(key)
            else:
                result[key] = cached

        if missing:
            rows = dict(Setting.objects.filter(key__in=missing).values_list('key', 'value'))
            fresh = {}
            for key in missing:
                value = rows.get(key)
                if value is None:
                    value = _default_value(key)
                result[key] = value
                fresh[_cache_key(key)] = value
            cache.set_many(fresh, settings.SITE_SETTINGS_CACHE_TTL)

        return result

    @staticmethod
    def get_all() -> List[Setting]:
        return list(Setting.objects.order_by('group', 'key'))

    @staticmethod
    def get_group(group: str) -> List[Setting]:
        return list(Setting.objects.filter(group=group).order_by('key'))

    @staticmethod
    def get_public_config() -> Dict[str, str]:
        """Values of every publicly visible setting, defaults included."""
        keys = [k for k, d in DEFAULTS_BY_KEY.items() if d['group'] in PUBLIC_GROUPS]
        keys += list(
            Setting.objects.filter(group__in=PUBLIC_GROUPS)
            .exclude(key__in=keys)
            .values_list('key', flat=True)
        )
        return SettingsService.get_many(keys)

    @staticmethod
    @transaction.atomic
    def update(key: str, value) -> Setting:
        """
        Create or update a setting and invalidate its cached value.

        Boolean settings only accept 'true' or 'false'.
        """
        key = (key or '').strip()
        if not key:
            raise ValidationError('Setting key is required')

        value = '' if value is None else str(value)
        default = DEFAULTS_BY_KEY.get(key, {})

        setting = Setting.objects.filter(key=key).first()
        setting_type = setting.type if setting else default.get('type', SettingType.TEXT)
        if setting_type == SettingType.BOOLEAN:
            value = value.strip().lower()
            if value not in ('true', 'false'):
                raise ValidationError(f"Setting '{key}' must be 'true' or 'false'")

        if setting is None:
            setting = Setting(
                key=key,
                label=default.get('label', key),
                group=default.get('group', 'general'),
                type=setting_type,
            )
        setting.value = value
        setting.save()

        SettingsService.invalidate(key)
        revalidate_paths(*SETTINGS_PATHS)
        logger.info("Setting '%s' updated", key)
        return setting

    @staticmethod
    @transaction.atomic
    def update_many(values: Dict[str, str]) -> List[Setting]:
        """Update several settings at once; all or nothing."""
        return [SettingsService.update(key, value) for key, value in values.items()]

    @staticmethod
    def invalidate(*keys: str):
        cache.delete_many([_cache_key(k) for k in keys])

    @staticmethod
    def clear_cache():
        keys = set(DEFAULTS_BY_KEY) | set(Setting.objects.values_list('key', flat=True))
        SettingsService.invalidate(*keys)

    @staticmethod
    def is_feature_enabled(key: str) -> bool:
        return SettingsService.get(key) == 'true'

    @staticmethod
    def is_maintenance_mode() -> bool:
        return SettingsService.is_feature_enabled('maintenance_mode')

    @staticmethod
    def seed_defaults() -> int:
        """Insert missing default settings without touching existing values."""
        created = 0
        for entry in DEFAULTS_BY_KEY.values():
            _, was_created = Setting.objects.get_or_create(
                key=entry['key'],
                defaults={k: v for k, v in entry.items() if k != 'key'}
            )
            created += int(was_created)
        SettingsService.clear_cache()
        return created
