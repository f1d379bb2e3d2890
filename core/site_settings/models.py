"""
Site-wide key/value configuration edited from the back office.
"""
from django.db import models


class SettingType(models.TextChoices):
    TEXT = 'text', 'Text'
    TEXTAREA = 'textarea', 'Text area'
    EMAIL = 'email', 'Email'
    URL = 'url', 'URL'
    IMAGE = 'image', 'Image'
    BOOLEAN = 'boolean', 'Boolean'


class Setting(models.Model):
    """
    A named configuration value.

    Values are always stored as strings; boolean settings hold 'true' or
    'false'. Read them through SettingsService, which caches them.
    """
    key = models.CharField(max_length=100, unique=True, db_index=True)
    value = models.TextField(blank=True, default='')
    label = models.CharField(max_length=200, blank=True, default='')
    group = models.CharField(max_length=50, default='general', db_index=True)
    type = models.CharField(max_length=20, choices=SettingType.choices, default=SettingType.TEXT)

    class Meta:
        db_table = 'settings'
        ordering = ['group', 'key']
        verbose_name = 'Setting'
        verbose_name_plural = 'Settings'

    def __str__(self):
        return f"{self.key} = {self.value}"
