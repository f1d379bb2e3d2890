"""
API views for site settings.

Public:
    GET /site/config/

Admin (manage_settings):
    GET|PUT /admin/settings/
    PUT /admin/settings/<key>/
"""
from collections import OrderedDict

from django.core.exceptions import ValidationError
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.base.page_cache import cache_public_response
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from .serializers import SettingSerializer, SettingValueSerializer, SettingsBulkUpdateSerializer
from .services import SettingsService


def _grouped(settings_list):
    grouped = OrderedDict()
    for setting in settings_list:
        grouped.setdefault(setting.group, []).append(SettingSerializer(setting).data)
    return grouped


@api_view(['GET'])
@permission_classes([AllowAny])
@cache_public_response
def site_config(request):
    """
    Public site configuration (identity, appearance, social links,
    cafeteria information and feature flags).

    GET /site/config/
    """
    return success_response(data=SettingsService.get_public_config())


@api_view(['GET', 'PUT'])
@require_permission(Permissions.MANAGE_SETTINGS)
def admin_settings(request):
    """
    GET /admin/settings/
    - Returns: all settings grouped by group

    PUT /admin/settings/
    - Request body: { "settings": { "<key>": "<value>", ... } }
    """
    if request.method == 'GET':
        return success_response(data=_grouped(SettingsService.get_all()))

    serializer = SettingsBulkUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid settings', data=serializer.errors)

    try:
        SettingsService.update_many(serializer.validated_data['settings'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=_grouped(SettingsService.get_all()),
        message='Settings updated successfully'
    )


@api_view(['PUT'])
@require_permission(Permissions.MANAGE_SETTINGS)
def admin_setting_detail(request, key):
    """
    PUT /admin/settings/<key>/
    - Request body: { "value": "..." }
    """
    serializer = SettingValueSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid setting value', data=serializer.errors)

    try:
        setting = SettingsService.update(key, serializer.validated_data['value'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=SettingSerializer(setting).data, message='Setting updated successfully')
