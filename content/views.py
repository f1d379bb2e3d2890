"""
API views for content pages and the home page.

Public:
    GET /
    GET /pages/<slug>/
Admin (manage_pages):
    GET|POST /admin/pages/
    GET|PUT|PATCH|DELETE /admin/pages/<id>/
    POST /admin/pages/<id>/publish/
"""
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.base.page_cache import cache_public_response
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission
from core.site_settings.services import SettingsService
from events.models import Event
from events.serializers import EventSerializer

from .models import Page
from .serializers import (
    PageCreateSerializer,
    PageSerializer,
    PageUpdateSerializer,
    PublicPageSerializer,
    PublishSerializer,
)
from .services import PageService

HOME_SLUG = 'home'
HOME_UPCOMING_EVENTS = 3


@api_view(['GET'])
@permission_classes([AllowAny])
@cache_public_response
def home(request):
    """
    Home page: site identity, the published ``home`` page, the next
    upcoming events and a few headline numbers.
    """
    home_page = PageService.get_published(HOME_SLUG)
    upcoming = Event.objects.published().filter(date__gte=timezone.now()).order_by('date')[:HOME_UPCOMING_EVENTS]

    return success_response(data={
        'config': SettingsService.get_public_config(),
        'page': PublicPageSerializer(home_page).data if home_page else None,
        'upcoming_events': EventSerializer(upcoming, many=True).data,
        'stats': {
            'events': Event.objects.published().count(),
            'members': get_user_model().objects.filter(is_active=True).count(),
        },
    })


@api_view(['GET'])
@permission_classes([AllowAny])
@cache_public_response
def page_detail(request, slug):
    page = PageService.get_published(slug)
    if page is None:
        return error_response('Page not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(data=PublicPageSerializer(page).data)


# ============================================================================
# Admin
# ============================================================================

@api_view(['GET', 'POST'])
@require_permission(Permissions.MANAGE_PAGES)
@auto_paginate
def admin_page_list(request):
    if request.method == 'GET':
        pages = Page.objects.filter_by_search_params(request.query_params)
        return success_response(data=PageSerializer(pages, many=True).data)

    serializer = PageCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid page data', data=serializer.errors)

    try:
        page = PageService.create(serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=PageSerializer(page).data,
        message='Page created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_PAGES)
def admin_page_detail(request, pk):
    if request.method == 'GET':
        page = Page.objects.filter(pk=pk).first()
        if page is None:
            return error_response('Page not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(data=PageSerializer(page).data)

    if request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['page_id'] = pk

        serializer = PageUpdateSerializer(data=data)
        if not serializer.is_valid():
            return error_response('Invalid page data', data=serializer.errors)

        try:
            page = PageService.update(serializer.to_dto())
        except ValidationError as e:
            return error_response(validation_error_message(e))

        return success_response(data=PageSerializer(page).data, message='Page updated successfully')

    try:
        PageService.delete(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='Page deleted successfully')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_PAGES)
def admin_page_publish(request, pk):
    serializer = PublishSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid publish flag', data=serializer.errors)

    try:
        page = PageService.set_published(pk, serializer.validated_data['is_published'])
    except ValidationError as e:
        return error_response(validation_error_message(e), status_code=status.HTTP_404_NOT_FOUND)

    return success_response(data=PageSerializer(page).data, message='Page updated successfully')
