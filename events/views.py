"""
API views for events, registrations and photos.

Public:
    GET /events/?upcoming=true|false
    GET /events/<id>/
Member (register_events):
    GET|POST|DELETE /events/<id>/registration/
    GET /member/registrations/
Admin (manage_events):
    GET|POST /admin/events/
    GET|PUT|PATCH|DELETE /admin/events/<id>/
    POST /admin/events/<id>/publish/
    GET /admin/events/<id>/registrations/
    DELETE /admin/registrations/<id>/
    POST /admin/events/<id>/photos/
    PATCH|DELETE /admin/photos/<id>/
"""
from django.core.exceptions import ValidationError
from django.db.models import Count
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.base.page_cache import cache_public_response
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from .models import Event, EventRegistration
from .serializers import (
    EventCreateSerializer,
    EventDetailSerializer,
    EventSerializer,
    EventUpdateSerializer,
    MemberRegistrationSerializer,
    PhotoCaptionSerializer,
    PhotoCreateSerializer,
    PhotoSerializer,
    PublishSerializer,
    RegistrationSerializer,
)
from .services import EventService, PhotoService, RegistrationService


def _with_counts(queryset):
    return queryset.annotate(registration_count=Count('registrations'))


def _filter_upcoming(queryset, upcoming):
    if upcoming is None or upcoming == '':
        return queryset
    now = timezone.now()
    if upcoming.lower() == 'true':
        return queryset.filter(date__gte=now).order_by('date')
    return queryset.filter(date__lt=now).order_by('-date')


def _not_found(e):
    return error_response(validation_error_message(e), status_code=status.HTTP_404_NOT_FOUND)


# ============================================================================
# Public
# ============================================================================

@api_view(['GET'])
@permission_classes([AllowAny])
@cache_public_response
@auto_paginate
def event_list(request):
    events = _with_counts(Event.objects.published())
    events = _filter_upcoming(events, request.query_params.get('upcoming'))
    return success_response(data=EventSerializer(events, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
@cache_public_response
def event_detail(request, pk):
    event = _with_counts(Event.objects.published().prefetch_related('photos')).filter(pk=pk).first()
    if event is None:
        return error_response('Event not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(data=EventDetailSerializer(event).data)


# ============================================================================
# Member
# ============================================================================

@api_view(['GET', 'POST', 'DELETE'])
@require_permission(Permissions.REGISTER_EVENTS)
def event_registration(request, pk):
    """
    GET: registration status of the caller
    POST: register
    DELETE: unregister (future events only)
    """
    if request.method == 'GET':
        return success_response(data={'is_registered': RegistrationService.is_registered(request.user, pk)})

    try:
        if request.method == 'POST':
            RegistrationService.register(request.user, pk)
            return success_response(
                data={'is_registered': True},
                message='Registration confirmed',
                status_code=status.HTTP_201_CREATED
            )
        RegistrationService.unregister(request.user, pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data={'is_registered': False}, message='Registration cancelled')


@api_view(['GET'])
@require_permission(Permissions.REGISTER_EVENTS)
@auto_paginate
def my_registrations(request):
    registrations = (
        EventRegistration.objects
        .filter(user=request.user)
        .select_related('event')
        .order_by('event__date')
    )
    return success_response(data=MemberRegistrationSerializer(registrations, many=True).data)


# ============================================================================
# Admin
# ============================================================================

@api_view(['GET', 'POST'])
@require_permission(Permissions.MANAGE_EVENTS)
@auto_paginate
def admin_event_list(request):
    if request.method == 'GET':
        events = _with_counts(Event.objects.filter_by_search_params(request.query_params))

        is_published = request.query_params.get('is_published')
        if is_published:
            events = events.filter(is_published=is_published.lower() == 'true')
        events = _filter_upcoming(events, request.query_params.get('upcoming')).order_by('-date')

        return success_response(data=EventSerializer(events, many=True).data)

    serializer = EventCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid event data', data=serializer.errors)

    try:
        event = EventService.create(serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=EventSerializer(event).data,
        message='Event created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_EVENTS)
def admin_event_detail(request, pk):
    if request.method == 'GET':
        event = _with_counts(Event.objects.prefetch_related('photos')).filter(pk=pk).first()
        if event is None:
            return error_response('Event not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(data=EventDetailSerializer(event).data)

    if request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['event_id'] = pk

        serializer = EventUpdateSerializer(data=data)
        if not serializer.is_valid():
            return error_response('Invalid event data', data=serializer.errors)

        try:
            event = EventService.update(serializer.to_dto())
        except ValidationError as e:
            return error_response(validation_error_message(e))

        return success_response(data=EventSerializer(event).data, message='Event updated successfully')

    try:
        EventService.delete(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='Event deleted successfully')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_EVENTS)
def admin_event_publish(request, pk):
    """
    POST /admin/events/<id>/publish/
    - Request body: { "is_published": true | false }
    """
    serializer = PublishSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid publish flag', data=serializer.errors)

    try:
        event = EventService.set_published(pk, serializer.validated_data['is_published'])
    except ValidationError as e:
        return _not_found(e)

    return success_response(data=EventSerializer(event).data, message='Event updated successfully')


@api_view(['GET'])
@require_permission(Permissions.MANAGE_EVENTS)
@auto_paginate
def admin_event_registrations(request, pk):
    if not Event.objects.filter(pk=pk).exists():
        return error_response('Event not found', status_code=status.HTTP_404_NOT_FOUND)

    registrations = EventRegistration.objects.filter(event_id=pk).select_related('user').order_by('created_at')
    return success_response(data=RegistrationSerializer(registrations, many=True).data)


@api_view(['DELETE'])
@require_permission(Permissions.MANAGE_EVENTS)
def admin_registration_delete(request, pk):
    try:
        RegistrationService.remove(pk)
    except ValidationError as e:
        return _not_found(e)
    return success_response(message='Registration removed')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_EVENTS)
def admin_event_photos(request, pk):
    serializer = PhotoCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid photo data', data=serializer.errors)

    try:
        photo = PhotoService.add(serializer.to_dto(pk))
    except ValidationError as e:
        return _not_found(e)

    return success_response(
        data=PhotoSerializer(photo).data,
        message='Photo added successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_EVENTS)
def admin_photo_detail(request, pk):
    if request.method == 'PATCH':
        serializer = PhotoCaptionSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid photo data', data=serializer.errors)
        try:
            photo = PhotoService.update_caption(pk, serializer.validated_data['caption'])
        except ValidationError as e:
            return _not_found(e)
        return success_response(data=PhotoSerializer(photo).data, message='Photo updated successfully')

    try:
        PhotoService.delete(pk)
    except ValidationError as e:
        return _not_found(e)
    return success_response(message='Photo deleted successfully')
