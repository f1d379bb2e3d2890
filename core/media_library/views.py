"""
Back-office media library endpoints (manage_media).

POST   /admin/media/upload/   multipart "files"
GET    /admin/media/?type=
PATCH  /admin/media/<id>/
DELETE /admin/media/<id>/
"""
from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import FormParser, MultiPartParser

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from .models import Media
from .serializers import MediaAltSerializer, MediaSerializer
from .services import MediaService


@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
@require_permission(Permissions.MANAGE_MEDIA)
def media_upload(request):
    files = request.FILES.getlist('files')
    if not files:
        return error_response('No file provided')

    report = MediaService.upload(files)
    data = {
        'uploaded': MediaSerializer(report.uploaded, many=True).data,
        'rejected': report.rejected,
    }
    if not report.uploaded:
        return error_response('No file could be uploaded', data=data)

    return success_response(
        data=data,
        message=f'{len(report.uploaded)} file(s) uploaded',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@require_permission(Permissions.MANAGE_MEDIA)
@auto_paginate
def media_list(request):
    media = Media.objects.all()

    media_type = request.query_params.get('type')
    if media_type:
        media = media.filter(type=media_type)

    return success_response(data=MediaSerializer(media, many=True).data)


@api_view(['PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_MEDIA)
def media_detail(request, pk):
    if request.method == 'PATCH':
        serializer = MediaAltSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid media data', data=serializer.errors)
        try:
            media = MediaService.update_alt(pk, serializer.validated_data['alt'])
        except ValidationError as e:
            return error_response(validation_error_message(e), status_code=status.HTTP_404_NOT_FOUND)
        return success_response(data=MediaSerializer(media).data, message='Media updated successfully')

    try:
        MediaService.delete(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e), status_code=status.HTTP_404_NOT_FOUND)
    return success_response(message='Media deleted successfully')
