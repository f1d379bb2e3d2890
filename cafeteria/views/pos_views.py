from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.decorators import api_view

from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.decorators import require_admin

from cafeteria.serializers import OrderSerializer, POSOrderCreateSerializer
from cafeteria.services import PointOfSaleService


@api_view(['POST'])
@require_admin
def pos_order_create(request):
    """POST /admin/cafeteria/pos/orders/ : record a counter sale."""
    serializer = POSOrderCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid sale data', data=serializer.errors)

    try:
        order = PointOfSaleService.create_sale(request.user, serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=OrderSerializer(order).data,
        message='Sale recorded',
        status_code=status.HTTP_201_CREATED
    )
