"""
Stock views (manage_orders).

    GET /admin/cafeteria/stock/
    PUT /admin/cafeteria/stock/bulk/
    PUT /admin/cafeteria/products/<id>/stock/
    POST /admin/cafeteria/products/<id>/stock/adjust/
    GET /admin/cafeteria/stats/
"""
from django.core.exceptions import ValidationError
from rest_framework.decorators import api_view

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from cafeteria.serializers import (
    ProductSerializer,
    StockAdjustSerializer,
    StockBulkUpdateSerializer,
    StockSetSerializer,
)
from cafeteria.services import StockService


@api_view(['GET'])
@require_permission(Permissions.MANAGE_ORDERS)
@auto_paginate
def stock_list(request):
    products = StockService.products_with_stock()
    return success_response(data=ProductSerializer(products, many=True).data)


@api_view(['PUT'])
@require_permission(Permissions.MANAGE_ORDERS)
def stock_set(request, pk):
    serializer = StockSetSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid stock value', data=serializer.errors)

    try:
        product = StockService.set_stock(pk, serializer.validated_data['stock'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=ProductSerializer(product).data, message='Stock updated')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_ORDERS)
def stock_adjust(request, pk):
    serializer = StockAdjustSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid stock adjustment', data=serializer.errors)

    try:
        product = StockService.adjust_stock(pk, serializer.validated_data['adjustment'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=ProductSerializer(product).data, message='Stock adjusted')


@api_view(['PUT'])
@require_permission(Permissions.MANAGE_ORDERS)
def stock_bulk_update(request):
    """
    Body: {"updates": [{"product_id": 1, "stock": 10}, ...]}

    Always answers 200 with one result per entry; failed entries carry
    their error message.
    """
    serializer = StockBulkUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid stock data', data=serializer.errors)

    results = StockService.bulk_update(serializer.to_dto())
    failed = sum(1 for result in results if not result.success)

    message = 'Stock updated' if not failed else f'{failed} update(s) failed'
    return success_response(data=[result.to_dict() for result in results], message=message)


@api_view(['GET'])
@require_permission(Permissions.MANAGE_ORDERS)
def cafeteria_stats(request):
    return success_response(data=StockService.stats())
