"""
Order views.

Member (create_orders):
    GET|POST /member/orders/
    POST /member/orders/<id>/cancel/
Admin (manage_orders):
    GET /admin/cafeteria/orders/?status=&user=&channel=
    GET /admin/cafeteria/orders/<id>/
    POST /admin/cafeteria/orders/<id>/status/
"""
from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from rest_framework import status
from rest_framework.decorators import api_view

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from cafeteria.serializers import OrderCreateSerializer, OrderSerializer, OrderStatusSerializer
from cafeteria.services import OrderService


@api_view(['GET', 'POST'])
@require_permission(Permissions.CREATE_ORDERS)
@auto_paginate
def my_orders(request):
    if request.method == 'GET':
        orders = OrderService.list_for_user(request.user)
        return success_response(data=OrderSerializer(orders, many=True).data)

    serializer = OrderCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid order data', data=serializer.errors)

    try:
        order = OrderService.place_order(request.user, serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=OrderSerializer(order).data,
        message='Order placed successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['POST'])
@require_permission(Permissions.CREATE_ORDERS)
def my_order_cancel(request, pk):
    try:
        order = OrderService.cancel(request.user, pk)
    except ObjectDoesNotExist:
        return error_response('Order not found', status_code=status.HTTP_404_NOT_FOUND)
    except PermissionDenied as e:
        return error_response(str(e), status_code=status.HTTP_403_FORBIDDEN)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=OrderSerializer(order).data, message='Order cancelled')


@api_view(['GET'])
@require_permission(Permissions.MANAGE_ORDERS)
@auto_paginate
def order_list(request):
    orders = OrderService.list_orders(request.query_params)
    return success_response(data=OrderSerializer(orders, many=True).data)


@api_view(['GET'])
@require_permission(Permissions.MANAGE_ORDERS)
def order_detail(request, pk):
    order = OrderService.get_queryset().filter(pk=pk).first()
    if order is None:
        return error_response('Order not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(data=OrderSerializer(order).data)


@api_view(['POST'])
@require_permission(Permissions.MANAGE_ORDERS)
def order_status(request, pk):
    serializer = OrderStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid status', data=serializer.errors)

    try:
        order = OrderService.set_status(pk, serializer.validated_data['status'])
    except ObjectDoesNotExist:
        return error_response('Order not found', status_code=status.HTTP_404_NOT_FOUND)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=OrderSerializer(order).data, message='Order status updated')
