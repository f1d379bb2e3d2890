import logging
from decimal import Decimal
from typing import List

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from cafeteria.dtos import OrderCreateDTO, OrderLineDTO
from cafeteria.models import (
    ORDER_TRANSITIONS,
    CafeteriaOrder,
    OrderChannel,
    OrderItem,
    OrderStatus,
    Product,
)
from cafeteria.services.stock_service import StockService
from core.site_settings.services import SettingsService

logger = logging.getLogger(__name__)


def reserve_lines(lines: List[OrderLineDTO]):
    """
    Validate order lines and take their units out of stock.

    Must run inside a transaction: every line is decremented with a
    conditional UPDATE (``stock >= quantity``), so a line that finds too
    few units raises and rolls back the decrements already applied.

    Returns:
        (total, [(product, quantity, unit_price), ...])
    """
    if not lines:
        raise ValidationError('Your cart is empty')

    products = Product.objects.in_bulk([line.product_id for line in lines])
    total = Decimal('0')
    reserved = []

    for line in lines:
        if line.quantity < 1:
            raise ValidationError('Quantity must be at least 1')

        product = products.get(line.product_id)
        if product is None:
            raise ValidationError('Product not found')

        if not product.is_active or not product.is_available:
            raise ValidationError(f'{product.name} is no longer available')

        if line.unit_price is not None and Decimal(line.unit_price) != product.price:
            raise ValidationError(f'The price of {product.name} has changed')

        updated = Product.objects.filter(pk=product.pk, stock__gte=line.quantity).update(
            stock=F('stock') - line.quantity,
            updated_at=timezone.now(),
        )
        if not updated:
            raise ValidationError(f'Insufficient stock for {product.name}')

        total += product.price * line.quantity
        reserved.append((product, line.quantity, product.price))

    return total, reserved


def create_order_items(order, reserved):
    OrderItem.objects.bulk_create([
        OrderItem(order=order, product=product, quantity=quantity, price=price)
        for product, quantity, price in reserved
    ])


class OrderService:
    """Service for cafeteria order placement and lifecycle"""

    @staticmethod
    def get_queryset():
        return (
            CafeteriaOrder.objects
            .select_related('user')
            .prefetch_related('items__product')
        )

    @staticmethod
    def list_for_user(user):
        return OrderService.get_queryset().filter(user=user)

    @staticmethod
    def list_orders(query_params=None):
        orders = OrderService.get_queryset()
        query_params = query_params or {}

        status = query_params.get('status')
        if status:
            orders = orders.filter(status=status.upper())

        user_id = query_params.get('user')
        if user_id:
            orders = orders.filter(user_id=user_id)

        channel = query_params.get('channel')
        if channel:
            orders = orders.filter(channel=channel.upper())

        return orders

    @staticmethod
    @transaction.atomic
    def place_order(user, dto: OrderCreateDTO) -> CafeteriaOrder:
        """
        Place a member order.

        Validates:
        - Ordering is enabled (setting ``orders_enabled``)
        - Cart is not empty
        - Every product exists, is active and available
        - Every line has enough stock (checked and decremented atomically)
        """
        if SettingsService.get('orders_enabled') == 'false':
            raise ValidationError('Orders are currently disabled')

        total, reserved = reserve_lines(dto.items)

        order = CafeteriaOrder.objects.create(
            user=user,
            total=total,
            notes=dto.notes or '',
            status=OrderStatus.PENDING,
            channel=OrderChannel.ONLINE,
        )
        create_order_items(order, reserved)

        logger.info("Order %s placed by user %s (total %s)", order.pk, user.pk, total)
        return order

    @staticmethod
    def _lock(order_id) -> CafeteriaOrder:
        """Row-lock the order; raises CafeteriaOrder.DoesNotExist for an unknown id."""
        return CafeteriaOrder.objects.select_for_update().get(pk=order_id)

    @staticmethod
    def _restore_stock(order):
        for item in order.items.all():
            StockService.restore(item.product_id, item.quantity)

    @staticmethod
    @transaction.atomic
    def cancel(user, order_id: int) -> CafeteriaOrder:
        """
        Cancel the caller's own order while it is still PENDING.

        The order row is locked and its status re-checked inside the
        transaction, so stock is only put back once.
        """
        order = OrderService._lock(order_id)

        if order.user_id != user.pk:
            raise PermissionDenied('You cannot cancel this order')

        if order.status != OrderStatus.PENDING:
            raise ValidationError('This order can no longer be cancelled')

        OrderService._restore_stock(order)
        order.status = OrderStatus.CANCELLED
        order.save(update_fields=['status', 'updated_at'])

        logger.info("Order %s cancelled by user %s", order.pk, user.pk)
        return order

    @staticmethod
    @transaction.atomic
    def set_status(order_id: int, status: str) -> CafeteriaOrder:
        """
        Move an order one step along its lifecycle.

        PENDING -> CONFIRMED -> PREPARING -> READY -> DELIVERED, or
        PENDING -> CANCELLED (stock restored).
        """
        if status not in OrderStatus.values:
            raise ValidationError(f"Invalid status '{status}'")

        order = OrderService._lock(order_id)
        current = OrderStatus(order.status)

        if status not in ORDER_TRANSITIONS[current]:
            raise ValidationError(
                f"Cannot change order status from {current.value} to {status}"
            )

        if status == OrderStatus.CANCELLED:
            OrderService._restore_stock(order)

        order.status = status
        order.save(update_fields=['status', 'updated_at'])

        logger.info("Order %s moved from %s to %s", order.pk, current.value, status)
        return order
