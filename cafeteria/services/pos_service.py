import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from cafeteria.dtos import POSOrderCreateDTO
from cafeteria.models import CafeteriaOrder, OrderChannel, OrderStatus, PaymentMethod
from cafeteria.services.order_service import create_order_items, reserve_lines

logger = logging.getLogger(__name__)


class PointOfSaleService:
    """Counter sales rung up by an administrator"""

    @staticmethod
    @transaction.atomic
    def create_sale(cashier, dto: POSOrderCreateDTO) -> CafeteriaOrder:
        """
        Record a sale paid at the counter.

        Lines are validated and stock decremented exactly like member
        orders. The sale is already paid and handed over, so the order is
        created DELIVERED and attributed to the cashier.
        """
        if dto.payment_method not in PaymentMethod.values:
            raise ValidationError(f"Invalid payment method '{dto.payment_method}'")

        total, reserved = reserve_lines(dto.items)

        order = CafeteriaOrder.objects.create(
            user=cashier,
            total=total,
            notes=dto.notes or '',
            status=OrderStatus.DELIVERED,
            channel=OrderChannel.POS,
            payment_method=dto.payment_method,
            customer_name=dto.customer_name or '',
        )
        create_order_items(order, reserved)

        logger.info(
            "POS sale %s recorded by %s (%s, total %s)",
            order.pk, cashier.pk, dto.payment_method, total
        )
        return order
