import logging
from dataclasses import dataclass
from typing import List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from cafeteria.dtos import StockUpdateDTO
from cafeteria.models import LOW_STOCK_THRESHOLD, Product, ProductCategory

logger = logging.getLogger(__name__)


@dataclass
class StockUpdateResult:
    product_id: int
    success: bool
    stock: Optional[int] = None
    error: str = ''

    def to_dict(self):
        return {
            'product_id': self.product_id,
            'success': self.success,
            'stock': self.stock,
            'error': self.error,
        }


class StockService:
    """Stock levels of cafeteria products"""

    @staticmethod
    def products_with_stock():
        """Active products, emptiest first."""
        return (
            Product.objects.active()
            .select_related('category')
            .order_by('stock', 'name')
        )

    @staticmethod
    @transaction.atomic
    def set_stock(product_id: int, stock: int) -> Product:
        """
        Set an absolute stock level.

        The product becomes available exactly when it has units left.
        """
        if stock is None or stock < 0:
            raise ValidationError('Stock cannot be negative')

        updated = Product.objects.filter(pk=product_id).update(
            stock=stock,
            is_available=stock > 0,
            updated_at=timezone.now(),
        )
        if not updated:
            raise ValidationError(f"No product found with ID '{product_id}'")

        logger.info("Stock of product %s set to %s", product_id, stock)
        return Product.objects.get(pk=product_id)

    @staticmethod
    @transaction.atomic
    def adjust_stock(product_id: int, delta: int) -> Product:
        """
        Add ``delta`` units (negative to remove).

        The resulting stock must stay at zero or above; the check and the
        write happen in one conditional UPDATE.
        """
        if not Product.objects.filter(pk=product_id).exists():
            raise ValidationError(f"No product found with ID '{product_id}'")

        queryset = Product.objects.filter(pk=product_id)
        if delta < 0:
            queryset = queryset.filter(stock__gte=-delta)

        updated = queryset.update(stock=F('stock') + delta, updated_at=timezone.now())
        if not updated:
            raise ValidationError('Insufficient stock')

        product = Product.objects.get(pk=product_id)
        available = product.stock > 0
        if product.is_available != available:
            product.is_available = available
            product.save(update_fields=['is_available', 'updated_at'])

        logger.info("Stock of product %s adjusted by %s to %s", product_id, delta, product.stock)
        return product

    @staticmethod
    def bulk_update(updates: List[StockUpdateDTO]) -> List[StockUpdateResult]:
        """
        Apply several absolute stock updates.

        Each entry succeeds or fails on its own; the report lists every
        entry in input order.
        """
        results = []
        for update in updates:
            try:
                product = StockService.set_stock(update.product_id, update.stock)
            except ValidationError as e:
                results.append(StockUpdateResult(
                    product_id=update.product_id,
                    success=False,
                    error='; '.join(e.messages),
                ))
            else:
                results.append(StockUpdateResult(
                    product_id=product.pk,
                    success=True,
                    stock=product.stock,
                ))
        return results

    @staticmethod
    def restore(product_id: int, quantity: int) -> None:
        """Put units of a cancelled order back on the shelf."""
        Product.objects.filter(pk=product_id).update(
            stock=F('stock') + quantity,
            updated_at=timezone.now(),
        )

    @staticmethod
    def stats() -> dict:
        active = Product.objects.active()
        return {
            'total_products': active.count(),
            'available_products': active.filter(is_available=True, stock__gt=0).count(),
            'out_of_stock': active.filter(stock=0).count(),
            'active_categories': ProductCategory.objects.active().count(),
            'low_stock': active.filter(stock__gt=0, stock__lte=LOW_STOCK_THRESHOLD).count(),
        }
