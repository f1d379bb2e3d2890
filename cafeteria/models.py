"""
Cafeteria Models
Product catalog with stock, member orders and point-of-sale sales.
"""
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from core.base.managers import ActiveManager, ActiveQuerySet
from core.base.models import ActiveFlagMixin, TimestampMixin

# Products at or below this many units (and above zero) count as low stock
LOW_STOCK_THRESHOLD = 5


class ProductCategory(TimestampMixin, ActiveFlagMixin):
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    image = models.CharField(max_length=500, blank=True, default='')
    display_order = models.IntegerField(default=0)

    objects = ActiveManager()

    class Meta:
        db_table = 'product_categories'
        ordering = ['display_order', 'name']
        verbose_name = 'Product Category'
        verbose_name_plural = 'Product Categories'

    def __str__(self):
        return self.name

    def delete(self, *args, **kwargs):
        """Refuse deletion while products still belong to the category."""
        product_count = self.products.count()
        if product_count:
            raise ValidationError(
                f"Cannot delete this category because it contains {product_count} product(s). "
                f"Move or delete the products first."
            )
        return super().delete(*args, **kwargs)


class ProductQuerySet(ActiveQuerySet):
    search_fields = ('name', 'description')

    def orderable(self):
        """Products a member can currently order."""
        return self.filter(is_active=True, is_available=True, stock__gt=0)


class Product(TimestampMixin, ActiveFlagMixin):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    cost_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Purchase price, used for margin reporting"
    )
    image = models.CharField(max_length=500, blank=True, default='')
    category = models.ForeignKey(
        ProductCategory,
        on_delete=models.PROTECT,
        related_name='products',
        null=True,
        blank=True
    )
    stock = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    is_available = models.BooleanField(default=True)
    display_order = models.IntegerField(default=0)

    objects = models.Manager.from_queryset(ProductQuerySet)()

    class Meta:
        db_table = 'products'
        ordering = ['display_order', 'name']
        constraints = [
            models.CheckConstraint(condition=Q(stock__gte=0), name='product_stock_non_negative'),
        ]

    def __str__(self):
        return self.name

    def delete(self, *args, **kwargs):
        if self.order_items.exists():
            raise ValidationError(
                f"Cannot delete {self.name}: it appears in existing orders. Deactivate it instead."
            )
        return super().delete(*args, **kwargs)


class OrderStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    CONFIRMED = 'CONFIRMED', 'Confirmed'
    PREPARING = 'PREPARING', 'Preparing'
    READY = 'READY', 'Ready'
    DELIVERED = 'DELIVERED', 'Delivered'
    CANCELLED = 'CANCELLED', 'Cancelled'


# Single-step admin transitions; CANCELLED only from PENDING
ORDER_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PREPARING},
    OrderStatus.PREPARING: {OrderStatus.READY},
    OrderStatus.READY: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


class OrderChannel(models.TextChoices):
    ONLINE = 'ONLINE', 'Online'
    POS = 'POS', 'Point of sale'


class PaymentMethod(models.TextChoices):
    CASH = 'CASH', 'Cash'
    CARD = 'CARD', 'Card'
    SUMUP = 'SUMUP', 'SumUp'


class CafeteriaOrder(TimestampMixin):
    """
    An order placed by a member (ONLINE) or rung up at the counter (POS).

    ``total`` is the sum of item price x quantity at creation time.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='cafeteria_orders'
    )
    total = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING, db_index=True)
    notes = models.TextField(blank=True, default='')
    channel = models.CharField(max_length=10, choices=OrderChannel.choices, default=OrderChannel.ONLINE)
    payment_method = models.CharField(max_length=10, choices=PaymentMethod.choices, blank=True, default='')
    customer_name = models.CharField(max_length=150, blank=True, default='')

    class Meta:
        db_table = 'cafeteria_orders'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Order #{self.pk} ({self.status})"


class OrderItem(models.Model):
    order = models.ForeignKey(CafeteriaOrder, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name='order_items')
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Unit price snapshotted when the order was placed"
    )

    class Meta:
        db_table = 'order_items'
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gte=1), name='order_item_quantity_positive'),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product}"

    @property
    def line_total(self):
        return self.price * self.quantity
