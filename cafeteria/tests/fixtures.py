"""
Shared builders for cafeteria tests.
"""
from decimal import Decimal

from cafeteria.models import CafeteriaOrder, OrderItem, OrderStatus, Product, ProductCategory


def create_category(name='Hot drinks', **extra):
    return ProductCategory.objects.create(name=name, **extra)


def create_product(name='Coffee', price='1.50', stock=10, category=None, **extra):
    return Product.objects.create(
        name=name,
        price=Decimal(price),
        stock=stock,
        category=category,
        **extra
    )


def create_order(user, product, quantity=1, status=OrderStatus.PENDING, **extra):
    """Order row written directly, without touching stock."""
    order = CafeteriaOrder.objects.create(
        user=user,
        total=product.price * quantity,
        status=status,
        **extra
    )
    OrderItem.objects.create(order=order, product=product, quantity=quantity, price=product.price)
    return order
