"""
Cafeteria Domain Services

Services:
- CategoryService: Category catalog management
- ProductService: Product catalog management
- StockService: Stock levels, bulk updates and catalog statistics
- OrderService: Member order placement, cancellation and status lifecycle
- PointOfSaleService: Counter sales by administrators
"""

from .catalog_service import CategoryService, ProductService
from .stock_service import StockService
from .order_service import OrderService
from .pos_service import PointOfSaleService

__all__ = [
    'CategoryService',
    'ProductService',
    'StockService',
    'OrderService',
    'PointOfSaleService',
]
