"""
Data Transfer Objects for the cafeteria domain.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class CategoryCreateDTO:
    name: str
    description: str = ''
    image: str = ''
    display_order: int = 0
    is_active: bool = True


@dataclass
class CategoryUpdateDTO:
    category_id: int
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


@dataclass
class ProductCreateDTO:
    name: str
    price: Decimal
    description: str = ''
    cost_price: Optional[Decimal] = None
    image: str = ''
    category_id: Optional[int] = None
    stock: int = 0
    is_available: bool = True
    is_active: bool = True
    display_order: int = 0


@dataclass
class ProductUpdateDTO:
    """Partial update; fields left out of the request stay unchanged"""
    product_id: int
    fields: dict = field(default_factory=dict)


@dataclass
class OrderLineDTO:
    product_id: int
    quantity: int
    unit_price: Optional[Decimal] = None


@dataclass
class OrderCreateDTO:
    """Member order"""
    items: List[OrderLineDTO]
    notes: str = ''


@dataclass
class POSOrderCreateDTO:
    """Counter sale"""
    items: List[OrderLineDTO]
    payment_method: str
    notes: str = ''
    customer_name: str = ''


@dataclass
class StockUpdateDTO:
    product_id: int
    stock: int
