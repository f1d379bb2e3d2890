from rest_framework import serializers

from .dtos import (
    CategoryCreateDTO,
    CategoryUpdateDTO,
    OrderCreateDTO,
    OrderLineDTO,
    POSOrderCreateDTO,
    ProductCreateDTO,
    ProductUpdateDTO,
    StockUpdateDTO,
)
from .models import CafeteriaOrder, OrderItem, OrderStatus, PaymentMethod, Product, ProductCategory


# ============================================================================
# Catalog
# ============================================================================

class CategorySerializer(serializers.ModelSerializer):
    product_count = serializers.SerializerMethodField()

    class Meta:
        model = ProductCategory
        fields = [
            'id', 'name', 'description', 'image', 'display_order', 'is_active',
            'product_count', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_product_count(self, obj):
        count = getattr(obj, 'product_count', None)
        return count if count is not None else obj.products.count()


class CategoryCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    display_order = serializers.IntegerField(required=False, default=0)
    is_active = serializers.BooleanField(required=False, default=True)

    def to_dto(self):
        return CategoryCreateDTO(**self.validated_data)


class CategoryUpdateSerializer(serializers.Serializer):
    category_id = serializers.IntegerField()
    name = serializers.CharField(max_length=100, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    display_order = serializers.IntegerField(required=False)
    is_active = serializers.BooleanField(required=False)

    def to_dto(self):
        return CategoryUpdateDTO(**self.validated_data)


class ProductSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'price', 'cost_price', 'image',
            'category', 'category_name', 'stock', 'is_available', 'is_active',
            'display_order', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class MemberProductSerializer(serializers.ModelSerializer):
    """Product as offered to members (no purchase price)"""

    class Meta:
        model = Product
        fields = ['id', 'name', 'description', 'price', 'image', 'stock']
        read_only_fields = fields


class CatalogCategorySerializer(serializers.ModelSerializer):
    """Active category with its active products, for the member catalog"""
    products = serializers.SerializerMethodField()

    class Meta:
        model = ProductCategory
        fields = ['id', 'name', 'description', 'image', 'products']
        read_only_fields = fields

    def get_products(self, obj):
        products = [p for p in obj.products.all() if p.is_active]
        return MemberProductSerializer(products, many=True).data


class ProductCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    cost_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True, default=None
    )
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    category_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    stock = serializers.IntegerField(required=False, min_value=0, default=0)
    is_available = serializers.BooleanField(required=False, default=True)
    is_active = serializers.BooleanField(required=False, default=True)
    display_order = serializers.IntegerField(required=False, default=0)

    def to_dto(self):
        return ProductCreateDTO(**self.validated_data)


class ProductUpdateSerializer(serializers.Serializer):
    """Partial product update; ``cost_price`` and ``category_id`` accept null"""
    name = serializers.CharField(max_length=150, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)
    cost_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    category_id = serializers.IntegerField(required=False, allow_null=True)
    stock = serializers.IntegerField(required=False, min_value=0)
    is_available = serializers.BooleanField(required=False)
    is_active = serializers.BooleanField(required=False)
    display_order = serializers.IntegerField(required=False)

    def to_dto(self, product_id):
        return ProductUpdateDTO(product_id=product_id, fields=dict(self.validated_data))


# ============================================================================
# Stock
# ============================================================================

class StockSetSerializer(serializers.Serializer):
    stock = serializers.IntegerField(min_value=0)


class StockAdjustSerializer(serializers.Serializer):
    adjustment = serializers.IntegerField()


class StockBulkItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    stock = serializers.IntegerField()

    def to_dto(self):
        return StockUpdateDTO(**self.validated_data)


class StockBulkUpdateSerializer(serializers.Serializer):
    updates = StockBulkItemSerializer(many=True, allow_empty=False)

    def to_dto(self):
        return [StockUpdateDTO(**item) for item in self.validated_data['updates']]


# ============================================================================
# Orders
# ============================================================================

class OrderLineSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True, default=None
    )


class OrderCreateSerializer(serializers.Serializer):
    items = OrderLineSerializer(many=True, allow_empty=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def to_dto(self):
        return OrderCreateDTO(
            items=[OrderLineDTO(**line) for line in self.validated_data['items']],
            notes=self.validated_data['notes'],
        )


class POSOrderCreateSerializer(OrderCreateSerializer):
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    customer_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')

    def to_dto(self):
        return POSOrderCreateDTO(
            items=[OrderLineDTO(**line) for line in self.validated_data['items']],
            payment_method=self.validated_data['payment_method'],
            notes=self.validated_data['notes'],
            customer_name=self.validated_data['customer_name'],
        )


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class OrderItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'product', 'product_name', 'quantity', 'price', 'line_total']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    user_name = serializers.CharField(source='user.name', read_only=True)
    user_email = serializers.CharField(source='user.email', read_only=True)

    class Meta:
        model = CafeteriaOrder
        fields = [
            'id', 'user', 'user_name', 'user_email', 'total', 'status', 'notes',
            'channel', 'payment_method', 'customer_name', 'items',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields
