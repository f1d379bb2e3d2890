import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from cafeteria.dtos import CategoryCreateDTO, CategoryUpdateDTO, ProductCreateDTO, ProductUpdateDTO
from cafeteria.models import Product, ProductCategory

logger = logging.getLogger(__name__)

PRODUCT_UPDATABLE_FIELDS = (
    'name', 'description', 'price', 'cost_price', 'image', 'category_id',
    'stock', 'is_available', 'is_active', 'display_order',
)


class CategoryService:
    """Service for ProductCategory business logic"""

    @staticmethod
    def get(category_id) -> ProductCategory:
        try:
            return ProductCategory.objects.get(pk=category_id)
        except ProductCategory.DoesNotExist:
            raise ValidationError(f"No category found with ID '{category_id}'")

    @staticmethod
    @transaction.atomic
    def create(dto: CategoryCreateDTO) -> ProductCategory:
        category = ProductCategory(
            name=dto.name,
            description=dto.description or '',
            image=dto.image or '',
            display_order=dto.display_order,
            is_active=dto.is_active,
        )
        category.full_clean()
        category.save()
        return category

    @staticmethod
    @transaction.atomic
    def update(dto: CategoryUpdateDTO) -> ProductCategory:
        category = CategoryService.get(dto.category_id)
        updates = {
            name: getattr(dto, name)
            for name in ('name', 'description', 'image', 'display_order', 'is_active')
            if getattr(dto, name) is not None
        }
        return category.update_fields(updates)

    @staticmethod
    @transaction.atomic
    def delete(category_id: int) -> None:
        """
        Delete a category.

        Validates:
        - No product belongs to it (model guard, message carries the count)
        """
        category = CategoryService.get(category_id)
        category.delete()
        logger.info("Category %s deleted", category_id)


class ProductService:
    """Service for Product business logic"""

    @staticmethod
    def get(product_id) -> Product:
        try:
            return Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise ValidationError(f"No product found with ID '{product_id}'")

    @staticmethod
    def _check_category(category_id):
        if category_id is not None and not ProductCategory.objects.filter(pk=category_id).exists():
            raise ValidationError({'category_id': 'Category not found'})

    @staticmethod
    @transaction.atomic
    def create(dto: ProductCreateDTO) -> Product:
        ProductService._check_category(dto.category_id)
        if dto.stock < 0:
            raise ValidationError({'stock': 'Stock cannot be negative'})

        product = Product(
            name=dto.name,
            description=dto.description or '',
            price=dto.price,
            cost_price=dto.cost_price,
            image=dto.image or '',
            category_id=dto.category_id,
            stock=dto.stock,
            is_available=dto.is_available,
            is_active=dto.is_active,
            display_order=dto.display_order,
        )
        product.full_clean()
        product.save()
        logger.info("Product '%s' created", product.name)
        return product

    @staticmethod
    @transaction.atomic
    def update(dto: ProductUpdateDTO) -> Product:
        product = ProductService.get(dto.product_id)
        updates = {k: v for k, v in dto.fields.items() if k in PRODUCT_UPDATABLE_FIELDS}

        if 'category_id' in updates:
            ProductService._check_category(updates['category_id'])
        if updates.get('stock') is not None and updates['stock'] < 0:
            raise ValidationError({'stock': 'Stock cannot be negative'})

        return product.update_fields(updates)

    @staticmethod
    @transaction.atomic
    def delete(product_id: int) -> None:
        product = ProductService.get(product_id)
        product.delete()
        logger.info("Product %s deleted", product_id)

    @staticmethod
    @transaction.atomic
    def toggle_availability(product_id: int) -> Product:
        product = ProductService.get(product_id)
        product.is_available = not product.is_available
        product.save(update_fields=['is_available', 'updated_at'])
        return product

    @staticmethod
    @transaction.atomic
    def toggle_active(product_id: int) -> Product:
        product = ProductService.get(product_id)
        if product.is_active:
            product.deactivate()
        else:
            product.reactivate()
        return product
