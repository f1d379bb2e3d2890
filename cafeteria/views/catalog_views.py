"""
Catalog views: categories and products.

Member (create_orders):
    GET /member/cafeteria/
Admin (manage_orders):
    GET|POST /admin/cafeteria/categories/
    GET|PUT|PATCH|DELETE /admin/cafeteria/categories/<id>/
    GET|POST /admin/cafeteria/products/
    GET /admin/cafeteria/products/available/
    GET|PUT|PATCH|DELETE /admin/cafeteria/products/<id>/
    POST /admin/cafeteria/products/<id>/toggle-availability/
    POST /admin/cafeteria/products/<id>/toggle-active/
"""
from django.core.exceptions import ValidationError
from django.db.models import Count, Prefetch
from rest_framework import status
from rest_framework.decorators import api_view

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission
from core.site_settings.services import SettingsService

from cafeteria.models import Product, ProductCategory
from cafeteria.serializers import (
    CatalogCategorySerializer,
    CategoryCreateSerializer,
    CategorySerializer,
    CategoryUpdateSerializer,
    MemberProductSerializer,
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)
from cafeteria.services import CategoryService, ProductService


def _flag(value):
    if value is None or value == '':
        return None
    return value.lower() == 'true'


@api_view(['GET'])
@require_permission(Permissions.CREATE_ORDERS)
def member_catalog(request):
    """
    Active categories with their active products, the products a member
    can order right now, and the cafeteria notice.
    """
    categories = ProductCategory.objects.active().prefetch_related(
        Prefetch('products', queryset=Product.objects.active().order_by('display_order', 'name'))
    )
    available = Product.objects.orderable().order_by('display_order', 'name')
    notice = SettingsService.get_many(['cafeteria_hours', 'cafeteria_message', 'orders_enabled'])

    return success_response(data={
        'categories': CatalogCategorySerializer(categories, many=True).data,
        'available_products': MemberProductSerializer(available, many=True).data,
        'hours': notice['cafeteria_hours'],
        'message': notice['cafeteria_message'],
        'orders_enabled': notice['orders_enabled'] != 'false',
    })


# ============================================================================
# Categories
# ============================================================================

@api_view(['GET', 'POST'])
@require_permission(Permissions.MANAGE_ORDERS)
@auto_paginate
def category_list(request):
    if request.method == 'GET':
        categories = ProductCategory.objects.filter_by_search_params(request.query_params)

        is_active = _flag(request.query_params.get('is_active'))
        if is_active is not None:
            categories = categories.filter(is_active=is_active)

        categories = categories.annotate(product_count=Count('products'))
        return success_response(data=CategorySerializer(categories, many=True).data)

    serializer = CategoryCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid category data', data=serializer.errors)

    try:
        category = CategoryService.create(serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=CategorySerializer(category).data,
        message='Category created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_ORDERS)
def category_detail(request, pk):
    if request.method == 'GET':
        category = ProductCategory.objects.annotate(product_count=Count('products')).filter(pk=pk).first()
        if category is None:
            return error_response('Category not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(data=CategorySerializer(category).data)

    if request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['category_id'] = pk

        serializer = CategoryUpdateSerializer(data=data)
        if not serializer.is_valid():
            return error_response('Invalid category data', data=serializer.errors)

        try:
            category = CategoryService.update(serializer.to_dto())
        except ValidationError as e:
            return error_response(validation_error_message(e))

        return success_response(data=CategorySerializer(category).data, message='Category updated successfully')

    try:
        CategoryService.delete(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='Category deleted successfully')


# ============================================================================
# Products
# ============================================================================

@api_view(['GET', 'POST'])
@require_permission(Permissions.MANAGE_ORDERS)
@auto_paginate
def product_list(request):
    """
    GET filters: category, is_active, is_available, search
    """
    if request.method == 'GET':
        products = Product.objects.select_related('category').filter_by_search_params(request.query_params)

        category = request.query_params.get('category')
        if category:
            products = products.filter(category_id=category)

        for flag in ('is_active', 'is_available'):
            value = _flag(request.query_params.get(flag))
            if value is not None:
                products = products.filter(**{flag: value})

        return success_response(data=ProductSerializer(products, many=True).data)

    serializer = ProductCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid product data', data=serializer.errors)

    try:
        product = ProductService.create(serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(
        data=ProductSerializer(product).data,
        message='Product created successfully',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@require_permission(Permissions.MANAGE_ORDERS)
@auto_paginate
def available_products(request):
    products = Product.objects.orderable().select_related('category')
    return success_response(data=ProductSerializer(products, many=True).data)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Permissions.MANAGE_ORDERS)
def product_detail(request, pk):
    if request.method == 'GET':
        product = Product.objects.select_related('category').filter(pk=pk).first()
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)
        return success_response(data=ProductSerializer(product).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = ProductUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid product data', data=serializer.errors)

        try:
            product = ProductService.update(serializer.to_dto(pk))
        except ValidationError as e:
            return error_response(validation_error_message(e))

        return success_response(data=ProductSerializer(product).data, message='Product updated successfully')

    try:
        ProductService.delete(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='Product deleted successfully')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_ORDERS)
def product_toggle_availability(request, pk):
    try:
        product = ProductService.toggle_availability(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=ProductSerializer(product).data, message='Availability updated')


@api_view(['POST'])
@require_permission(Permissions.MANAGE_ORDERS)
def product_toggle_active(request, pk):
    try:
        product = ProductService.toggle_active(pk)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=ProductSerializer(product).data, message='Product status updated')
