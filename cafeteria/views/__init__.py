from .catalog_views import (
    member_catalog,
    category_list,
    category_detail,
    product_list,
    available_products,
    product_detail,
    product_toggle_availability,
    product_toggle_active
)
from .stock_views import (
    stock_list,
    stock_set,
    stock_adjust,
    stock_bulk_update,
    cafeteria_stats
)
from .order_views import (
    my_orders,
    my_order_cancel,
    order_list,
    order_detail,
    order_status
)
from .pos_views import (
    pos_order_create
)
