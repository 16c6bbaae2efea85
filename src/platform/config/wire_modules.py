"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.catalog.app.command import (
    create_product_use_case,
    delete_product_use_case,
    login_seller_use_case,
    register_seller_use_case,
    update_product_use_case,
    upload_product_image_use_case,
)
from src.service.catalog.app.query import (
    check_identifier_availability_use_case,
    get_admin_overview_use_case,
    get_catalog_product_use_case,
    get_current_seller_use_case,
    list_my_products_use_case,
    resolve_catalog_use_case,
)
from src.service.catalog.driving_adapter.http_controller import (
    product_controller,
    seller_controller,
)
from src.service.catalog.driving_adapter.http_controller.auth import session_auth


WIRE_MODULES: list[ModuleType] = [
    register_seller_use_case,
    login_seller_use_case,
    create_product_use_case,
    update_product_use_case,
    delete_product_use_case,
    upload_product_image_use_case,
    resolve_catalog_use_case,
    get_catalog_product_use_case,
    check_identifier_availability_use_case,
    list_my_products_use_case,
    get_current_seller_use_case,
    get_admin_overview_use_case,
    seller_controller,
    product_controller,
    session_auth,
]
