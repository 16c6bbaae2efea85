"""Application layer DTOs"""

from src.service.catalog.app.dto.catalog_view import CatalogView
from src.service.catalog.app.dto.product_change_event import ProductChangeAction, ProductChangeEvent

__all__ = ['CatalogView', 'ProductChangeAction', 'ProductChangeEvent']
