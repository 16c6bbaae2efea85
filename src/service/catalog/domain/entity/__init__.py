"""Catalog Domain Entities"""

from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity

__all__ = ['ProductEntity', 'SellerEntity']
