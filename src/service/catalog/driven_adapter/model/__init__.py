"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.catalog.driven_adapter.model.account_model import AccountModel
from src.service.catalog.driven_adapter.model.product_model import ProductModel
from src.service.catalog.driven_adapter.model.seller_model import SellerModel

__all__ = [
    'AccountModel',
    'ProductModel',
    'SellerModel',
]
