"""Application layer interfaces (Ports)"""

from src.service.catalog.app.interface.i_account_service import (
    AccountErrorCode,
    AccountServiceError,
    AccountSession,
    IAccountService,
)
from src.service.catalog.app.interface.i_image_encoder import IImageEncoder
from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo

__all__ = [
    'AccountErrorCode',
    'AccountServiceError',
    'AccountSession',
    'IAccountService',
    'IImageEncoder',
    'IPasswordHasher',
    'IProductChangeBroadcaster',
    'IProductCommandRepo',
    'IProductQueryRepo',
    'ISellerCommandRepo',
    'ISellerQueryRepo',
]
