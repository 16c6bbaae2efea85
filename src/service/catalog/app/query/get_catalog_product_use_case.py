from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, ExternalServiceError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.owned_product_loader import PRODUCT_NOT_FOUND_MESSAGE
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.identifier_domain import normalize_identifier


@attrs.define(frozen=True)
class CatalogProduct:
    seller: SellerEntity
    product: ProductEntity


class GetCatalogProductUseCase:
    """Product detail page: one product addressed by (identifier, product id)."""

    def __init__(
        self, seller_query_repo: ISellerQueryRepo, product_query_repo: IProductQueryRepo
    ) -> None:
        self.seller_query_repo = seller_query_repo
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(seller_query_repo=seller_query_repo, product_query_repo=product_query_repo)

    @Logger.io
    async def get(self, *, identifier: str, product_id: int) -> CatalogProduct:
        try:
            product = await self.product_query_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)
            seller = await self.seller_query_repo.get_by_id(product.seller_id)
        except CustomBaseError:
            raise
        except Exception as e:
            raise ExternalServiceError('Erro ao carregar produto') from e

        # A product reached through another seller's catalog URL is not found there
        if seller is None or seller.username != normalize_identifier(identifier):
            raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)

        return CatalogProduct(seller=seller, product=product)
