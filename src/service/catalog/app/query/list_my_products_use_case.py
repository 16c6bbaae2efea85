from decimal import Decimal
from typing import List, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.dashboard_domain import compute_total_value, count_with_image
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


@attrs.define(frozen=True)
class SellerDashboard:
    products: List[ProductEntity]
    total_value: Decimal
    image_count: int = 0


class ListMyProductsUseCase:
    def __init__(self, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def list_for_seller(self, identity: SessionIdentity) -> SellerDashboard:
        Logger.base.info(f'📋 [MY_PRODUCTS] Loading products for seller {identity.account_id}')

        try:
            products = await self.product_query_repo.list_by_seller(identity.account_id)
        except Exception as e:
            raise ExternalServiceError('Erro ao carregar seus produtos') from e
        total_value = compute_total_value(products)

        Logger.base.info(
            f'✅ [MY_PRODUCTS] Found {len(products)} products, total R$ {total_value}'
        )
        return SellerDashboard(
            products=products,
            total_value=total_value,
            image_count=count_with_image(products),
        )
