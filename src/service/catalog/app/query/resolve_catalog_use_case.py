from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.dto.catalog_view import CatalogView
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.identifier_domain import normalize_identifier


class ResolveCatalogUseCase:
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
    async def resolve(self, identifier: str) -> Optional[CatalogView]:
        """
        Load a seller by public identifier together with the seller's products.

        Returns None when no seller has that identifier; products are then not
        queried. Matching is case-insensitive since the identifier is normalized.
        """
        username = normalize_identifier(identifier)
        Logger.base.info(f'🔎 [CATALOG] Resolving catalog "{username}"')

        try:
            sellers = await self.seller_query_repo.list_by_username(username) if username else []
            if not sellers:
                catalog_metrics.record_catalog_resolution(found=False)
                Logger.base.info(f'🚫 [CATALOG] No seller "{username}"')
                return None

            if len(sellers) > 1:
                Logger.base.warning(
                    f'⚠️ [CATALOG] {len(sellers)} sellers share username "{username}", '
                    f'using id={sellers[0].id}'
                )
            seller = sellers[0]
            products = await self.product_query_repo.list_by_seller(seller.id or 0)
        except Exception as e:
            raise ExternalServiceError('Erro ao carregar catálogo') from e

        catalog_metrics.record_catalog_resolution(found=True, product_count=len(products))
        Logger.base.info(f'✅ [CATALOG] "{username}" has {len(products)} products')
        return CatalogView(seller=seller, products=products)
