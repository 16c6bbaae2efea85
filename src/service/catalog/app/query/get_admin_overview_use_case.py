from typing import Iterable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError, ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.admin_stats_domain import AdminOverview, aggregate_admin_overview
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class GetAdminOverviewUseCase:
    def __init__(
        self,
        seller_query_repo: ISellerQueryRepo,
        product_query_repo: IProductQueryRepo,
        admin_emails: Iterable[str],
    ) -> None:
        self.seller_query_repo = seller_query_repo
        self.product_query_repo = product_query_repo
        self.admin_emails = frozenset(email.lower() for email in admin_emails)

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            seller_query_repo=seller_query_repo,
            product_query_repo=product_query_repo,
            admin_emails=config.ADMIN_EMAILS,
        )

    def is_admin(self, identity: SessionIdentity) -> bool:
        return identity.matches_email(self.admin_emails)

    @Logger.io
    async def get_overview(self, identity: SessionIdentity) -> AdminOverview:
        if not self.is_admin(identity):
            raise ForbiddenError('Acesso restrito a administradores')

        Logger.base.info(f'📊 [ADMIN] Overview requested by {identity.email}')
        try:
            sellers = await self.seller_query_repo.list_all_newest_first()
            products = await self.product_query_repo.list_all()
        except Exception as e:
            raise ExternalServiceError('Erro ao carregar dados') from e

        overview = aggregate_admin_overview(sellers, products)
        Logger.base.info(
            f'✅ [ADMIN] {overview.stats.total_sellers} sellers, '
            f'{overview.stats.total_products} products'
        )
        return overview
