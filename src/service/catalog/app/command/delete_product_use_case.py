from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.command.owned_product_loader import load_owned_product
from src.service.catalog.app.command.product_change_publisher import publish_product_change
from src.service.catalog.app.dto.product_change_event import ProductChangeAction, ProductChangeEvent
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class DeleteProductUseCase:
    def __init__(
        self,
        product_query_repo: IProductQueryRepo,
        product_command_repo: IProductCommandRepo,
        broadcaster: Optional[IProductChangeBroadcaster] = None,
    ) -> None:
        self.product_query_repo = product_query_repo
        self.product_command_repo = product_command_repo
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        broadcaster: IProductChangeBroadcaster = Depends(Provide[Container.product_broadcaster]),
    ) -> Self:
        return cls(
            product_query_repo=product_query_repo,
            product_command_repo=product_command_repo,
            broadcaster=broadcaster,
        )

    @Logger.io
    async def delete(self, *, identity: SessionIdentity, product_id: int) -> None:
        product = await load_owned_product(
            self.product_query_repo, product_id=product_id, identity=identity
        )

        try:
            await self.product_command_repo.delete(product_id)
        except Exception as e:
            raise ExternalServiceError('Erro ao remover produto.') from e

        catalog_metrics.record_product_mutation(action='delete')
        Logger.base.info(f'🗑️ [PRODUCT] Seller {identity.account_id} deleted product {product_id}')
        await publish_product_change(
            self.broadcaster,
            ProductChangeEvent(
                action=ProductChangeAction.DELETED,
                seller_id=identity.account_id,
                product_id=product_id,
                name=product.name,
            ),
        )
