from typing import Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.command.create_product_use_case import SAVE_FAILED_MESSAGE
from src.service.catalog.app.command.owned_product_loader import load_owned_product
from src.service.catalog.app.command.product_change_publisher import publish_product_change
from src.service.catalog.app.dto.product_change_event import ProductChangeAction, ProductChangeEvent
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class UpdateProductUseCase:
    """Partial update of the seller's own product; fields left as None are kept."""

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
    async def update(
        self,
        *,
        identity: SessionIdentity,
        product_id: int,
        name: Optional[str] = None,
        price: Optional[str] = None,
        description: Optional[str] = None,
        service_notes: Optional[str] = None,
    ) -> ProductEntity:
        product = await load_owned_product(
            self.product_query_repo, product_id=product_id, identity=identity
        )

        changes: dict[str, Optional[str]] = {}
        if name is not None:
            changes['name'] = name.strip()
        if price is not None:
            changes['price'] = price.strip()
        if description is not None:
            changes['description'] = description.strip()
        if service_notes is not None:
            changes['service_notes'] = service_notes.strip() or None
        # evolve re-runs the name/price validators
        updated_product = attrs.evolve(product, **changes)

        try:
            updated = await self.product_command_repo.update(updated_product)
        except CustomBaseError:
            raise
        except Exception as e:
            raise ExternalServiceError(SAVE_FAILED_MESSAGE) from e

        catalog_metrics.record_product_mutation(action='update')
        Logger.base.info(f'✏️ [PRODUCT] Seller {identity.account_id} updated product {product_id}')
        await publish_product_change(
            self.broadcaster,
            ProductChangeEvent(
                action=ProductChangeAction.UPDATED,
                seller_id=identity.account_id,
                product_id=product_id,
                name=updated.name,
            ),
        )
        return updated
