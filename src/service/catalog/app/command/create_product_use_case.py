from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.command.product_change_publisher import publish_product_change
from src.service.catalog.app.dto.product_change_event import ProductChangeAction, ProductChangeEvent
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


SAVE_FAILED_MESSAGE = 'Erro ao salvar produto. Tente novamente.'


class CreateProductUseCase:
    def __init__(
        self,
        product_command_repo: IProductCommandRepo,
        broadcaster: Optional[IProductChangeBroadcaster] = None,
    ) -> None:
        self.product_command_repo = product_command_repo
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        broadcaster: IProductChangeBroadcaster = Depends(Provide[Container.product_broadcaster]),
    ) -> Self:
        return cls(product_command_repo=product_command_repo, broadcaster=broadcaster)

    @Logger.io
    async def create(
        self,
        *,
        identity: SessionIdentity,
        name: str,
        price: str,
        description: str = '',
        service_notes: Optional[str] = None,
    ) -> ProductEntity:
        product = ProductEntity.create(
            seller_id=identity.account_id,
            name=name,
            price=price,
            description=description,
            service_notes=service_notes,
        )

        try:
            created = await self.product_command_repo.create(product)
        except CustomBaseError:
            raise
        except Exception as e:
            raise ExternalServiceError(SAVE_FAILED_MESSAGE) from e

        catalog_metrics.record_product_mutation(action='create')
        Logger.base.info(f'🆕 [PRODUCT] Seller {identity.account_id} created product {created.id}')
        await publish_product_change(
            self.broadcaster,
            ProductChangeEvent(
                action=ProductChangeAction.CREATED,
                seller_id=identity.account_id,
                product_id=created.id or 0,
                name=created.name,
            ),
        )
        return created
