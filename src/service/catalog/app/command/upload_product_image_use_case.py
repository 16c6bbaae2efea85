from typing import Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    CustomBaseError,
    ExternalServiceError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.command.create_product_use_case import SAVE_FAILED_MESSAGE
from src.service.catalog.app.command.owned_product_loader import load_owned_product
from src.service.catalog.app.command.product_change_publisher import publish_product_change
from src.service.catalog.app.dto.product_change_event import ProductChangeAction, ProductChangeEvent
from src.service.catalog.app.interface.i_image_encoder import IImageEncoder
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class UploadProductImageUseCase:
    """
    Attach an image to the seller's own product.

    The image is stored inline as a data URL, so its size is capped here
    (`MAX_IMAGE_BYTES`) before it ever reaches the store.
    """

    def __init__(
        self,
        product_query_repo: IProductQueryRepo,
        product_command_repo: IProductCommandRepo,
        image_encoder: IImageEncoder,
        max_image_bytes: int,
        broadcaster: Optional[IProductChangeBroadcaster] = None,
    ) -> None:
        self.product_query_repo = product_query_repo
        self.product_command_repo = product_command_repo
        self.image_encoder = image_encoder
        self.max_image_bytes = max_image_bytes
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        image_encoder: IImageEncoder = Depends(Provide[Container.image_encoder]),
        config: Settings = Depends(Provide[Container.config_service]),
        broadcaster: IProductChangeBroadcaster = Depends(Provide[Container.product_broadcaster]),
    ) -> Self:
        return cls(
            product_query_repo=product_query_repo,
            product_command_repo=product_command_repo,
            image_encoder=image_encoder,
            max_image_bytes=config.MAX_IMAGE_BYTES,
            broadcaster=broadcaster,
        )

    def _check_image_policy(self, *, content: bytes, content_type: str) -> None:
        if not content_type or not content_type.startswith('image/'):
            raise ValidationError('Arquivo não é uma imagem', field='image')
        if not content:
            raise ValidationError('Imagem vazia', field='image')
        if len(content) > self.max_image_bytes:
            max_mb = self.max_image_bytes // (1024 * 1024)
            raise ValidationError(f'Imagem muito grande! Máximo {max_mb}MB', field='image')

    @Logger.io
    async def upload(
        self, *, identity: SessionIdentity, product_id: int, content: bytes, content_type: str
    ) -> ProductEntity:
        self._check_image_policy(content=content, content_type=content_type)

        product = await load_owned_product(
            self.product_query_repo, product_id=product_id, identity=identity
        )

        image_data = self.image_encoder.encode(content=content, content_type=content_type)

        try:
            updated = await self.product_command_repo.update(
                attrs.evolve(product, image_data=image_data)
            )
        except CustomBaseError:
            raise
        except Exception as e:
            raise ExternalServiceError(SAVE_FAILED_MESSAGE) from e

        catalog_metrics.record_product_mutation(action='image')
        Logger.base.info(
            f'🖼️ [PRODUCT] Seller {identity.account_id} set image on product {product_id} '
            f'({len(content)} bytes)'
        )
        await publish_product_change(
            self.broadcaster,
            ProductChangeEvent(
                action=ProductChangeAction.IMAGE_UPDATED,
                seller_id=identity.account_id,
                product_id=product_id,
                name=updated.name,
            ),
        )
        return updated
