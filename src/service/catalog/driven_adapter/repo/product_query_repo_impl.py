from typing import AsyncContextManager, Callable, List, Optional

import attrs
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.driven_adapter.model.product_model import ProductModel


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, product_id: int) -> Optional[ProductEntity]:
        async with self.session_factory() as session:
            product_model = await session.get(ProductModel, product_id)
            if not product_model:
                return None
            return self._model_to_entity(product_model)

    @Logger.io
    async def list_by_seller(self, seller_id: int) -> List[ProductEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ProductModel)
                .where(ProductModel.seller_id == seller_id)
                .order_by(ProductModel.id)
            )
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def list_all(self) -> List[ProductEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(ProductModel).order_by(ProductModel.id))
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _model_to_entity(product_model: ProductModel) -> ProductEntity:
        # Rows are trusted as stored; skip the entity validators
        with attrs.validators.disabled():
            return ProductEntity(
                seller_id=product_model.seller_id,
                name=product_model.name,
                price=product_model.price,
                description=product_model.description,
                service_notes=product_model.service_notes,
                image_data=product_model.image_data,
                id=product_model.id,
                created_at=product_model.created_at,
            )
