from typing import AsyncContextManager, Callable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.driven_adapter.model.product_model import ProductModel
from src.service.catalog.driven_adapter.repo.product_query_repo_impl import ProductQueryRepoImpl


class ProductCommandRepoImpl(IProductCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, product_entity: ProductEntity) -> ProductEntity:
        async with self.session_factory() as session:
            product_model = ProductModel(
                seller_id=product_entity.seller_id,
                name=product_entity.name,
                description=product_entity.description,
                price=product_entity.price,
                service_notes=product_entity.service_notes,
                image_data=product_entity.image_data,
            )
            session.add(product_model)
            await session.commit()
            await session.refresh(product_model)

            return ProductQueryRepoImpl._model_to_entity(product_model)

    @Logger.io
    async def update(self, product_entity: ProductEntity) -> ProductEntity:
        if product_entity.id is None:
            raise ValueError('Cannot update a product without id')

        async with self.session_factory() as session:
            product_model = await session.get(ProductModel, product_entity.id)
            if not product_model:
                raise NotFoundError('Produto não encontrado')

            product_model.name = product_entity.name
            product_model.description = product_entity.description
            product_model.price = product_entity.price
            product_model.service_notes = product_entity.service_notes
            product_model.image_data = product_entity.image_data
            await session.commit()
            await session.refresh(product_model)

            return ProductQueryRepoImpl._model_to_entity(product_model)

    @Logger.io
    async def delete(self, product_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(ProductModel).where(ProductModel.id == product_id))
            await session.commit()
