from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.driven_adapter.model.seller_model import SellerModel
from src.service.catalog.driven_adapter.repo.seller_query_repo_impl import SellerQueryRepoImpl


class SellerCommandRepoImpl(ISellerCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, seller_entity: SellerEntity) -> SellerEntity:
        if seller_entity.id is None:
            raise ValueError('Seller id must be the account id')

        async with self.session_factory() as session:
            seller_model = SellerModel(
                id=seller_entity.id,
                username=seller_entity.username,
                email=seller_entity.email,
                display_name=seller_entity.display_name,
                phone=seller_entity.phone,
            )
            session.add(seller_model)
            await session.commit()
            await session.refresh(seller_model)

            return SellerQueryRepoImpl._model_to_entity(seller_model)
