from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.driven_adapter.model.seller_model import SellerModel


class SellerQueryRepoImpl(ISellerQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def exists_by_username(self, username: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SellerModel.id).where(SellerModel.username == username).limit(1)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_by_username(self, username: str) -> List[SellerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SellerModel).where(SellerModel.username == username).order_by(SellerModel.id)
            )
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, seller_id: int) -> Optional[SellerEntity]:
        async with self.session_factory() as session:
            seller_model = await session.get(SellerModel, seller_id)
            if not seller_model:
                return None
            return self._model_to_entity(seller_model)

    @Logger.io
    async def list_all_newest_first(self) -> List[SellerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SellerModel).order_by(SellerModel.created_at.desc(), SellerModel.id.desc())
            )
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _model_to_entity(seller_model: SellerModel) -> SellerEntity:
        return SellerEntity(
            id=seller_model.id,
            username=seller_model.username,
            email=seller_model.email,
            display_name=seller_model.display_name,
            phone=seller_model.phone,
            created_at=seller_model.created_at,
        )
