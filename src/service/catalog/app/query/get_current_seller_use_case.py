from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class GetCurrentSellerUseCase:
    def __init__(self, seller_query_repo: ISellerQueryRepo) -> None:
        self.seller_query_repo = seller_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
    ) -> Self:
        return cls(seller_query_repo=seller_query_repo)

    @Logger.io
    async def get(self, identity: SessionIdentity) -> SellerEntity:
        try:
            seller = await self.seller_query_repo.get_by_id(identity.account_id)
        except Exception as e:
            raise ExternalServiceError('Erro ao carregar dados do vendedor') from e
        if seller is None:
            raise NotFoundError('Vendedor não encontrado')
        return seller
