from typing import Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ExternalServiceError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.identifier_domain import (
    IDENTIFIER_MIN_LENGTH,
    normalize_identifier,
)


@attrs.define(frozen=True)
class IdentifierAvailability:
    identifier: str
    available: bool
    reason: Optional[str] = None


class CheckIdentifierAvailabilityUseCase:
    """Live username check while the seller types; registration re-checks on submit."""

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
    async def check(self, raw_identifier: str) -> IdentifierAvailability:
        identifier = normalize_identifier(raw_identifier)
        if len(identifier) < IDENTIFIER_MIN_LENGTH:
            return IdentifierAvailability(
                identifier=identifier,
                available=False,
                reason='Username deve ter pelo menos 3 caracteres',
            )

        try:
            taken = await self.seller_query_repo.exists_by_username(identifier)
        except Exception as e:
            raise ExternalServiceError('Erro ao verificar username') from e

        if taken:
            return IdentifierAvailability(
                identifier=identifier, available=False, reason='Username já está em uso'
            )
        return IdentifierAvailability(identifier=identifier, available=True)
