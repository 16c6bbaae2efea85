from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    TooManyRequestsError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_account_service import (
    AccountErrorCode,
    AccountServiceError,
    IAccountService,
)
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


BAD_CREDENTIALS_MESSAGE = 'Email ou senha incorretos'


class LoginSellerUseCase:
    def __init__(self, account_service: IAccountService, seller_query_repo: ISellerQueryRepo) -> None:
        self.account_service = account_service
        self.seller_query_repo = seller_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        account_service: IAccountService = Depends(Provide[Container.account_service]),
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
    ) -> Self:
        return cls(account_service=account_service, seller_query_repo=seller_query_repo)

    @Logger.io
    async def login(self, *, email: str, password: str) -> SessionIdentity:
        if not email.strip() or not password:
            raise ValidationError('Preencha todos os campos')

        try:
            account_session = await self.account_service.authenticate(
                email=email, password=password
            )
        except AccountServiceError as e:
            # Unknown email and wrong password look the same to the caller
            if e.code == AccountErrorCode.TOO_MANY_ATTEMPTS:
                raise TooManyRequestsError(
                    'Muitas tentativas. Tente novamente mais tarde'
                ) from e
            raise AuthenticationError(BAD_CREDENTIALS_MESSAGE) from e

        try:
            seller = await self.seller_query_repo.get_by_id(account_session.account_id)
        except Exception as e:
            raise ExternalServiceError('Erro ao entrar. Tente novamente') from e

        if seller is None or seller.id is None:
            Logger.base.warning(
                f'⚠️ [LOGIN] Account {account_session.account_id} has no seller profile'
            )
            raise AuthenticationError(BAD_CREDENTIALS_MESSAGE)

        Logger.base.info(f'🔑 [LOGIN] Seller "{seller.username}" logged in')
        return SessionIdentity(account_id=seller.id, email=seller.email, username=seller.username)
