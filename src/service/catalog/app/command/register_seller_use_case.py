"""
Register Seller Use Case

Order of operations:
1. Local validation (no external call on failure)
2. Username pre-check against the seller store
3. Account creation in the account service
4. Seller profile write, keyed by the new account id

Steps 2-4 are not atomic: two registrations racing on the same username can
both pass step 2 and both succeed.
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    ExternalServiceError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.interface.i_account_service import (
    AccountErrorCode,
    AccountServiceError,
    IAccountService,
)
from src.service.catalog.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.catalog.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.registration_domain import RegistrationForm


REGISTRATION_FAILED_MESSAGE = 'Erro ao criar conta. Tente novamente'
USERNAME_IN_USE_MESSAGE = 'Username já está em uso. Escolha outro.'


def _account_error_to_domain(error: AccountServiceError) -> CustomBaseError:
    match error.code:
        case AccountErrorCode.EMAIL_IN_USE:
            return ConflictError('Este email já está em uso', field='email')
        case AccountErrorCode.INVALID_EMAIL:
            return ValidationError('Email inválido', field='email')
        case AccountErrorCode.WEAK_SECRET:
            return ValidationError('Senha muito fraca. Use pelo menos 6 caracteres', field='password')
        case AccountErrorCode.NOT_ALLOWED:
            return ExternalServiceError('Registro não permitido. Contate o suporte')
        case _:
            return ExternalServiceError(REGISTRATION_FAILED_MESSAGE)


class RegisterSellerUseCase:
    def __init__(
        self,
        seller_query_repo: ISellerQueryRepo,
        seller_command_repo: ISellerCommandRepo,
        account_service: IAccountService,
    ) -> None:
        self.seller_query_repo = seller_query_repo
        self.seller_command_repo = seller_command_repo
        self.account_service = account_service

    @classmethod
    @inject
    def depends(
        cls,
        seller_query_repo: ISellerQueryRepo = Depends(Provide[Container.seller_query_repo]),
        seller_command_repo: ISellerCommandRepo = Depends(Provide[Container.seller_command_repo]),
        account_service: IAccountService = Depends(Provide[Container.account_service]),
    ) -> Self:
        return cls(
            seller_query_repo=seller_query_repo,
            seller_command_repo=seller_command_repo,
            account_service=account_service,
        )

    @Logger.io
    async def register(
        self,
        *,
        username: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> SellerEntity:
        form = RegistrationForm()
        form.fill(
            username=username,
            email=email,
            password=password,
            phone=phone,
            display_name=display_name,
        )
        try:
            validated = form.validate()
        except ValidationError:
            catalog_metrics.record_registration(result='validation_error')
            raise

        Logger.base.info(f'📝 [REGISTER] Checking username "{validated.username}"')
        try:
            username_taken = await self.seller_query_repo.exists_by_username(validated.username)
        except Exception as e:
            form.fail(REGISTRATION_FAILED_MESSAGE)
            catalog_metrics.record_registration(result='failed')
            Logger.base.error(f'❌ [REGISTER] Username check failed: {type(e).__name__}: {e}')
            raise ExternalServiceError(REGISTRATION_FAILED_MESSAGE) from e

        if username_taken:
            form.fail(USERNAME_IN_USE_MESSAGE)
            catalog_metrics.record_registration(result='conflict')
            raise ConflictError(USERNAME_IN_USE_MESSAGE, field='username')

        try:
            account_id = await self.account_service.create_account(
                email=validated.email, password=validated.password
            )
        except AccountServiceError as e:
            domain_error = _account_error_to_domain(e)
            form.fail(domain_error.message)
            catalog_metrics.record_registration(
                result='conflict' if isinstance(domain_error, ConflictError) else 'failed'
            )
            raise domain_error from e
        except Exception as e:
            form.fail(REGISTRATION_FAILED_MESSAGE)
            catalog_metrics.record_registration(result='failed')
            Logger.base.error(f'❌ [REGISTER] Account creation failed: {type(e).__name__}: {e}')
            raise ExternalServiceError(REGISTRATION_FAILED_MESSAGE) from e

        try:
            seller = await self.seller_command_repo.create(
                SellerEntity(
                    id=account_id,
                    username=validated.username,
                    email=validated.email,
                    display_name=validated.display_name,
                    phone=validated.phone,
                )
            )
        except Exception as e:
            form.fail(REGISTRATION_FAILED_MESSAGE)
            catalog_metrics.record_registration(result='failed')
            Logger.base.error(
                f'❌ [REGISTER] Account {account_id} created but seller profile write failed '
                f'(orphaned credential): {type(e).__name__}: {e}'
            )
            raise ExternalServiceError(REGISTRATION_FAILED_MESSAGE) from e

        form.succeed()
        catalog_metrics.record_registration(result='success')
        Logger.base.info(f'✅ [REGISTER] Seller "{seller.username}" registered (id={seller.id})')
        return seller
