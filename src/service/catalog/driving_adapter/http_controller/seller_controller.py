from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.login_seller_use_case import LoginSellerUseCase
from src.service.catalog.app.command.register_seller_use_case import RegisterSellerUseCase
from src.service.catalog.app.query.check_identifier_availability_use_case import (
    CheckIdentifierAvailabilityUseCase,
)
from src.service.catalog.app.query.get_current_seller_use_case import GetCurrentSellerUseCase
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity
from src.service.catalog.domain.whatsapp_link_domain import build_catalog_url
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.catalog.driving_adapter.http_controller.auth.session_auth import (
    get_current_identity,
    get_optional_identity,
)
from src.service.catalog.driving_adapter.http_controller.schema.seller_schema import (
    IdentifierAvailabilityResponse,
    LoginRequest,
    RegisterSellerRequest,
    SellerResponse,
)


router = APIRouter()


def _set_session_cookie(response: Response, jwt_auth: JwtAuth, identity: SessionIdentity) -> None:
    response.set_cookie(
        key=jwt_auth.cookie_name,
        value=jwt_auth.create_jwt_token(identity),
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )


def _seller_response(seller: SellerEntity, config: Settings) -> SellerResponse:
    return SellerResponse.from_entity(
        seller, catalog_url=build_catalog_url(config.PUBLIC_BASE_URL, seller.username)
    )


@router.post('', response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register_seller(
    request: RegisterSellerRequest,
    response: Response,
    use_case: RegisterSellerUseCase = Depends(RegisterSellerUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    config: Settings = Depends(Provide[Container.config_service]),
) -> SellerResponse:
    seller = await use_case.register(
        username=request.username,
        email=request.email,
        password=request.password.get_secret_value(),
        phone=request.phone,
        display_name=request.display_name,
    )

    # Registration signs the seller in, straight to the dashboard
    _set_session_cookie(
        response,
        jwt_auth,
        SessionIdentity(account_id=seller.id or 0, email=seller.email, username=seller.username),
    )
    return _seller_response(seller, config)


@router.post('/login', response_model=SellerResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: LoginSellerUseCase = Depends(LoginSellerUseCase.depends),
    seller_use_case: GetCurrentSellerUseCase = Depends(GetCurrentSellerUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    config: Settings = Depends(Provide[Container.config_service]),
) -> SellerResponse:
    identity = await login_use_case.login(
        email=request.email, password=request.password.get_secret_value()
    )
    _set_session_cookie(response, jwt_auth, identity)

    seller = await seller_use_case.get(identity)
    return _seller_response(seller, config)


@router.post('/logout', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
@inject
async def logout(
    identity: Optional[SessionIdentity] = Depends(get_optional_identity),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Response:
    if identity:
        Logger.base.info(f'👋 [LOGOUT] Seller "{identity.username}" logged out')
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(key=jwt_auth.cookie_name, httponly=True, samesite='lax')
    return response


@router.get('', response_model=SellerResponse)
@Logger.io
@inject
async def get_me(
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: GetCurrentSellerUseCase = Depends(GetCurrentSellerUseCase.depends),
    config: Settings = Depends(Provide[Container.config_service]),
) -> SellerResponse:
    seller = await use_case.get(identity)
    return _seller_response(seller, config)


@router.get('/availability/{identifier}', response_model=IdentifierAvailabilityResponse)
@Logger.io
async def check_identifier_availability(
    identifier: str,
    use_case: CheckIdentifierAvailabilityUseCase = Depends(
        CheckIdentifierAvailabilityUseCase.depends
    ),
) -> IdentifierAvailabilityResponse:
    result = await use_case.check(identifier)
    return IdentifierAvailabilityResponse(
        identifier=result.identifier, available=result.available, reason=result.reason
    )
