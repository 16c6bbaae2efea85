from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.service.catalog.domain.value_object.session_identity import SessionIdentity
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@inject
async def get_current_identity(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
) -> SessionIdentity:
    """Authenticated seller from the session cookie (stateless, no DB query)."""
    return jwt_auth.get_identity_from_jwt(token)


@inject
async def get_optional_identity(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME),
) -> Optional[SessionIdentity]:
    return jwt_auth.current_session(token)
