"""
Cookie session tokens (JWT)

Stateless: the token carries the seller identity, so resolving the current
session needs no store read.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS
        self.cookie_name = settings.SESSION_COOKIE_NAME

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(self, identity: SessionIdentity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(identity.account_id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'account_id': identity.account_id,
            'email': identity.email,
            'username': identity.username,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Sessão inválida. Faça login novamente') from e

    def current_session(self, token: Optional[str]) -> Optional[SessionIdentity]:
        """Identity behind the cookie, or None when there is no usable session."""
        if not token:
            return None
        try:
            return self.get_identity_from_jwt(token)
        except AuthenticationError:
            return None

    def get_identity_from_jwt(self, token: Optional[str]) -> SessionIdentity:
        if not token:
            raise AuthenticationError('Faça login para continuar')

        payload = self.decode_jwt_token(token)
        account_id = payload.get('account_id')
        email = payload.get('email')
        username = payload.get('username')
        if not account_id or not email or not username:
            raise AuthenticationError('Sessão inválida. Faça login novamente')

        return SessionIdentity(account_id=int(account_id), email=email, username=username)
