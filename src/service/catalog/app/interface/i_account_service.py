from abc import ABC, abstractmethod
from enum import StrEnum

import attrs


class AccountErrorCode(StrEnum):
    EMAIL_IN_USE = 'email_in_use'
    INVALID_EMAIL = 'invalid_email'
    WEAK_SECRET = 'weak_secret'
    NOT_ALLOWED = 'not_allowed'
    NOT_FOUND = 'not_found'
    WRONG_SECRET = 'wrong_secret'
    TOO_MANY_ATTEMPTS = 'too_many_attempts'


class AccountServiceError(Exception):
    def __init__(self, code: AccountErrorCode, message: str = '') -> None:
        self.code = code
        super().__init__(message or code.value)


@attrs.frozen
class AccountSession:
    account_id: int
    email: str


class IAccountService(ABC):
    """Credential store: owns emails and password hashes, never seller profiles."""

    @abstractmethod
    async def create_account(self, *, email: str, password: str) -> int:
        """Return the new account id, or raise AccountServiceError
        (EMAIL_IN_USE, INVALID_EMAIL, WEAK_SECRET, NOT_ALLOWED)."""

    @abstractmethod
    async def authenticate(self, *, email: str, password: str) -> AccountSession:
        """Raise AccountServiceError (NOT_FOUND, WRONG_SECRET, INVALID_EMAIL, TOO_MANY_ATTEMPTS)."""
