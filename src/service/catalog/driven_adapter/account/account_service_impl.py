"""
Account Service (credential store)

Owns the `account` table: emails and bcrypt hashes. Seller profiles live in
their own table and are written by the registration use case.
"""

from typing import AsyncContextManager, Callable, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_account_service import (
    AccountErrorCode,
    AccountServiceError,
    AccountSession,
    IAccountService,
)
from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher
from src.service.catalog.domain.registration_domain import PASSWORD_MIN_LENGTH
from src.service.catalog.driven_adapter.account.login_attempt_tracker import LoginAttemptTracker
from src.service.catalog.driven_adapter.model.account_model import AccountModel


class AccountServiceImpl(IAccountService):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
        attempt_tracker: Optional[LoginAttemptTracker] = None,
        *,
        signup_enabled: Optional[bool] = None,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher
        self.attempt_tracker = attempt_tracker or LoginAttemptTracker(
            max_attempts=settings.LOGIN_MAX_ATTEMPTS,
            lockout_seconds=settings.LOGIN_LOCKOUT_SECONDS,
        )
        self.signup_enabled = (
            settings.ACCOUNT_SIGNUP_ENABLED if signup_enabled is None else signup_enabled
        )

    @staticmethod
    def _normalize_email(email: str) -> str:
        try:
            return validate_email(email.strip(), check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise AccountServiceError(AccountErrorCode.INVALID_EMAIL, str(e)) from e

    @Logger.io
    async def create_account(self, *, email: str, password: str) -> int:
        if not self.signup_enabled:
            raise AccountServiceError(AccountErrorCode.NOT_ALLOWED)

        normalized_email = self._normalize_email(email)
        if len(password) < PASSWORD_MIN_LENGTH:
            raise AccountServiceError(AccountErrorCode.WEAK_SECRET)
        try:
            hashed_password = self.password_hasher.hash_password(
                plain_password=SecretStr(password)
            )
        except ValueError as e:
            raise AccountServiceError(AccountErrorCode.WEAK_SECRET, str(e)) from e

        async with self.session_factory() as session:
            existing = await session.execute(
                select(AccountModel.id).where(AccountModel.email == normalized_email)
            )
            if existing.scalar_one_or_none() is not None:
                raise AccountServiceError(AccountErrorCode.EMAIL_IN_USE)

            account_model = AccountModel(email=normalized_email, hashed_password=hashed_password)
            session.add(account_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise AccountServiceError(AccountErrorCode.EMAIL_IN_USE) from e
            await session.refresh(account_model)

            Logger.base.info(f'🔐 [ACCOUNT] Created account {account_model.id}')
            return account_model.id

    @Logger.io
    async def authenticate(self, *, email: str, password: str) -> AccountSession:
        normalized_email = self._normalize_email(email)
        if self.attempt_tracker.is_locked(normalized_email):
            raise AccountServiceError(AccountErrorCode.TOO_MANY_ATTEMPTS)

        async with self.session_factory() as session:
            result = await session.execute(
                select(AccountModel).where(AccountModel.email == normalized_email)
            )
            account_model = result.scalar_one_or_none()

        if account_model is None:
            self.attempt_tracker.record_failure(normalized_email)
            raise AccountServiceError(AccountErrorCode.NOT_FOUND)

        if not self.password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=account_model.hashed_password
        ):
            self.attempt_tracker.record_failure(normalized_email)
            raise AccountServiceError(AccountErrorCode.WRONG_SECRET)

        self.attempt_tracker.record_success(normalized_email)
        return AccountSession(account_id=account_model.id, email=account_model.email)
