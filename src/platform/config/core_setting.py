from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


def _split_csv(v: str | List[str]) -> List[str]:
    if isinstance(v, str) and not v.startswith('['):
        return [i.strip() for i in v.split(',') if i.strip()]
    elif isinstance(v, list):
        return v
    return []


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Catalog Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_TIMEZONE: str = 'America/Sao_Paulo'

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    SESSION_COOKIE_NAME: str = 'catalogauth'

    # Accounts
    ACCOUNT_SIGNUP_ENABLED: bool = True

    # Login throttling (per email, in-process)
    LOGIN_MAX_ATTEMPTS: int = 5
    LOGIN_LOCKOUT_SECONDS: int = 300

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        return _split_csv(v)

    # Privileged identities for the admin overview, compared against the session email
    ADMIN_EMAILS: Annotated[List[str], NoDecode] = []

    @field_validator('ADMIN_EMAILS', mode='before')
    @classmethod
    def assemble_admin_emails(cls, v: str | List[str]) -> List[str]:
        return [email.lower() for email in _split_csv(v)]

    # Public catalog / WhatsApp
    PUBLIC_BASE_URL: str = 'https://link-app-ruby.vercel.app'
    WHATSAPP_COUNTRY_CODE: str = '55'

    # Product image policy (enforced by the caller, not by the store)
    MAX_IMAGE_BYTES: int = 2 * 1024 * 1024

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'catalog'
    POSTGRES_PASSWORD: SecretStr = SecretStr('catalog')
    POSTGRES_DB: str = 'catalog_db'
    POSTGRES_PORT: int = 5432

    # Full URL override (tests point this at sqlite+aiosqlite)
    DATABASE_URL: str = ''

    # Pool settings (ignored by sqlite)
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD.get_secret_value()}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL_ASYNC.startswith('sqlite')


settings = Settings()  # type: ignore
