import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_password_hasher import IPasswordHasher


BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            raise ValueError(f'Password longer than {BCRYPT_MAX_BYTES} bytes')
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
