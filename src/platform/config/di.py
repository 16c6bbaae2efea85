"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.catalog.driven_adapter.account.account_service_impl import AccountServiceImpl
from src.service.catalog.driven_adapter.account.login_attempt_tracker import LoginAttemptTracker
from src.service.catalog.driven_adapter.broadcaster.in_memory_product_broadcaster_impl import (
    InMemoryProductBroadcasterImpl,
)
from src.service.catalog.driven_adapter.image.base64_image_encoder import Base64ImageEncoder
from src.service.catalog.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.catalog.driven_adapter.repo.product_query_repo_impl import ProductQueryRepoImpl
from src.service.catalog.driven_adapter.repo.seller_command_repo_impl import (
    SellerCommandRepoImpl,
)
from src.service.catalog.driven_adapter.repo.seller_query_repo_impl import SellerQueryRepoImpl
from src.service.catalog.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine manager behind Database.session)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    seller_query_repo = providers.Singleton(
        SellerQueryRepoImpl, session_factory=database.provided.session
    )
    seller_command_repo = providers.Singleton(
        SellerCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=database.provided.session
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )

    # Account service (credential store + login throttling)
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    login_attempt_tracker = providers.Singleton(
        LoginAttemptTracker,
        max_attempts=config_service.provided.LOGIN_MAX_ATTEMPTS,
        lockout_seconds=config_service.provided.LOGIN_LOCKOUT_SECONDS,
    )
    account_service = providers.Singleton(
        AccountServiceImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
        attempt_tracker=login_attempt_tracker,
        signup_enabled=config_service.provided.ACCOUNT_SIGNUP_ENABLED,
    )

    # Auth (cookie JWT session)
    jwt_auth = providers.Singleton(JwtAuth)

    # Product images stored inline as data URLs
    image_encoder = providers.Singleton(Base64ImageEncoder)

    # Product change push (SSE), in-process
    product_broadcaster = providers.Singleton(InMemoryProductBroadcasterImpl)


container = Container()


def cleanup() -> None:
    """Drop singleton state (login throttling, push subscribers); used between tests."""
    container.reset_singletons()
