"""
Production FastAPI Application

Run with: granian src.main:app --interface asgi --host 0.0.0.0 --port 8100
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger

# Register ORM models on Base.metadata
import src.service.catalog.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Catalog Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Catalog Service] Dependency injection wired')

    # Deployments migrate with alembic; SQLite runs bootstrap the schema directly
    if settings.is_sqlite:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Catalog Service] SQLite schema ensured')

    if not settings.ADMIN_EMAILS:
        Logger.base.warning('⚠️ [Catalog Service] ADMIN_EMAILS is empty, admin overview disabled')

    Logger.base.info('✅ [Catalog Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Catalog Service] Shutting down...')
    await dispose_engine()
    container.unwire()
    Logger.base.info('👋 [Catalog Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
