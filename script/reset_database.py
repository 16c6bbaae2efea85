#!/usr/bin/env python3
"""
Database Reset Script
Reset the catalog database structure

Features:
1. Drop all tables - account, seller, product and alembic_version
2. Rebuild the schema - `alembic upgrade head` on PostgreSQL, ORM metadata on SQLite

Notes:
- This script only resets database structure, does not seed demo data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio
import subprocess

from sqlalchemy import text

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR
from src.platform.database.orm_db_setting import (
    Base,
    create_db_and_tables,
    dispose_engine,
    get_engine,
)

# Register ORM models on Base.metadata
import src.service.catalog.driven_adapter.model  # noqa: F401


async def _drop_all_tables() -> None:
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.execute(text('DROP TABLE IF EXISTS alembic_version'))
    print('   ✅ Tables dropped')


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def reset_database() -> None:
    print(f'Database URL: {settings.DATABASE_URL_ASYNC}')

    print('🗑️ Dropping tables...')
    await _drop_all_tables()
    await dispose_engine()

    print('🏗️ Rebuilding schema...')
    if settings.is_sqlite:
        await create_db_and_tables()
        await dispose_engine()
        print('   ✅ SQLite schema created from ORM metadata')
    else:
        _run_alembic_migrations()


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        await reset_database()
        print('=' * 50)
        print('🔄 Database reset completed!')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
