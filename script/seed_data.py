#!/usr/bin/env python3
"""
Database Seed Script
Populate demo catalogs into the database

Features:
1. Create Sellers - register demo sellers through the registration flow
2. Create Products - add a few products to each seller's catalog

Notes:
- Run `python script/reset_database.py` first for a clean schema
- Set ADMIN_EMAILS=admin@catalogo.com.br to open the admin overview with the first account
"""

import asyncio
from dataclasses import dataclass, field

from sqlalchemy import text

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.database.orm_db_setting import dispose_engine, get_session_maker
from src.service.catalog.app.command.create_product_use_case import CreateProductUseCase
from src.service.catalog.app.command.register_seller_use_case import RegisterSellerUseCase
from src.service.catalog.domain.value_object.session_identity import SessionIdentity
from src.service.catalog.domain.whatsapp_link_domain import build_catalog_url

DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class SellerConfig:
    """Seller seed configuration"""
    username: str
    email: str
    display_name: str
    phone: str | None = None
    products: list[tuple[str, str, str]] = field(default_factory=list)  # (name, price, description)


# Demo sellers to create
DEMO_SELLERS = [
    SellerConfig(
        username='admin_catalogo',
        email='admin@catalogo.com.br',
        display_name='Admin',
    ),
    SellerConfig(
        username='loja_da_ana',
        email='ana@catalogo.com.br',
        display_name='Loja da Ana',
        phone='(11) 99999-8888',
        products=[
            ('Bolo de cenoura', '35.00', 'Com cobertura de chocolate'),
            ('Torta de limão', '42,50', 'Fatia generosa, serve 8 pessoas'),
            ('Brigadeiro gourmet', '3.50', 'Unidade'),
        ],
    ),
    SellerConfig(
        username='doces_do_bruno',
        email='bruno@catalogo.com.br',
        display_name='Doces do Bruno',
        products=[('Pão de mel', '6', 'Recheado com doce de leite')],
    ),
]


async def create_sellers() -> None:
    register_use_case = RegisterSellerUseCase(
        seller_query_repo=container.seller_query_repo(),
        seller_command_repo=container.seller_command_repo(),
        account_service=container.account_service(),
    )
    create_product_use_case = CreateProductUseCase(
        product_command_repo=container.product_command_repo()
    )

    print('👥 Creating sellers...')
    for config in DEMO_SELLERS:
        seller = await register_use_case.register(
            username=config.username,
            email=config.email,
            password=DEFAULT_PASSWORD,
            phone=config.phone,
            display_name=config.display_name,
        )
        print(f'   ✅ Created seller: ID={seller.id}, Username={seller.username}')

        identity = SessionIdentity(
            account_id=seller.id or 0, email=seller.email, username=seller.username
        )
        for name, price, description in config.products:
            product = await create_product_use_case.create(
                identity=identity, name=name, price=price, description=description
            )
            print(f'      📦 Product ID={product.id}, Name={product.name}, Price={product.price}')


async def verify_data():
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for table in ['account', 'seller', 'product']:
            result = await session.execute(text(f'SELECT COUNT(*) FROM {table}'))
            print(f'   {table.capitalize()} count: {result.scalar()}')

    print('   ✅ Data verification completed!')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_sellers()
        print()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Demo accounts:')
        for config in DEMO_SELLERS:
            catalog_url = build_catalog_url(settings.PUBLIC_BASE_URL, config.username)
            print(f'   {config.email} / {DEFAULT_PASSWORD}  ->  {catalog_url}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
