"""
Unit tests for the public catalog queries

- ResolveCatalogUseCase: identifier -> (seller, products) or None
- GetCatalogProductUseCase: product detail reached through a catalog URL
- CheckIdentifierAvailabilityUseCase: live username check
- GetCurrentSellerUseCase: profile behind the session
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import ExternalServiceError, NotFoundError
from src.service.catalog.app.query.check_identifier_availability_use_case import (
    CheckIdentifierAvailabilityUseCase,
)
from src.service.catalog.app.query.get_catalog_product_use_case import GetCatalogProductUseCase
from src.service.catalog.app.query.get_current_seller_use_case import GetCurrentSellerUseCase
from src.service.catalog.app.query.resolve_catalog_use_case import ResolveCatalogUseCase
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


ANA = SellerEntity(id=1, username='loja_da_ana', email='ana@catalogo.com.br', phone='11999998888')
ANA_DUPLICATE = SellerEntity(id=9, username='loja_da_ana', email='ana2@catalogo.com.br')
BOLO = ProductEntity(seller_id=1, name='Bolo', price='25.90', id=10)


@pytest.fixture
def seller_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_by_username = AsyncMock(return_value=[ANA])
    repo.get_by_id = AsyncMock(return_value=ANA)
    repo.exists_by_username = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def product_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_by_seller = AsyncMock(return_value=[BOLO])
    repo.get_by_id = AsyncMock(return_value=BOLO)
    return repo


@pytest.mark.unit
class TestResolveCatalog:
    @pytest.fixture
    def use_case(
        self, seller_query_repo: AsyncMock, product_query_repo: AsyncMock
    ) -> ResolveCatalogUseCase:
        return ResolveCatalogUseCase(
            seller_query_repo=seller_query_repo, product_query_repo=product_query_repo
        )

    @pytest.mark.asyncio
    async def test_resolves_seller_and_products(
        self,
        use_case: ResolveCatalogUseCase,
        seller_query_repo: AsyncMock,
        product_query_repo: AsyncMock,
    ):
        # Act
        view = await use_case.resolve('Loja_Da_Ana')

        # Assert
        seller_query_repo.list_by_username.assert_awaited_once_with('loja_da_ana')
        product_query_repo.list_by_seller.assert_awaited_once_with(1)
        assert view is not None
        assert view.seller is ANA
        assert view.products == [BOLO]
        assert view.product_count == 1

    @pytest.mark.asyncio
    async def test_unknown_identifier_skips_product_query(
        self,
        use_case: ResolveCatalogUseCase,
        seller_query_repo: AsyncMock,
        product_query_repo: AsyncMock,
    ):
        seller_query_repo.list_by_username.return_value = []

        view = await use_case.resolve('ninguem')

        assert view is None
        product_query_repo.list_by_seller.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_identifier_without_valid_characters(
        self, use_case: ResolveCatalogUseCase, seller_query_repo: AsyncMock
    ):
        view = await use_case.resolve('!!!')

        assert view is None
        seller_query_repo.list_by_username.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seller_without_products_is_still_a_catalog(
        self, use_case: ResolveCatalogUseCase, product_query_repo: AsyncMock
    ):
        product_query_repo.list_by_seller.return_value = []

        view = await use_case.resolve('loja_da_ana')

        assert view is not None
        assert view.products == []

    @pytest.mark.asyncio
    async def test_duplicate_identifier_uses_first_seller(
        self,
        use_case: ResolveCatalogUseCase,
        seller_query_repo: AsyncMock,
        product_query_repo: AsyncMock,
    ):
        seller_query_repo.list_by_username.return_value = [ANA, ANA_DUPLICATE]

        view = await use_case.resolve('loja_da_ana')

        assert view is not None
        assert view.seller.id == 1
        product_query_repo.list_by_seller.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_store_failure(
        self, use_case: ResolveCatalogUseCase, seller_query_repo: AsyncMock
    ):
        seller_query_repo.list_by_username.side_effect = ConnectionError('offline')

        with pytest.raises(ExternalServiceError):
            await use_case.resolve('loja_da_ana')


@pytest.mark.unit
class TestGetCatalogProduct:
    @pytest.fixture
    def use_case(
        self, seller_query_repo: AsyncMock, product_query_repo: AsyncMock
    ) -> GetCatalogProductUseCase:
        return GetCatalogProductUseCase(
            seller_query_repo=seller_query_repo, product_query_repo=product_query_repo
        )

    @pytest.mark.asyncio
    async def test_returns_product_with_its_seller(self, use_case: GetCatalogProductUseCase):
        result = await use_case.get(identifier='loja_da_ana', product_id=10)

        assert result.seller is ANA
        assert result.product is BOLO

    @pytest.mark.asyncio
    async def test_product_under_another_catalog_is_not_found(
        self, use_case: GetCatalogProductUseCase
    ):
        with pytest.raises(NotFoundError):
            await use_case.get(identifier='doces_do_bruno', product_id=10)

    @pytest.mark.asyncio
    async def test_missing_product(
        self, use_case: GetCatalogProductUseCase, product_query_repo: AsyncMock
    ):
        product_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.get(identifier='loja_da_ana', product_id=404)

    @pytest.mark.asyncio
    async def test_store_failure(
        self, use_case: GetCatalogProductUseCase, product_query_repo: AsyncMock
    ):
        product_query_repo.get_by_id.side_effect = OSError('db down')

        with pytest.raises(ExternalServiceError):
            await use_case.get(identifier='loja_da_ana', product_id=10)

    @pytest.mark.asyncio
    async def test_seller_store_failure(
        self, use_case: GetCatalogProductUseCase, seller_query_repo: AsyncMock
    ):
        seller_query_repo.get_by_id.side_effect = OSError('db down')

        with pytest.raises(ExternalServiceError):
            await use_case.get(identifier='loja_da_ana', product_id=10)


@pytest.mark.unit
class TestCheckIdentifierAvailability:
    @pytest.mark.asyncio
    async def test_available(self, seller_query_repo: AsyncMock):
        use_case = CheckIdentifierAvailabilityUseCase(seller_query_repo=seller_query_repo)

        result = await use_case.check('Nova Loja')

        assert result.identifier == 'novaloja'
        assert result.available is True
        seller_query_repo.exists_by_username.assert_awaited_once_with('novaloja')

    @pytest.mark.asyncio
    async def test_taken(self, seller_query_repo: AsyncMock):
        seller_query_repo.exists_by_username.return_value = True
        use_case = CheckIdentifierAvailabilityUseCase(seller_query_repo=seller_query_repo)

        result = await use_case.check('loja_da_ana')

        assert result.available is False
        assert result.reason == 'Username já está em uso'

    @pytest.mark.asyncio
    async def test_too_short_is_not_looked_up(self, seller_query_repo: AsyncMock):
        use_case = CheckIdentifierAvailabilityUseCase(seller_query_repo=seller_query_repo)

        result = await use_case.check('ab')

        assert result.available is False
        seller_query_repo.exists_by_username.assert_not_awaited()


@pytest.mark.unit
class TestGetCurrentSeller:
    SESSION = SessionIdentity(account_id=1, email='ana@catalogo.com.br', username='loja_da_ana')

    @pytest.mark.asyncio
    async def test_returns_session_seller(self, seller_query_repo: AsyncMock):
        use_case = GetCurrentSellerUseCase(seller_query_repo=seller_query_repo)

        seller = await use_case.get(self.SESSION)

        assert seller is ANA
        seller_query_repo.get_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_missing_profile(self, seller_query_repo: AsyncMock):
        seller_query_repo.get_by_id.return_value = None
        use_case = GetCurrentSellerUseCase(seller_query_repo=seller_query_repo)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.get(self.SESSION)

        assert exc_info.value.message == 'Vendedor não encontrado'

    @pytest.mark.asyncio
    async def test_store_failure(self, seller_query_repo: AsyncMock):
        seller_query_repo.get_by_id.side_effect = OSError('db down')
        use_case = GetCurrentSellerUseCase(seller_query_repo=seller_query_repo)

        with pytest.raises(ExternalServiceError):
            await use_case.get(self.SESSION)
