from fastapi import APIRouter, Depends

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.catalog_metrics import catalog_metrics
from src.service.catalog.app.query.get_catalog_product_use_case import GetCatalogProductUseCase
from src.service.catalog.app.query.resolve_catalog_use_case import ResolveCatalogUseCase
from src.service.catalog.driving_adapter.http_controller.schema.catalog_schema import (
    CatalogProductDetailResponse,
    CatalogResponse,
    build_catalog_product_response,
    build_catalog_response,
)


router = APIRouter()


@router.get('/{identifier}', response_model=CatalogResponse)
@Logger.io
async def get_catalog(
    identifier: str,
    use_case: ResolveCatalogUseCase = Depends(ResolveCatalogUseCase.depends),
) -> CatalogResponse:
    """Public catalog of a seller, one WhatsApp link per product."""
    view = await use_case.resolve(identifier)
    if view is None:
        raise NotFoundError(f'O usuário @{identifier} não existe ou não possui um catálogo público.')

    response = build_catalog_response(
        view, base_url=settings.PUBLIC_BASE_URL, country_code=settings.WHATSAPP_COUNTRY_CODE
    )
    for _ in response.products:
        catalog_metrics.record_whatsapp_link(kind='interest', with_phone=view.seller.has_whatsapp)
    return response


@router.get('/{identifier}/product/{product_id}', response_model=CatalogProductDetailResponse)
@Logger.io
async def get_catalog_product(
    identifier: str,
    product_id: int,
    use_case: GetCatalogProductUseCase = Depends(GetCatalogProductUseCase.depends),
) -> CatalogProductDetailResponse:
    catalog_product = await use_case.get(identifier=identifier, product_id=product_id)
    catalog_metrics.record_whatsapp_link(
        kind='inquiry', with_phone=catalog_product.seller.has_whatsapp
    )
    return build_catalog_product_response(
        catalog_product,
        base_url=settings.PUBLIC_BASE_URL,
        country_code=settings.WHATSAPP_COUNTRY_CODE,
    )
