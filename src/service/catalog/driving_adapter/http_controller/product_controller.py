from collections.abc import AsyncIterator

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, File, Response, UploadFile, status
import orjson
from sse_starlette.sse import EventSourceResponse

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.create_product_use_case import CreateProductUseCase
from src.service.catalog.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.catalog.app.command.update_product_use_case import UpdateProductUseCase
from src.service.catalog.app.command.upload_product_image_use_case import (
    UploadProductImageUseCase,
)
from src.service.catalog.app.interface.i_product_change_broadcaster import (
    IProductChangeBroadcaster,
)
from src.service.catalog.app.query.list_my_products_use_case import ListMyProductsUseCase
from src.service.catalog.domain.dashboard_domain import format_price
from src.service.catalog.domain.value_object.session_identity import SessionIdentity
from src.service.catalog.driving_adapter.http_controller.auth.session_auth import (
    get_current_identity,
)
from src.service.catalog.driving_adapter.http_controller.schema.product_schema import (
    MyProductsResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)


router = APIRouter()


@router.post('', response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductCreateRequest,
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.create(
        identity=identity,
        name=request.name,
        price=request.price,
        description=request.description,
        service_notes=request.service_notes,
    )
    return ProductResponse.from_entity(product)


@router.get('/my_product', response_model=MyProductsResponse)
@Logger.io
async def list_my_products(
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: ListMyProductsUseCase = Depends(ListMyProductsUseCase.depends),
) -> MyProductsResponse:
    dashboard = await use_case.list_for_seller(identity)
    return MyProductsResponse(
        products=[ProductResponse.from_entity(product) for product in dashboard.products],
        product_count=len(dashboard.products),
        image_count=dashboard.image_count,
        total_value=format_price(dashboard.total_value),
    )


@router.patch('/{product_id}', response_model=ProductResponse)
@Logger.io
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.update(
        identity=identity,
        product_id=product_id,
        name=request.name,
        price=request.price,
        description=request.description,
        service_notes=request.service_notes,
    )
    return ProductResponse.from_entity(product)


@router.delete('/{product_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_product(
    product_id: int,
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> Response:
    await use_case.delete(identity=identity, product_id=product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put('/{product_id}/image', response_model=ProductResponse)
@Logger.io
async def upload_product_image(
    product_id: int,
    image: UploadFile = File(...),
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: UploadProductImageUseCase = Depends(UploadProductImageUseCase.depends),
) -> ProductResponse:
    # Read one byte past the cap so oversize uploads are rejected without reading them whole
    content = await image.read(use_case.max_image_bytes + 1)
    product = await use_case.upload(
        identity=identity,
        product_id=product_id,
        content=content,
        content_type=image.content_type or '',
    )
    return ProductResponse.from_entity(product)


# ============================ SSE Endpoint ============================


@router.get('/sse', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def stream_product_changes(
    identity: SessionIdentity = Depends(get_current_identity),
    broadcaster: IProductChangeBroadcaster = Depends(Provide[Container.product_broadcaster]),
) -> EventSourceResponse:
    """
    SSE stream of changes to the current seller's products

    Lets an open dashboard refresh itself; clients that do not listen simply
    re-fetch `/my_product`.
    """
    seller_id = identity.account_id
    Logger.base.info(f'📡 [SSE] Seller {seller_id} subscribing to product changes')

    async def event_generator() -> AsyncIterator[dict[str, str]]:
        stream = await broadcaster.subscribe(seller_id=seller_id)
        try:
            yield {
                'event': 'connected',
                'data': orjson.dumps({'seller_id': seller_id}).decode(),
            }
            async for event_data in stream:
                yield {'event': 'product_change', 'data': orjson.dumps(event_data).decode()}
        except anyio.get_cancelled_exc_class():
            Logger.base.info(f'🔌 [SSE] Client disconnected: seller={seller_id}')
            raise
        finally:
            with anyio.CancelScope(shield=True):
                await broadcaster.unsubscribe(seller_id=seller_id, stream=stream)

    return EventSourceResponse(event_generator())
