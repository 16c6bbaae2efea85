from src.platform.exception.exceptions import CustomBaseError, ExternalServiceError, NotFoundError
from src.service.catalog.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.value_object.session_identity import SessionIdentity


PRODUCT_NOT_FOUND_MESSAGE = 'Produto não encontrado'
LOAD_FAILED_MESSAGE = 'Erro ao carregar produto. Tente novamente.'


async def load_owned_product(
    product_query_repo: IProductQueryRepo, *, product_id: int, identity: SessionIdentity
) -> ProductEntity:
    """Product the session's seller may change; 404 when absent, 403 for someone else's."""
    try:
        product = await product_query_repo.get_by_id(product_id)
    except CustomBaseError:
        raise
    except Exception as e:
        raise ExternalServiceError(LOAD_FAILED_MESSAGE) from e

    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND_MESSAGE)
    product.ensure_owned_by(identity.account_id)
    return product
