from fastapi import APIRouter, Depends

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.query.get_admin_overview_use_case import GetAdminOverviewUseCase
from src.service.catalog.domain.value_object.session_identity import SessionIdentity
from src.service.catalog.driving_adapter.http_controller.auth.session_auth import (
    get_current_identity,
)
from src.service.catalog.driving_adapter.http_controller.schema.admin_schema import (
    AdminOverviewResponse,
)


router = APIRouter()


@router.get('/overview', response_model=AdminOverviewResponse)
@Logger.io
async def get_admin_overview(
    identity: SessionIdentity = Depends(get_current_identity),
    use_case: GetAdminOverviewUseCase = Depends(GetAdminOverviewUseCase.depends),
) -> AdminOverviewResponse:
    overview = await use_case.get_overview(identity)
    return AdminOverviewResponse.from_overview(overview, base_url=settings.PUBLIC_BASE_URL)
