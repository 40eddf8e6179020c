"""Health check API endpoints."""

from fastapi import APIRouter, Depends

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..storage import Storage, get_storage

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(storage: Storage = Depends(get_storage)):
    """Get overall service health status."""
    health_service = HealthService(storage.tokens, storage.notes)
    return health_service.get_health_status()
