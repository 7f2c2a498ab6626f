from fastapi import APIRouter

from toolbridge.api.schemas import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def health_check():
    """Liveness probe used by the caller runtime."""
    return HealthResponse(status="ok")
