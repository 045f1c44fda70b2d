from fastapi import APIRouter
from pydantic import BaseModel

from src.config.settings import settings

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    environment: str
    version: str = "0.1.0"


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness only; the sponsor sheet is not probed."""
    return HealthCheckResponse(status="healthy", environment=settings.ENVIRONMENT)
