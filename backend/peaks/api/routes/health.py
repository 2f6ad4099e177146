"""Health Probe - liveness endpoint for container orchestration."""

from fastapi import APIRouter, Depends, status

from peaks.core.repository_protocols import PeakRepository
from peaks.infrastructure.peak_repository import get_peak_repository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(
    repository: PeakRepository = Depends(get_peak_repository),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "conquered-peaks-api",
        "version": "1.0.0",
        "peaks": repository.count(),
    }
