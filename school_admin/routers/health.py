"""Health check endpoints."""
from fastapi import APIRouter, Depends
import logging

from ..core.config import settings
from ..core.deps import get_services
from ..models import ALL_RESOURCES
from ..services import Services

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment
    }


@router.get("/data-source")
async def data_source_health(services: Services = Depends(get_services)):
    """Data source check: counts every collection"""
    source = services.source
    try:
        counts = {}
        for resource in ALL_RESOURCES:
            records = await source.all(resource)
            counts[resource.name] = len(records)
        return {
            "status": "healthy",
            "data_source": type(source).__name__,
            "collections": counts
        }
    except Exception as e:
        logger.error(f"Data source health check failed: {e}")
        return {
            "status": "unhealthy",
            "data_source": type(source).__name__,
            "error": str(e),
            "error_type": type(e).__name__
        }
