# school_admin/routers/dashboard.py
from fastapi import APIRouter, Depends

from ..core.deps import get_services
from ..services import Services

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=dict)
async def get_dashboard_stats(services: Services = Depends(get_services)):
    """Student and payment totals"""
    return await services.dashboard.stats()
