from __future__ import annotations

from fastapi import APIRouter, Depends

from hr_dashboard.core.config import settings
from hr_dashboard.core.dependencies import get_current_user
from hr_dashboard.models.auth import UserInfo
from hr_dashboard.services.employee_service import employee_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    if not employee_service.initialized:
        services["employee_source"] = "not_configured"
    elif employee_service.store.is_empty:
        services["employee_source"] = "not_loaded"
    else:
        services["employee_source"] = "ok"

    services["auth"] = "ok" if settings.AUTH_SECRET_KEY else "not_configured"

    all_ok = all(v in ("ok", "not_loaded") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "employees_loaded": len(employee_service.store),
        "services": services,
    }


@router.get("/protected")
async def health_protected(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return {"status": "ok", "user": user.model_dump()}


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
