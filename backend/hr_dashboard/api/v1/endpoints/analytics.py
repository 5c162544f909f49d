from __future__ import annotations

from fastapi import APIRouter, Depends

from hr_dashboard.core.dependencies import get_current_user
from hr_dashboard.models.auth import UserInfo
from hr_dashboard.models.dashboard import AnalyticsSummary
from hr_dashboard.services.analytics import summarize
from hr_dashboard.services.bookmark_service import bookmark_service
from hr_dashboard.services.employee_service import employee_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsSummary)
async def get_analytics(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    employees = await employee_service.fetch_employees()
    return summarize(employees, bookmarked=bookmark_service.count(user.id or ""))
