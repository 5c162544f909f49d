from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hr_dashboard.core.dependencies import get_current_user
from hr_dashboard.models.auth import UserInfo
from hr_dashboard.models.dashboard import BookmarkList
from hr_dashboard.models.employee import Employee
from hr_dashboard.services.bookmark_service import bookmark_service
from hr_dashboard.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("", response_model=list[Employee])
async def list_bookmarked_employees(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    bookmarked = set(bookmark_service.get_ids(user.id or ""))
    employees = await employee_service.fetch_employees()
    return [e for e in employees if e.id in bookmarked]


@router.post("/{employee_id}", response_model=BookmarkList)
async def add_bookmark(
    employee_id: int,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    if await employee_service.get_employee(employee_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found",
        )
    return BookmarkList(ids=bookmark_service.add(user.id or "", employee_id))


@router.delete("/{employee_id}", response_model=BookmarkList)
async def remove_bookmark(
    employee_id: int,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    return BookmarkList(ids=bookmark_service.remove(user.id or "", employee_id))
