from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hr_dashboard.core.config import settings
from hr_dashboard.core.dependencies import get_current_user, require_role
from hr_dashboard.models.auth import UserInfo
from hr_dashboard.models.dashboard import EmployeePage
from hr_dashboard.models.employee import DEPARTMENTS, CreateEmployeeRequest, Employee
from hr_dashboard.services.employee_service import employee_service
from hr_dashboard.services.employee_store import EmployeeServiceError, EmptyStoreError
from hr_dashboard.services.filters import apply_filters
from hr_dashboard.services.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeePage)
async def list_employees(
    search: str | None = None,
    department: list[str] | None = Query(None),  # noqa: B008
    rating: list[int] | None = Query(None),  # noqa: B008
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    if rating and any(r < 1 or r > 5 for r in rating):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Ratings must be between 1 and 5",
        )

    employees = await employee_service.fetch_employees()
    filtered = apply_filters(employees, search, department, rating)
    return paginate(filtered, page, page_size or settings.ITEMS_PER_PAGE)


@router.get("/departments", response_model=list[str])
async def list_departments(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return list(DEPARTMENTS)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    employee = await employee_service.get_employee(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found",
        )
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: CreateEmployeeRequest,
    user: UserInfo = Depends(require_role("admin", "hr")),  # noqa: B008
):
    await employee_service.fetch_employees()

    try:
        employee = await employee_service.create_employee(request)
    except EmptyStoreError as err:
        logger.error("Create rejected for user=%s: %s", user.name, err)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Employee data is not loaded yet; try again later",
        ) from err
    except EmployeeServiceError as err:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err

    logger.info("Employee %d created by user=%s", employee.id, user.name)
    return employee
