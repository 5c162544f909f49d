"""Derived views over the employee collection: pages and analytics."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hr_dashboard.models.employee import Employee


class PaginationState(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class EmployeePage(BaseModel):
    """One page of the (filtered) employee collection."""

    employees: list[Employee]
    pagination: PaginationState


class DepartmentStat(BaseModel):
    name: str
    count: int = Field(..., ge=1)
    average_rating: float


class PerformanceBucket(BaseModel):
    name: str
    value: int


class AnalyticsSummary(BaseModel):
    """Organisation-wide metrics for the analytics view."""

    total_employees: int
    department_count: int
    average_rating: float
    high_performers: int
    high_performer_share: float
    bookmarked: int = 0
    department_stats: list[DepartmentStat] = []
    performance_distribution: list[PerformanceBucket] = []


class BookmarkList(BaseModel):
    ids: list[int] = []
