"""Department and organisation-wide performance metrics."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from hr_dashboard.models.dashboard import AnalyticsSummary, DepartmentStat, PerformanceBucket
from hr_dashboard.models.employee import DEPARTMENTS, Employee

HIGH_PERFORMER_RATING = 4


def round_one_decimal(value: float | Decimal) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _mean_rating(employees: Sequence[Employee]) -> float:
    if not employees:
        return 0.0
    total = Decimal(sum(e.performance.rating for e in employees))
    return round_one_decimal(total / len(employees))


def aggregate(employees: Sequence[Employee]) -> list[DepartmentStat]:
    """Per-department head count and mean rating, in department declaration order.

    Departments without members are left out.
    """
    by_department: dict[str, list[Employee]] = {name: [] for name in DEPARTMENTS}
    for employee in employees:
        members = by_department.get(employee.company.department)
        if members is not None:
            members.append(employee)

    return [
        DepartmentStat(name=name, count=len(members), average_rating=_mean_rating(members))
        for name, members in by_department.items()
        if members
    ]


def performance_distribution(employees: Sequence[Employee]) -> list[PerformanceBucket]:
    ratings = [e.performance.rating for e in employees]
    return [
        PerformanceBucket(name="Excellent (4-5)", value=sum(1 for r in ratings if r >= 4)),
        PerformanceBucket(name="Good (3-3.9)", value=sum(1 for r in ratings if 3 <= r < 4)),
        PerformanceBucket(name="Needs Improvement (1-2.9)", value=sum(1 for r in ratings if r < 3)),
    ]


def summarize(employees: Sequence[Employee], bookmarked: int = 0) -> AnalyticsSummary:
    department_stats = aggregate(employees)
    high_performers = sum(1 for e in employees if e.performance.rating >= HIGH_PERFORMER_RATING)
    share = round_one_decimal(Decimal(high_performers * 100) / len(employees)) if employees else 0.0

    return AnalyticsSummary(
        total_employees=len(employees),
        department_count=len(department_stats),
        average_rating=_mean_rating(employees),
        high_performers=high_performers,
        high_performer_share=share,
        bookmarked=bookmarked,
        department_stats=department_stats,
        performance_distribution=performance_distribution(employees),
    )
