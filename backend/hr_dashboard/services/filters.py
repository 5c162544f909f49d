from __future__ import annotations

from collections.abc import Collection, Iterable

from hr_dashboard.models.employee import Employee


def matches_search(employee: Employee, search_term: str) -> bool:
    term = search_term.lower()
    return any(
        term in field.lower()
        for field in (
            employee.first_name,
            employee.last_name,
            employee.email,
            employee.company.department,
        )
    )


def apply_filters(
    employees: Iterable[Employee],
    search_term: str | None = None,
    departments: Collection[str] | None = None,
    ratings: Collection[int] | None = None,
) -> list[Employee]:
    """Keep employees passing every active filter, in their original order.

    An empty or missing argument disables that filter.
    """
    search_term = search_term or ""
    selected_departments = set(departments or ())
    selected_ratings = set(ratings or ())

    return [
        employee
        for employee in employees
        if (not search_term or matches_search(employee, search_term))
        and (not selected_departments or employee.company.department in selected_departments)
        and (not selected_ratings or employee.performance.rating in selected_ratings)
    ]
