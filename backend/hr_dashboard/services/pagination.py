from __future__ import annotations

import math
from collections.abc import Sequence

from hr_dashboard.models.dashboard import EmployeePage, PaginationState
from hr_dashboard.models.employee import Employee

DEFAULT_ITEMS_PER_PAGE = 9


def paginate(
    employees: Sequence[Employee],
    page: int,
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
) -> EmployeePage:
    """Slice one page out of ``employees``.

    Pages are 1-indexed. A page outside the collection yields no employees
    rather than an error, and ``total_pages`` never drops below 1.
    """
    if items_per_page < 1:
        raise ValueError(f"items_per_page must be positive, got {items_per_page}")

    total_items = len(employees)
    if page < 1:
        page_slice: list[Employee] = []
    else:
        start = (page - 1) * items_per_page
        page_slice = list(employees[start : start + items_per_page])

    return EmployeePage(
        employees=page_slice,
        pagination=PaginationState(
            current_page=page,
            total_pages=max(1, math.ceil(total_items / items_per_page)),
            total_items=total_items,
            items_per_page=items_per_page,
        ),
    )
