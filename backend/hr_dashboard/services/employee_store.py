"""In-memory employee collection shared by the source adapter and create."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from hr_dashboard.models.employee import Employee


class EmployeeServiceError(Exception):
    pass


class EmptyStoreError(EmployeeServiceError):
    """Raised when a new id is requested before any employees were loaded."""


class EmployeeStore:
    """Append-only list of employees.

    Callers that read-then-write (id assignment, first population) must hold
    ``lock`` for the whole sequence.
    """

    def __init__(self, employees: Iterable[Employee] | None = None) -> None:
        self._employees: list[Employee] = list(employees or [])
        self.lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._employees)

    @property
    def is_empty(self) -> bool:
        return not self._employees

    def all(self) -> list[Employee]:
        return list(self._employees)

    def get(self, employee_id: int) -> Employee | None:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def populate(self, employees: Iterable[Employee]) -> None:
        loaded = list(employees)
        ids = [e.id for e in loaded]
        if len(ids) != len(set(ids)):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise EmployeeServiceError(f"Duplicate employee ids: {duplicates}")
        self._employees = loaded

    def next_id(self) -> int:
        if not self._employees:
            raise EmptyStoreError("Cannot assign an employee id before the collection is loaded")
        return max(e.id for e in self._employees) + 1

    def append(self, employee: Employee) -> None:
        if self.get(employee.id) is not None:
            raise EmployeeServiceError(f"Duplicate employee id: {employee.id}")
        self._employees.append(employee)

    def clear(self) -> None:
        self._employees = []
