"""Employee source adapter: upstream fetch, cache and record creation."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

import aiohttp
from pydantic import ValidationError

from hr_dashboard.core.avatars import DEFAULT_AVATAR_BASE_URL, avatar_url
from hr_dashboard.core.config import Settings
from hr_dashboard.models.employee import (
    DEPARTMENTS,
    Address,
    Company,
    CreateEmployeeRequest,
    Employee,
    Performance,
)
from hr_dashboard.services.employee_store import EmployeeServiceError, EmployeeStore

logger = logging.getLogger(__name__)

FEEDBACK_TEMPLATES: tuple[str, ...] = (
    "Excellent team player with strong communication skills",
    "Consistently delivers high-quality work on time",
    "Shows great initiative and problem-solving abilities",
    "Needs improvement in time management",
    "Outstanding leadership qualities",
    "Very collaborative and helpful to colleagues",
    "Could benefit from additional training in technical skills",
    "Demonstrates strong analytical thinking",
    "Excellent customer service orientation",
    "Shows potential for advancement",
)

BIO_TEMPLATES: tuple[str, ...] = (
    "Experienced professional with a passion for innovation and team collaboration.",
    "Detail-oriented individual with strong analytical and problem-solving skills.",
    "Creative thinker who brings fresh perspectives to challenging projects.",
    "Results-driven professional with excellent communication and leadership abilities.",
    "Dedicated team member with a commitment to continuous learning and improvement.",
)

DEFAULT_COMPANY_NAME = "TechCorp Inc."
DEFAULT_JOB_TITLE = "Employee"

PLACEHOLDER_ADDRESS = Address(
    street="123 Main St",
    city="New York",
    state="NY",
    postal_code="10001",
    country="USA",
)

# Upstream (dummyjson) address keys → Address attribute names
_ADDRESS_MAP: list[tuple[str, str]] = [
    ("street", "address"),
    ("city", "city"),
    ("state", "state"),
    ("postal_code", "postalCode"),
    ("country", "country"),
]


class EmployeeService:
    def __init__(self, store: EmployeeStore | None = None, rng: random.Random | None = None) -> None:
        self.store = store if store is not None else EmployeeStore()
        self.rng = rng if rng is not None else random.Random()
        self.source_url = ""
        self.source_limit = 20
        self.timeout = 10.0
        self.avatar_base_url = DEFAULT_AVATAR_BASE_URL
        self.initialized = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_SOURCE_URL:
            logger.warning("Employee source URL missing — EmployeeService not initialized")
            return

        self.source_url = settings.EMPLOYEE_SOURCE_URL
        self.source_limit = settings.EMPLOYEE_SOURCE_LIMIT
        self.timeout = settings.EMPLOYEE_SOURCE_TIMEOUT
        self.avatar_base_url = settings.AVATAR_BASE_URL
        if settings.EMPLOYEE_RANDOM_SEED is not None:
            self.rng.seed(settings.EMPLOYEE_RANDOM_SEED)
        self.initialized = True
        logger.info("EmployeeService initialized (source=%s, limit=%d)", self.source_url, self.source_limit)

    async def close(self) -> None:
        self.initialized = False
        self.source_url = ""

    async def fetch_employees(self) -> list[Employee]:
        """Return the cached collection, reading upstream while it is empty.

        Upstream failures are logged and yield an empty list; the cache stays
        empty so the next call tries again.
        """
        if not self.store.is_empty:
            return self.store.all()

        async with self.store.lock:
            if not self.store.is_empty:
                return self.store.all()

            if not self.initialized:
                logger.warning("EmployeeService not initialized — returning no employees")
                return []

            raw_users = await self._read_upstream()
            if not raw_users:
                return []

            try:
                employees = [self._transform_employee(raw) for raw in raw_users]
            except (ValidationError, KeyError, TypeError, AttributeError):
                logger.exception("Failed to map upstream employee records")
                return []

            try:
                self.store.populate(employees)
            except EmployeeServiceError:
                logger.exception("Rejected upstream employee records")
                return []
            logger.info("Loaded %d employees from upstream", len(employees))
            return self.store.all()

    async def get_employee(self, employee_id: int) -> Employee | None:
        await self.fetch_employees()
        return self.store.get(employee_id)

    async def create_employee(self, request: CreateEmployeeRequest) -> Employee:
        """Append a new employee with default performance.

        Raises EmptyStoreError when nothing has been loaded yet.
        """
        async with self.store.lock:
            employee = Employee(
                id=self.store.next_id(),
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                age=request.age,
                phone=request.phone,
                address=PLACEHOLDER_ADDRESS.model_copy(),
                company=Company(
                    department=request.department,
                    name=DEFAULT_COMPANY_NAME,
                    title=request.title,
                ),
                image=avatar_url(f"{request.first_name}{request.last_name}", self.avatar_base_url),
                performance=Performance(rating=3, projects=0, feedback=[]),
                bio=request.bio,
            )
            self.store.append(employee)

        logger.info("Created employee id=%d department=%s", employee.id, employee.company.department)
        return employee

    async def _read_upstream(self) -> list[dict[str, Any]]:
        url = self.source_url
        params = {"limit": str(self.source_limit)}

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params) as response:
                    if not 200 <= response.status < 300:
                        error_text = await response.text()
                        logger.error("Employee source returned %s: %s", response.status, error_text[:200])
                        return []
                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError):
            logger.exception("Failed to fetch employees from %s", url)
            return []

        users = data.get("users") if isinstance(data, dict) else None
        if not isinstance(users, list):
            logger.error("Employee source payload has no 'users' list")
            return []
        return users[: self.source_limit]

    def _transform_employee(self, raw: dict[str, Any]) -> Employee:
        address_raw = raw.get("address") or {}
        company_raw = raw.get("company") or {}

        address = Address(**{key: str(address_raw.get(upstream_key) or "") for key, upstream_key in _ADDRESS_MAP})

        department = self.rng.choice(DEPARTMENTS)
        rating = self.rng.randint(1, 5)
        projects = self.rng.randint(1, 10)
        feedback_count = self.rng.randint(1, 3)
        performance = Performance(
            rating=rating,
            projects=projects,
            feedback=[self.rng.choice(FEEDBACK_TEMPLATES) for _ in range(feedback_count)],
        )

        return Employee(
            id=raw["id"],
            first_name=raw.get("firstName", ""),
            last_name=raw.get("lastName", ""),
            email=raw.get("email", ""),
            age=raw.get("age", 0),
            phone=raw.get("phone", ""),
            address=address,
            company=Company(
                department=department,
                name=company_raw.get("name") or DEFAULT_COMPANY_NAME,
                title=company_raw.get("title") or DEFAULT_JOB_TITLE,
            ),
            image=raw.get("image") or "",
            performance=performance,
            bio=self.rng.choice(BIO_TEMPLATES),
        )


employee_service = EmployeeService()
