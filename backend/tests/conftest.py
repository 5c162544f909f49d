from __future__ import annotations

import random

import pytest
from starlette.testclient import TestClient

from hr_dashboard.core.auth import DEMO_USERS, create_access_token
from hr_dashboard.core.dependencies import get_current_user
from hr_dashboard.main import app
from hr_dashboard.models.auth import UserInfo
from hr_dashboard.models.employee import Address, Company, Employee, Performance
from hr_dashboard.services.bookmark_service import bookmark_service
from hr_dashboard.services.employee_service import employee_service

TEST_SECRET_KEY = "test-secret-key-0000000000000000"

SAMPLE_UPSTREAM_USER = {
    "id": 1,
    "firstName": "Emily",
    "lastName": "Johnson",
    "email": "emily.johnson@x.dummyjson.com",
    "age": 28,
    "phone": "+81 965-431-3024",
    "image": "https://dummyjson.com/icon/emilys/128",
    "address": {
        "address": "626 Main Street",
        "city": "Phoenix",
        "state": "Mississippi",
        "stateCode": "MS",
        "postalCode": "29112",
        "country": "United States",
    },
    "company": {
        "department": "Engineering",
        "name": "Dooley, Kozey and Cronin",
        "title": "Sales Manager",
    },
}


def make_employee(
    employee_id: int,
    *,
    first_name: str = "Jane",
    last_name: str = "Doe",
    email: str | None = None,
    department: str = "Engineering",
    rating: int = 3,
) -> Employee:
    return Employee(
        id=employee_id,
        first_name=first_name,
        last_name=last_name,
        email=email or f"{first_name.lower()}.{last_name.lower()}{employee_id}@company.com",
        age=30,
        phone="+1 555-000-0000",
        address=Address(street="1 Test Way", city="Austin", state="TX", postal_code="73301", country="USA"),
        company=Company(department=department, name="Acme", title="Engineer"),
        image="",
        performance=Performance(rating=rating, projects=2, feedback=["Shows potential for advancement"]),
        bio="Test bio for a sample employee.",
    )


def sample_employees() -> list[Employee]:
    return [
        make_employee(1, first_name="Emily", last_name="Johnson", department="Engineering", rating=4),
        make_employee(2, first_name="Michael", last_name="Williams", department="Marketing", rating=2),
        make_employee(3, first_name="Sophia", last_name="Brown", department="Engineering", rating=5),
        make_employee(4, first_name="James", last_name="Davis", department="Sales", rating=3),
        make_employee(5, first_name="Emma", last_name="Miller", department="HR", rating=1),
        make_employee(6, first_name="Olivia", last_name="Wilson", department="Engineering", rating=3),
    ]


@pytest.fixture(autouse=True)
def _auth_settings():
    from hr_dashboard.core.config import settings

    original_secret = settings.AUTH_SECRET_KEY
    settings.AUTH_SECRET_KEY = TEST_SECRET_KEY
    yield
    settings.AUTH_SECRET_KEY = original_secret


@pytest.fixture(autouse=True)
def _reset_state():
    employee_service.store.populate(sample_employees())
    employee_service.rng = random.Random(42)
    bookmark_service.clear()
    yield
    employee_service.store.clear()
    bookmark_service.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_user_admin():
    return DEMO_USERS[0]


@pytest.fixture
def mock_user_hr():
    return DEMO_USERS[1]


@pytest.fixture
def mock_user_manager():
    return DEMO_USERS[2]


@pytest.fixture
def authenticated_client(mock_user_admin):
    app.dependency_overrides[get_current_user] = lambda: mock_user_admin
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def manager_client(mock_user_manager):
    app.dependency_overrides[get_current_user] = lambda: mock_user_manager
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user: UserInfo) -> dict[str, str]:
        token = create_access_token(user, TEST_SECRET_KEY, ttl_minutes=5)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def anyio_backend():
    return "asyncio"
