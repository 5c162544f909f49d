"""Employee models for the dashboard's in-memory employee collection."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEPARTMENTS: tuple[str, ...] = (
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Operations",
    "Design",
    "Product",
    "Legal",
    "Support",
)


class Address(BaseModel):
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""


class Company(BaseModel):
    """Employer details. ``department`` is checked against DEPARTMENTS where
    records are built (upstream synthesis and CreateEmployeeRequest), not here.
    """

    department: str
    name: str
    title: str


class Performance(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    projects: int = Field(default=0, ge=0)
    feedback: list[str] = []


class Employee(BaseModel):
    """Full employee record as rendered by cards and the detail view."""

    id: int
    first_name: str
    last_name: str
    email: str
    age: int
    phone: str
    address: Address
    company: Company
    image: str = ""
    performance: Performance
    bio: str = ""


class CreateEmployeeRequest(BaseModel):
    """Request body for the new-employee form.

    Performance fields are not part of the contract; unknown keys are ignored.
    """

    first_name: str = Field(..., min_length=2)
    last_name: str = Field(..., min_length=2)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    age: int = Field(..., ge=18, le=100)
    phone: str = Field(..., min_length=10)
    department: str
    title: str = Field(..., min_length=2)
    bio: str = Field(..., min_length=10)

    @field_validator("department")
    @classmethod
    def _known_department(cls, value: str) -> str:
        if value not in DEPARTMENTS:
            raise ValueError(f"Unknown department: {value}")
        return value
