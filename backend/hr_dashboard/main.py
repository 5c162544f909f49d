from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_dashboard.api.v1.router import api_router
from hr_dashboard.core.config import settings
from hr_dashboard.services.employee_service import employee_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeService — continuing without employee source")
    if not settings.AUTH_SECRET_KEY:
        logger.warning("AUTH_SECRET_KEY not set — login is disabled")
    yield
    await employee_service.close()


app = FastAPI(
    title="HR Dashboard API",
    description="Employee performance dashboard: search, pagination, bookmarks and analytics",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "HR Dashboard API"}
