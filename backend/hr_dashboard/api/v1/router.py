from fastapi import APIRouter

from hr_dashboard.api.v1.endpoints import analytics, auth, bookmarks, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(employees.router)
api_router.include_router(analytics.router)
api_router.include_router(bookmarks.router)
