from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hr_dashboard.core.auth import authenticate, create_access_token
from hr_dashboard.core.config import settings
from hr_dashboard.core.dependencies import get_current_user
from hr_dashboard.models.auth import LoginRequest, TokenResponse, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    user = authenticate(request.email, request.password, settings.AUTH_DEMO_PASSWORD)
    if user is None:
        logger.warning("Failed login for email=%s", request.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    token = create_access_token(user, settings.AUTH_SECRET_KEY, settings.AUTH_TOKEN_TTL_MINUTES)
    logger.info("User %s logged in", user.email)
    return TokenResponse(
        access_token=token,
        expires_in=settings.AUTH_TOKEN_TTL_MINUTES * 60,
        user=user,
    )


@router.get("/me", response_model=UserInfo)
async def me(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return user
