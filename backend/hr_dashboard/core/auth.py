"""Demo session auth — fixed user directory and signed bearer tokens.

The password check is a demonstration device, not a security design.
"""

from __future__ import annotations

import hmac
import logging
import time
from typing import Any

from fastapi import HTTPException, status
from jose import jwt
from jose.constants import ALGORITHMS
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from hr_dashboard.core.avatars import avatar_url
from hr_dashboard.models.auth import UserInfo

logger = logging.getLogger("hr_auth")

TOKEN_ALGORITHM = ALGORITHMS.HS256
TOKEN_ISSUER = "hr-dashboard"

DEMO_USERS: list[UserInfo] = [
    UserInfo(id="1", email="admin@company.com", name="Admin User", roles=["admin"], avatar=avatar_url("admin")),
    UserInfo(id="2", email="hr@company.com", name="HR Manager", roles=["hr"], avatar=avatar_url("hr")),
    UserInfo(id="3", email="manager@company.com", name="Team Manager", roles=["manager"], avatar=avatar_url("manager")),
]


def find_user(email: str) -> UserInfo | None:
    for user in DEMO_USERS:
        if user.email == email:
            return user
    return None


def authenticate(email: str, password: str, demo_password: str) -> UserInfo | None:
    user = find_user(email)
    if user is None:
        return None
    if not hmac.compare_digest(password.encode("utf-8"), demo_password.encode("utf-8")):
        return None
    return user


def create_access_token(user: UserInfo, secret_key: str, ttl_minutes: int) -> str:
    if not secret_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Missing auth configuration",
        )

    now = int(time.time())
    claims = {
        "sub": user.id,
        "name": user.name,
        "email": user.email,
        "roles": user.roles,
        "avatar": user.avatar,
        "iss": TOKEN_ISSUER,
        "iat": now,
        "exp": now + ttl_minutes * 60,
    }
    return jwt.encode(claims, secret_key, algorithm=TOKEN_ALGORITHM)


def validate_token(token: str, secret_key: str) -> dict[str, Any]:
    if not secret_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Missing auth configuration",
        )

    try:
        return jwt.decode(
            token,
            secret_key,
            algorithms=[TOKEN_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={"require_exp": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is expired",
        ) from e
    except JWTClaimsError as e:
        logger.warning("Token claims rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        ) from e
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
        ) from e


def extract_roles_from_token(payload: dict[str, Any]) -> list[str]:
    roles = payload.get("roles", [])
    if not isinstance(roles, list):
        return []
    return [str(r) for r in roles if isinstance(r, str | int)]
