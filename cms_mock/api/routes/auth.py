"""auth.py — Login, logout and login-type lookup.

Endpoints:
    GET  /api/login      → Check email/password/type against fixture users
    GET  /api/userType   → Read the login type back out of a token
    POST /api/logout     → Always succeeds

Tokens are not stored anywhere; the login type rides along after ``~``
so the frontend can route to the right dashboard.

Called by: main.py (mounted under API_NAMESPACE)
Depends on: deps.py (DBSession), mock/factory.py, tables.py (User)
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Header, Query
from sqlalchemy import select

from cms_mock.api.deps import DBSession
from cms_mock.api.errors import MockApiError
from cms_mock.mock.factory import create_token, parse_login_type
from cms_mock.models.tables import User

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.get("/login")
async def login(
    db: DBSession,
    email: str | None = None,
    password: str | None = None,
    login_type: Annotated[str | None, Query(alias="loginType")] = None,
):
    """Log in as a fixture user.

    All three of email, password and loginType must match one user.

    Returns:
        Envelope with ``{token, loginType}``.

    Raises:
        MockApiError: 403 (code 400) if no user matches.
    """
    if email is None or password is None or login_type is None:
        user = None
    else:
        result = await db.execute(
            select(User).where(
                User.email == email,
                User.password == password,
                User.type == login_type,
            )
        )
        user = result.scalars().first()

    if user is None:
        logger.info("Login rejected for email=%s type=%s", email, login_type)
        raise MockApiError(403, "Check user or email", code=400)

    logger.info("Login accepted for email=%s type=%s", email, login_type)
    return {
        "data": {"token": create_token(login_type), "loginType": login_type},
        "code": 200,
        "msg": "login success",
    }


@router.get("/userType")
async def user_type(
    token: str | None = None,
    authorization: Annotated[str | None, Header()] = None,
):
    """Return the login type embedded in a token.

    The token is read from ``?token=`` first, then from an
    ``Authorization: Bearer`` header.

    Raises:
        MockApiError: 400 if no token or no type can be found.
    """
    if token is None and authorization and authorization.startswith("Bearer "):
        token = authorization.split(" ", 1)[1]

    login_type = parse_login_type(token)
    if login_type is None:
        raise MockApiError(400, "Token is not exist")
    return {"data": login_type, "msg": "success", "code": 200}


@router.post("/logout")
async def logout():
    """Log out. Nothing is stored, so this always succeeds."""
    return {"data": True, "msg": "success", "code": 200}
