# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for account creation and session handling:
# - POST /auth/register: create an account
# - POST /auth/login: exchange credentials for an access token (+ cookie)
# - POST /auth/logout: drop the session cookie
# - GET  /auth/verify: check that a token is still valid
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Response, status

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser
from app.config import settings
from core.models.user import LoginRequest, TokenResponse, UserRegister, UserResponse
from core.services.user_service import UserService
from lib.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(request: UserRegister) -> UserResponse:
    """
    Create an account.

    - **role**: USER (default), CLIENT or OPERATOR
    - **operator**: required for OPERATOR, organization metadata

    Raises:
        409: If the email is already registered
    """
    user = UserService.register(request)
    return UserResponse(**user)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, response: Response) -> TokenResponse:
    """
    Log in with email and password.

    Returns a bearer token and also stores it in an HttpOnly cookie for
    browser clients.

    Raises:
        401: If the credentials are wrong
    """
    user = UserService.authenticate(request.email, request.password)
    token = create_access_token(user["id"], user["email"], user["role"])
    expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )

    logger.info(f"User {user['id']} logged in")
    return TokenResponse(
        access_token=token,
        expires_in=expires_in,
        user=UserResponse(**UserService.get_profile(user["id"])),
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout() -> Response:
    """Clear the session cookie. Bearer tokens simply expire."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": user.id,
        "email": user.email,
        "role": user.role.value,
    }
