# =============================================================================
# app/routers/users.py - User Profile Endpoints
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import AuthUser, get_current_user
from core.models.user import UserResponse, UserUpdate
from core.services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=UserResponse)
def get_me(user: AuthUser = Depends(get_current_user)):
    """
    Get the current authenticated user's profile.

    Operators also get their organization block.
    """
    return UserService.get_profile(user.id)


@router.patch("/me", response_model=UserResponse)
def update_me(
    request: UserUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """Update name, surname or cellphone."""
    return UserService.update_profile(user.id, request)
