# =============================================================================
# app/routers/waste_types.py - Waste Type Endpoints
# =============================================================================

from fastapi import APIRouter, Depends, status

from app.auth import AuthUser, require_roles
from app.dependencies import resolve_id
from core.models.user import UserRole
from core.models.waste_type import WasteTypeCreate, WasteTypeResponse
from core.services.waste_type_service import WasteTypeService

router = APIRouter()


@router.get("", response_model=list[WasteTypeResponse])
def list_waste_types():
    """List every waste type with its disposal guidance."""
    return WasteTypeService.list_waste_types()


@router.get("/{waste_type_id}", response_model=WasteTypeResponse)
def get_waste_type(waste_type_id: str):
    return WasteTypeService.get_waste_type(resolve_id(waste_type_id, "waste type"))


@router.post("", response_model=WasteTypeResponse, status_code=status.HTTP_201_CREATED)
def create_waste_type(
    request: WasteTypeCreate,
    user: AuthUser = Depends(require_roles(UserRole.ADMIN)),
):
    """Add a waste type (admin only)."""
    return WasteTypeService.create_waste_type(request)
