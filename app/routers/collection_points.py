# =============================================================================
# app/routers/collection_points.py - Collection Point Endpoints
# =============================================================================
# Anyone can browse collection points. Operators create points they own and
# manage them afterwards; admins may manage any point.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from app.auth import AuthUser, require_roles
from app.dependencies import PaginationDep, resolve_id
from core.models.collection_point import (
    CollectionPointCreate,
    CollectionPointList,
    CollectionPointResponse,
    CollectionPointUpdate,
)
from core.models.user import UserRole
from core.services.collection_point_service import CollectionPointService

router = APIRouter()

require_manager = require_roles(UserRole.OPERATOR, UserRole.ADMIN)


@router.get("", response_model=CollectionPointList)
def list_collection_points(
    pagination: PaginationDep,
    city: Annotated[str | None, Query(min_length=1, description="Filter by city")] = None,
    waste_type_id: Annotated[int | None, Query(gt=0, description="Only points accepting this waste type")] = None,
    active: Annotated[bool, Query(description="Only active points (false lists all)")] = True,
    operator_id: Annotated[int | None, Query(gt=0, description="Only points of this operator")] = None,
):
    """
    List collection points ordered by name.

    Each point includes its address, schedule and accepted waste types.
    """
    page, page_size = pagination
    points, total = CollectionPointService.list_points(
        page=page,
        page_size=page_size,
        city=city,
        waste_type_id=waste_type_id,
        active_only=active,
        operator_id=operator_id,
    )
    return CollectionPointList(
        collection_points=points,
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{collection_point_id}", response_model=CollectionPointResponse)
def get_collection_point(collection_point_id: str):
    """Get a collection point with its address, schedule and waste types."""
    return CollectionPointService.get_point(resolve_id(collection_point_id, "collection point"))


@router.post("", response_model=CollectionPointResponse, status_code=status.HTTP_201_CREATED)
def create_collection_point(
    request: CollectionPointCreate,
    user: AuthUser = Depends(require_manager),
):
    """
    Create a collection point owned by the caller.

    - **waste_type_ids**: ids from GET /waste-types
    """
    return CollectionPointService.create_point(user.id, request)


@router.patch("/{collection_point_id}", response_model=CollectionPointResponse)
def update_collection_point(
    collection_point_id: str,
    request: CollectionPointUpdate,
    user: AuthUser = Depends(require_manager),
):
    """
    Update a collection point you operate.

    Supplying `address`, `schedule` or `waste_type_ids` replaces them.
    """
    return CollectionPointService.update_point(
        resolve_id(collection_point_id, "collection point"),
        user.id,
        user.role,
        request,
    )


@router.delete("/{collection_point_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_collection_point(
    collection_point_id: str,
    user: AuthUser = Depends(require_manager),
) -> Response:
    """Delete a collection point you operate, with its reviews and reports."""
    CollectionPointService.delete_point(
        resolve_id(collection_point_id, "collection point"),
        user.id,
        user.role,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
