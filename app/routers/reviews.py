# =============================================================================
# app/routers/reviews.py - Review Endpoints
# =============================================================================
# Reading reviews is public. Writing them requires a CLIENT account, and a
# client may only edit or delete their own reviews. Every write refreshes the
# collection point's average rating.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from app.auth import AuthUser, require_roles
from app.dependencies import PaginationDep, resolve_id
from app.exceptions import EcoPointException, ReviewDeleteError
from core.models.review import ReviewCreate, ReviewList, ReviewResponse, ReviewUpdate
from core.models.user import UserRole
from core.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter()

require_client = require_roles(UserRole.CLIENT)


@router.get("", response_model=ReviewList)
def list_reviews(
    pagination: PaginationDep,
    collection_point_id: Annotated[int | None, Query(gt=0, description="Only reviews of this point")] = None,
):
    """List reviews, newest first. Filter by collection point."""
    page, page_size = pagination
    reviews, total = ReviewService.list_reviews(
        page=page,
        page_size=page_size,
        collection_point_id=collection_point_id,
    )
    return ReviewList(reviews=reviews, total=total, page=page, page_size=page_size)


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(review_id: str):
    """Get a single review."""
    return ReviewService.get_review(resolve_id(review_id, "review"))


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    request: ReviewCreate,
    user: AuthUser = Depends(require_client),
):
    """
    Review a collection point.

    - **rating**: 1 to 5
    - One review per user per collection point
    """
    return ReviewService.create_review(user.id, request)


@router.patch("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: str,
    request: ReviewUpdate,
    user: AuthUser = Depends(require_client),
):
    """Edit the rating and/or text of your own review."""
    return ReviewService.update_review(resolve_id(review_id, "review"), user.id, request)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: str,
    user: AuthUser = Depends(require_client),
) -> Response:
    """
    Delete your own review.

    Responses:
    - 204: Deleted, average rating recomputed
    - 400: Id is not numeric
    - 401 / 403: Not logged in / not a CLIENT or not the author
    - 404: No such review
    - 500: Anything else
    """
    parsed_id = resolve_id(review_id, "review")

    try:
        ReviewService.delete_review(parsed_id, user.id)
    except EcoPointException:
        raise
    except Exception as e:
        logger.exception(f"Failed to delete review {parsed_id}: {e}")
        raise ReviewDeleteError(parsed_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
