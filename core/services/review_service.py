# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Handles review CRUD and keeps collection_points.avg_rating in step with
# the reviews table. Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.review import ReviewCreate, ReviewUpdate
from core.services.rating_service import update_collection_point_avg_rating
from app.exceptions import (
    CollectionPointNotFoundError,
    DuplicateReviewError,
    PermissionDeniedError,
    ReviewNotFoundError,
)

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service for review operations.

    Every write recomputes the average rating of the affected point.
    """

    @staticmethod
    def get_review(review_id: int) -> dict[str, Any]:
        """
        Get a review by ID.

        Raises:
            ReviewNotFoundError: If the review doesn't exist
        """
        review = SupabaseClient.fetch_by_id("reviews", review_id)
        if not review:
            raise ReviewNotFoundError(review_id)
        return review

    @staticmethod
    def get_owned_review(review_id: int, user_id: int) -> dict[str, Any]:
        """
        Get a review and verify the caller wrote it.

        Raises:
            ReviewNotFoundError: If the review doesn't exist
            PermissionDeniedError: If another user wrote it
        """
        review = ReviewService.get_review(review_id)
        if review["user_id"] != user_id:
            logger.warning(f"User {user_id} tried to modify review {review_id} owned by {review['user_id']}")
            raise PermissionDeniedError(
                "Not authorized to modify this review",
                details={"review_id": review_id},
            )
        return review

    @staticmethod
    def list_reviews(
        page: int,
        page_size: int,
        collection_point_id: int | None = None,
        user_id: int | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        List reviews, newest first.

        Returns:
            Tuple of (reviews list, total count)
        """
        filters: dict[str, Any] = {}
        if collection_point_id is not None:
            filters["collection_point_id"] = collection_point_id
        if user_id is not None:
            filters["user_id"] = user_id

        return SupabaseClient.fetch_page("reviews", page, page_size, filters=filters)

    @staticmethod
    def create_review(user_id: int, data: ReviewCreate) -> dict[str, Any]:
        """
        Create a review and refresh the point's average rating.

        Raises:
            CollectionPointNotFoundError: If the point doesn't exist
            DuplicateReviewError: If the user already reviewed this point
        """
        point = SupabaseClient.fetch_by_id("collection_points", data.collection_point_id, columns="id")
        if not point:
            raise CollectionPointNotFoundError(data.collection_point_id)

        existing = SupabaseClient.fetch_rows(
            "reviews",
            columns="id",
            filters={"user_id": user_id, "collection_point_id": data.collection_point_id},
        )
        if existing:
            raise DuplicateReviewError(data.collection_point_id)

        review = SupabaseClient.insert_row(
            "reviews",
            {
                "user_id": user_id,
                "collection_point_id": data.collection_point_id,
                "rating": data.rating,
                "text": data.text,
            },
        )
        logger.info(f"Created review {review['id']} on collection point {data.collection_point_id} by user {user_id}")

        update_collection_point_avg_rating(data.collection_point_id)
        return review

    @staticmethod
    def update_review(review_id: int, user_id: int, data: ReviewUpdate) -> dict[str, Any]:
        """
        Update the caller's own review.

        The average is recomputed only when the rating changed.

        Raises:
            ReviewNotFoundError: If the review doesn't exist
            PermissionDeniedError: If another user wrote it
        """
        review = ReviewService.get_owned_review(review_id, user_id)

        changes = data.model_dump(exclude_unset=True)
        updated = SupabaseClient.update_rows("reviews", changes, filters={"id": review_id})
        if not updated:
            raise ReviewNotFoundError(review_id)

        if "rating" in changes and changes["rating"] != review["rating"]:
            update_collection_point_avg_rating(review["collection_point_id"])

        logger.info(f"Updated review {review_id}: {sorted(changes)}")
        return updated[0]

    @staticmethod
    def delete_review(review_id: int, user_id: int) -> None:
        """
        Delete the caller's own review and refresh the point's average rating.

        Raises:
            ReviewNotFoundError: If the review doesn't exist
            PermissionDeniedError: If another user wrote it
        """
        review = ReviewService.get_owned_review(review_id, user_id)

        SupabaseClient.delete_rows("reviews", filters={"id": review_id})
        logger.info(f"Deleted review {review_id} by user {user_id}")

        update_collection_point_avg_rating(review["collection_point_id"])
