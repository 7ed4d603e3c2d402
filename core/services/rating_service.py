# =============================================================================
# core/services/rating_service.py - Average Rating Maintenance
# =============================================================================
# collection_points.avg_rating is derived data: it must equal the mean of the
# ratings of every review still attached to the point, and be null when
# there are none. Call update_collection_point_avg_rating() after any review
# insert, update or delete touching the point.
#
# The recompute is a fresh aggregate every time (no caching, no batching).
# It runs after the review write has committed, so a concurrent review write
# can land between the two; the next recompute repairs the value.
# =============================================================================

import logging
from typing import Iterable

from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


def compute_average_rating(ratings: Iterable[int | float | None]) -> float | None:
    """
    Mean of the given ratings, ignoring nulls.

    Returns:
        The arithmetic mean, or None when there is nothing to average
    """
    values = [float(r) for r in ratings if r is not None]
    if not values:
        return None
    return sum(values) / len(values)


def update_collection_point_avg_rating(collection_point_id: int) -> float | None:
    """
    Recompute and persist the average rating of a collection point.

    Args:
        collection_point_id: The collection point whose reviews changed

    Returns:
        The new average (None when the point has no reviews left)

    Raises:
        SupabaseClientError: If either query fails
    """
    rows = SupabaseClient.fetch_rows(
        "reviews",
        columns="rating",
        filters={"collection_point_id": collection_point_id},
    )
    average = compute_average_rating(row.get("rating") for row in rows)

    SupabaseClient.update_rows(
        "collection_points",
        {"avg_rating": average},
        filters={"id": collection_point_id},
    )

    logger.info(
        f"Recomputed avg_rating for collection point {collection_point_id}: "
        f"{average} over {len(rows)} reviews"
    )
    return average
