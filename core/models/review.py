# =============================================================================
# core/models/review.py - Review Schemas
# =============================================================================
# A review is a 1-5 star rating (plus optional text) left by a CLIENT on a
# collection point. Every write to reviews is followed by a recompute of
# the point's avg_rating.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

MIN_RATING = 1
MAX_RATING = 5


class ReviewCreate(BaseModel):
    """
    Example:
        {
            "collection_point_id": 1,
            "rating": 4,
            "text": "Clean and well organized"
        }
    """

    collection_point_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    text: str | None = Field(default=None, max_length=2000)


class ReviewUpdate(BaseModel):
    """
    Partial update of the caller's own review.

    Only the fields present in the body are written, so an explicit
    `"text": null` clears the text.
    """

    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    text: str | None = Field(default=None, max_length=2000)

    @model_validator(mode="after")
    def check_not_empty(self) -> "ReviewUpdate":
        if not self.model_fields_set & {"rating", "text"}:
            raise ValueError("Provide at least one of 'rating' or 'text'")
        if "rating" in self.model_fields_set and self.rating is None:
            raise ValueError("rating cannot be null")
        return self


class ReviewResponse(BaseModel):
    id: int
    user_id: int
    collection_point_id: int
    rating: int
    text: str | None = None
    created_at: datetime | None = None


class ReviewList(BaseModel):
    reviews: list[ReviewResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
