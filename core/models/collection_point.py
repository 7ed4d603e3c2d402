# =============================================================================
# core/models/collection_point.py - Collection Point Schemas
# =============================================================================
# These models define the API contract for collection points:
# - AddressData: Where the point is (one per point)
# - ScheduleData: When it is open (one per point)
# - CollectionPointCreate / CollectionPointUpdate: Operator input
# - CollectionPointResponse / CollectionPointList: Output with nested
#   address, schedule and accepted waste types
#
# avg_rating is derived from reviews and is never accepted as input.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from .waste_type import WasteTypeResponse

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class AddressData(BaseModel):
    """Street address and coordinates of a collection point."""

    street: str = Field(..., min_length=1, max_length=255)
    number: str | None = Field(default=None, max_length=16)
    city: str = Field(..., min_length=1, max_length=100)
    zip: str | None = Field(default=None, max_length=16)
    country: str = Field(default="Italia", max_length=100)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class ScheduleData(BaseModel):
    """
    Weekly opening schedule.

    Either `is_always_open` is set (street bins) or the open days plus an
    opening/closing time apply to every open day.
    """

    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False
    opening_time: str | None = Field(default=None, pattern=TIME_PATTERN, examples=["08:00"])
    closing_time: str | None = Field(default=None, pattern=TIME_PATTERN, examples=["20:00"])
    is_always_open: bool = False
    notes: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def check_hours(self) -> "ScheduleData":
        # Zero-padded HH:MM strings compare correctly as text
        if self.opening_time and self.closing_time and self.closing_time <= self.opening_time:
            raise ValueError("closing_time must be after opening_time")
        return self


class CollectionPointCreate(BaseModel):
    """
    Schema for creating a collection point.

    The owning operator is always the authenticated caller.

    Example:
        {
            "name": "Isola Ecologica Centro",
            "address": {"street": "Via Roma", "number": "123", "city": "Roma"},
            "schedule": {"monday": true, "opening_time": "08:00", "closing_time": "20:00"},
            "waste_type_ids": [1, 2, 3]
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    is_active: bool = True
    accessibility: str | None = Field(default=None, max_length=500)
    capacity: str | None = Field(default=None, max_length=255)
    address: AddressData
    schedule: ScheduleData | None = None
    waste_type_ids: list[int] = Field(default_factory=list)


class CollectionPointUpdate(BaseModel):
    """
    Partial update. Nested blocks replace the stored ones wholesale;
    `waste_type_ids` replaces the accepted waste types.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    is_active: bool | None = None
    accessibility: str | None = Field(default=None, max_length=500)
    capacity: str | None = Field(default=None, max_length=255)
    address: AddressData | None = None
    schedule: ScheduleData | None = None
    waste_type_ids: list[int] | None = None


class CollectionPointResponse(BaseModel):
    """Collection point with its nested address, schedule and waste types."""

    id: int
    operator_id: int
    name: str
    description: str | None = None
    is_active: bool = True
    accessibility: str | None = None
    capacity: str | None = None
    avg_rating: float | None = Field(
        default=None,
        description="Mean of all review ratings, null when unreviewed"
    )
    created_at: datetime | None = None
    address: AddressData | None = None
    schedule: ScheduleData | None = None
    waste_types: list[WasteTypeResponse] = Field(default_factory=list)


class CollectionPointList(BaseModel):
    """Paginated list returned by GET /collection-points."""

    collection_points: list[CollectionPointResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
