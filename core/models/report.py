# =============================================================================
# core/models/report.py - Report Schemas
# =============================================================================
# A report is an issue a citizen files about a collection point's state
# (full bin, dirty area...). Operators work them through a small status
# machine:
#
#     PENDING -> IN_PROGRESS -> RESOLVED
#     IN_PROGRESS | RESOLVED -> PENDING   (reopen)
#
# resolved_by records the operator who picked the report up.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReportType(str, Enum):
    FULL_BIN = "FULL_BIN"
    NEEDS_CLEANING = "NEEDS_CLEANING"
    DAMAGED = "DAMAGED"
    ILLEGAL_DUMPING = "ILLEGAL_DUMPING"
    OTHER = "OTHER"


class ReportStatus(str, Enum):
    """
    - PENDING: Filed, nobody working on it
    - IN_PROGRESS: An operator picked it up
    - RESOLVED: Closed by an operator
    """
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class ReportCreate(BaseModel):
    """
    Example:
        {
            "collection_point_id": 2,
            "type": "FULL_BIN",
            "description": "Il cassonetto della plastica è pieno"
        }
    """

    collection_point_id: int = Field(..., gt=0)
    type: ReportType
    description: str = Field(..., min_length=1, max_length=2000)


class ReportStatusUpdate(BaseModel):
    status: ReportStatus


class ReportResponse(BaseModel):
    id: int
    user_id: int
    collection_point_id: int
    type: ReportType
    description: str | None = None
    status: ReportStatus
    resolved_by: int | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None


class ReportList(BaseModel):
    reports: list[ReportResponse] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
