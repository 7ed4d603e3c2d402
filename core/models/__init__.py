# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: Accounts, roles, operator profiles, login
# - waste_type.py: Waste categories with disposal guidance
# - collection_point.py: Collection points with address and schedule
# - review.py: Ratings left on collection points
# - report.py: Issues filed about collection points
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# User Models - Accounts and authentication
# -----------------------------------------------------------------------------
from .user import (
    LoginRequest,
    OAuthProvider,
    OperatorProfile,
    TokenResponse,
    UserRegister,
    UserResponse,
    UserRole,
    UserUpdate,
)

# -----------------------------------------------------------------------------
# Waste Type Models
# -----------------------------------------------------------------------------
from .waste_type import WasteTypeCreate, WasteTypeResponse

# -----------------------------------------------------------------------------
# Collection Point Models
# -----------------------------------------------------------------------------
from .collection_point import (
    AddressData,
    CollectionPointCreate,
    CollectionPointList,
    CollectionPointResponse,
    CollectionPointUpdate,
    ScheduleData,
)

# -----------------------------------------------------------------------------
# Review Models
# -----------------------------------------------------------------------------
from .review import (
    MAX_RATING,
    MIN_RATING,
    ReviewCreate,
    ReviewList,
    ReviewResponse,
    ReviewUpdate,
)

# -----------------------------------------------------------------------------
# Report Models
# -----------------------------------------------------------------------------
from .report import (
    ReportCreate,
    ReportList,
    ReportResponse,
    ReportStatus,
    ReportStatusUpdate,
    ReportType,
)

__all__ = [
    # User
    "LoginRequest",
    "OAuthProvider",
    "OperatorProfile",
    "TokenResponse",
    "UserRegister",
    "UserResponse",
    "UserRole",
    "UserUpdate",
    # Waste type
    "WasteTypeCreate",
    "WasteTypeResponse",
    # Collection point
    "AddressData",
    "CollectionPointCreate",
    "CollectionPointList",
    "CollectionPointResponse",
    "CollectionPointUpdate",
    "ScheduleData",
    # Review
    "MAX_RATING",
    "MIN_RATING",
    "ReviewCreate",
    "ReviewList",
    "ReviewResponse",
    "ReviewUpdate",
    # Report
    "ReportCreate",
    "ReportList",
    "ReportResponse",
    "ReportStatus",
    "ReportStatusUpdate",
    "ReportType",
]
