# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .rating_service import compute_average_rating, update_collection_point_avg_rating
from .user_service import UserService
from .waste_type_service import WasteTypeService
from .collection_point_service import CollectionPointService
from .review_service import ReviewService
from .report_service import ReportService

__all__ = [
    "compute_average_rating",
    "update_collection_point_avg_rating",
    "UserService",
    "WasteTypeService",
    "CollectionPointService",
    "ReviewService",
    "ReportService",
]
