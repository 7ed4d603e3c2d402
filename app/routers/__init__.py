# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - users.py: Profile of the logged-in user
# - waste_types.py: Waste type catalogue
# - collection_points.py: Collection point browsing and management
# - reviews.py: Reviews and average-rating maintenance
# - reports.py: Citizen reports and their status
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users
from . import waste_types
from . import collection_points
from . import reviews
from . import reports

__all__ = [
    "health",
    "users",
    "waste_types",
    "collection_points",
    "reviews",
    "reports",
]
