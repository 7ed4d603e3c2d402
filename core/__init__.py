# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the API:
# - models/: Pydantic schemas for data validation
# - services/: Database-backed operations (one service per resource)
#
# Services raise the error types from app.exceptions but never see a
# request or response, so the seed script can reuse them outside FastAPI.
# =============================================================================
