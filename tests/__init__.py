# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the EcoPoint API:
# - test_models.py: Pydantic model validation
# - test_utils.py: Identifier parsing, rating arithmetic, token helpers
# - test_rating_service.py: Average-rating maintenance
# - test_*_api.py, test_health.py: Endpoint tests against an in-memory database
# - test_seed.py: Seed script against the in-memory database
# - integration/: Tests against a running server
#
# Run tests with: poetry run pytest
# =============================================================================
