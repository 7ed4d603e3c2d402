# =============================================================================
# tests/integration/ - Live Server Tests
# =============================================================================
# These tests call a deployed API over HTTP. They are skipped unless
# TEST_URL points at a running instance, e.g.:
#
#   TEST_URL=http://localhost:8000 poetry run pytest -m integration
# =============================================================================
