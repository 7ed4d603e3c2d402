# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the EcoPoint web API:
# - main.py: App entry point, middleware, error handlers, router mounting
# - config.py: Settings loaded from the environment / .env
# - auth/: Login, access tokens and role guards
# - routers/: One module per resource under /api
# - exceptions.py: Error types mapped to HTTP responses
#
# Route handlers stay thin: they check who is calling, parse ids and hand
# off to the services in core/.
# =============================================================================
