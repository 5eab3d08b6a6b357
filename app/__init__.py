# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, lifespan, error handlers, console entry point
# - config.py: Environment variable loading and settings
# - validation.py: Request body / path parameter decoding and validation
# - exceptions.py: Error hierarchy and exception handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
