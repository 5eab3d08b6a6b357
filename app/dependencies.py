# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The ServiceBundle is built by the application lifespan and stored on
# app.state, so handlers never reach for module-level globals.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services import PersonService, ServiceBundle


def get_bundle(request: Request) -> ServiceBundle:
    """
    Get the service bundle built at startup.

    Raises:
        RuntimeError: If called before the application lifespan has started
    """
    bundle = getattr(request.app.state, "bundle", None)
    if bundle is None:
        raise RuntimeError("Service bundle is not initialized; is the app lifespan running?")
    return bundle


def get_optional_bundle(request: Request) -> ServiceBundle | None:
    """Get the service bundle, or None before startup / after shutdown."""
    return getattr(request.app.state, "bundle", None)


def get_person_service(bundle: ServiceBundle = Depends(get_bundle)) -> PersonService:
    """Get the person service from the bundle."""
    return bundle.person_service


# Type alias for dependency injection
PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]
OptionalBundleDep = Annotated[ServiceBundle | None, Depends(get_optional_bundle)]
