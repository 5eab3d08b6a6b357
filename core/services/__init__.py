# =============================================================================
# core/services/ - Business Logic Services
# =============================================================================
# This package contains service classes that encapsulate business logic:
# - person_service.py: Person CRUD operations
# - bundle.py: ServiceBundle grouping the services built at startup
#
# Services keep HTTP handlers thin and testable against a real database.
# =============================================================================

from .person_service import PersonService
from .bundle import ServiceBundle

__all__ = [
    "PersonService",
    "ServiceBundle",
]
