# =============================================================================
# core/services/bundle.py - Service Bundle
# =============================================================================
# Groups the application services so they can be built once at startup and
# handed to the HTTP layer as a single object.
# =============================================================================

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from .person_service import PersonService


@dataclass(frozen=True)
class ServiceBundle:
    """Application services sharing one database engine."""

    person_service: PersonService

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "ServiceBundle":
        """Build every service on top of the shared engine."""
        return cls(person_service=PersonService(engine))
