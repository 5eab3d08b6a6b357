# =============================================================================
# core/repositories/ - Storage Gateways
# =============================================================================
# Parameterized SQL against the relational store, one module per table:
# - person_repository.py: persons table insert/read/update/delete
# =============================================================================

from .person_repository import PersonRepository

__all__ = [
    "PersonRepository",
]
