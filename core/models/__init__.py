# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - person.py: Person create/update inputs, stored row and client view
#
# These models define the "contract" between API and clients.
# =============================================================================

from .person import (
    DeleteResponse,
    NewPerson,
    PERSON_ID_MAX,
    PERSON_ID_MIN,
    PersonRow,
    PersonView,
    UpdatePerson,
    parse_storage_timestamp,
)

__all__ = [
    "DeleteResponse",
    "NewPerson",
    "PERSON_ID_MAX",
    "PERSON_ID_MIN",
    "PersonRow",
    "PersonView",
    "UpdatePerson",
    "parse_storage_timestamp",
]
