# =============================================================================
# core/models/person.py - Person Schemas
# =============================================================================
# These models define the API contract for person operations:
# - NewPerson: Input for creating a person
# - UpdatePerson: Input for overwriting an existing person
# - PersonView: Output when returning a person to clients
# - PersonRow: A row as stored in the persons table
#
# Storage names the columns fname/lname; the API exposes first_name/last_name.
# =============================================================================

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


# Signed 64-bit bounds, matching SQLite's INTEGER PRIMARY KEY range
PERSON_ID_MIN = -(2 ** 63)
PERSON_ID_MAX = 2 ** 63 - 1


class NewPerson(BaseModel):
    """
    Schema for creating a new person.

    All three fields are required and must be non-empty.

    Example:
        {
            "first_name": "unit",
            "last_name": "test",
            "email": "testing@mailbox.com"
        }
    """

    first_name: str = Field(..., min_length=1, description="Given name")
    last_name: str = Field(..., min_length=1, description="Family name")
    email: str = Field(..., min_length=1, description="Contact email address")

    model_config = {
        "json_schema_extra": {
            "example": {
                "first_name": "unit",
                "last_name": "test",
                "email": "testing@mailbox.com",
            }
        }
    }


class UpdatePerson(NewPerson):
    """
    Schema for updating an existing person.

    Overwrites all three fields of the row matching `id`.
    """

    # Strict: only a JSON integer is accepted, never a coerced bool/str/float
    id: int = Field(
        ...,
        strict=True,
        ge=PERSON_ID_MIN,
        le=PERSON_ID_MAX,
        description="Id of the person to update"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "first_name": "unit",
                "last_name": "test",
                "email": "testing@mailbox.com",
            }
        }
    }


class PersonView(BaseModel):
    """
    Schema for returning a person to clients.

    Returned by:
    - POST /api/v1/person
    - GET /api/v1/person/{id}
    - PUT /api/v1/person

    `updated_at` is left out of the JSON until the person is first updated.

    Example:
        {
            "id": 1,
            "first_name": "unit",
            "last_name": "test",
            "email": "testing@mailbox.com",
            "created_at": "2024-01-15T10:30:00.123000Z"
        }
    """

    id: int
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime | None = None


class DeleteResponse(BaseModel):
    """Response when a person is deleted."""

    id: int
    status: str = "SUCCESS"
    message: str = Field(default="Person deleted successfully")


def parse_storage_timestamp(value: datetime | str | None) -> datetime | None:
    """
    Parse a timestamp read back from storage into an aware UTC datetime.

    SQLite hands timestamps back as text ("2024-01-15T10:30:00.123Z" or
    "2024-01-15 10:30:00"); naive values are taken to be UTC.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class PersonRow(BaseModel):
    """A row of the persons table, using storage column names."""

    id: int
    fname: str
    lname: str
    email: str
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        return parse_storage_timestamp(value)

    def to_view(self) -> PersonView:
        """Map the stored row into the client-facing projection."""
        return PersonView(
            id=self.id,
            first_name=self.fname,
            last_name=self.lname,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
