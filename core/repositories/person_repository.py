# =============================================================================
# core/repositories/person_repository.py - Persons Table Queries
# =============================================================================
# The four parameterized statements issued against the persons table.
# Every method runs on a connection the caller already holds, so the caller
# decides the transaction scope and releases the connection.
#
# "No rows" is reported as None (read/update) or a zero row count (delete);
# the service layer decides what that means.
# =============================================================================

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from core.models.person import PersonRow

_PERSON_COLUMNS = "id, fname, lname, email, created_at, updated_at"

INSERT_PERSON = text(
    "INSERT INTO persons (fname, lname, email) "
    "VALUES (:fname, :lname, :email) "
    f"RETURNING {_PERSON_COLUMNS}"
)

READ_PERSON = text(
    f"SELECT {_PERSON_COLUMNS} FROM persons WHERE id = :id"
)

UPDATE_PERSON = text(
    "UPDATE persons "
    "SET fname = :fname, lname = :lname, email = :email, "
    "updated_at = strftime('%Y-%m-%dT%H:%M:%fZ', 'now') "
    "WHERE id = :id "
    f"RETURNING {_PERSON_COLUMNS}"
)

DELETE_PERSON = text(
    "DELETE FROM persons WHERE id = :id"
)


class PersonRepository:
    """Storage gateway for the persons table."""

    def __init__(self, conn: AsyncConnection):
        self.conn = conn

    async def insert_person(self, fname: str, lname: str, email: str) -> PersonRow:
        result = await self.conn.execute(
            INSERT_PERSON, {"fname": fname, "lname": lname, "email": email}
        )
        return PersonRow.model_validate(dict(result.mappings().one()))

    async def read_person(self, person_id: int) -> PersonRow | None:
        result = await self.conn.execute(READ_PERSON, {"id": person_id})
        row = result.mappings().first()
        return PersonRow.model_validate(dict(row)) if row is not None else None

    async def update_person(
        self,
        person_id: int,
        fname: str,
        lname: str,
        email: str,
    ) -> PersonRow | None:
        result = await self.conn.execute(
            UPDATE_PERSON,
            {"id": person_id, "fname": fname, "lname": lname, "email": email},
        )
        row = result.mappings().first()
        return PersonRow.model_validate(dict(row)) if row is not None else None

    async def delete_person(self, person_id: int) -> int:
        """Delete the row and return the number of rows affected."""
        result = await self.conn.execute(DELETE_PERSON, {"id": person_id})
        return result.rowcount
