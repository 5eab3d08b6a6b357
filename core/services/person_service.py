# =============================================================================
# core/services/person_service.py - Person Business Logic
# =============================================================================
# Handles person CRUD operations and business logic.
# Separates HTTP concerns from database/business logic.
#
# Every operation checks out its own connection from the engine pool for the
# duration of the call. The connection is released and the transaction
# rolled back on any exit path that isn't a normal return, including task
# cancellation.
# =============================================================================

import logging

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.exceptions import PersonNotFoundError, PersonStorageError
from core.models.person import NewPerson, PersonView, UpdatePerson
from core.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)

# Failures raised by the driver or while mapping a stored row
STORAGE_ERRORS = (SQLAlchemyError, ValidationError)


class PersonService:
    """
    Service for person management operations.

    Provides a clean interface between API routes and database.
    Input is expected to be validated by the caller; the service only
    decides between "not found" and generic storage failure.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create(self, new_person: NewPerson) -> PersonView:
        """
        Insert a new person.

        Args:
            new_person: Validated first name, last name and email

        Returns:
            The stored person, with id and created_at assigned by storage

        Raises:
            PersonStorageError: If the insert fails
        """
        try:
            async with self.engine.begin() as conn:
                row = await PersonRepository(conn).insert_person(
                    fname=new_person.first_name,
                    lname=new_person.last_name,
                    email=new_person.email,
                )
        except STORAGE_ERRORS as e:
            raise PersonStorageError("insert", e) from e

        logger.info(f"Created person: {row.id}")
        return row.to_view()

    async def read(self, person_id: int) -> PersonView:
        """
        Get a person by id.

        Raises:
            PersonNotFoundError: If no person has this id
            PersonStorageError: If the query fails
        """
        try:
            async with self.engine.connect() as conn:
                row = await PersonRepository(conn).read_person(person_id)
        except STORAGE_ERRORS as e:
            raise PersonStorageError("read", e) from e

        if row is None:
            raise PersonNotFoundError(person_id)

        return row.to_view()

    async def update(self, update_person: UpdatePerson) -> PersonView:
        """
        Overwrite the name and email of an existing person.

        Storage refreshes updated_at; created_at is left untouched.

        Raises:
            PersonNotFoundError: If no person has this id
            PersonStorageError: If the update fails
        """
        try:
            async with self.engine.begin() as conn:
                row = await PersonRepository(conn).update_person(
                    person_id=update_person.id,
                    fname=update_person.first_name,
                    lname=update_person.last_name,
                    email=update_person.email,
                )
        except STORAGE_ERRORS as e:
            raise PersonStorageError("update", e) from e

        if row is None:
            raise PersonNotFoundError(update_person.id)

        logger.info(f"Updated person: {row.id}")
        return row.to_view()

    async def delete(self, person_id: int) -> None:
        """
        Hard delete a person.

        Zero affected rows is not a storage error; it means the id doesn't
        exist and is reported as not found.

        Raises:
            PersonNotFoundError: If no person has this id
            PersonStorageError: If the delete fails
        """
        try:
            async with self.engine.begin() as conn:
                affected = await PersonRepository(conn).delete_person(person_id)
        except STORAGE_ERRORS as e:
            raise PersonStorageError("delete", e) from e

        if affected == 0:
            raise PersonNotFoundError(person_id)

        logger.info(f"Deleted person: {person_id}")
