# =============================================================================
# app/routers/persons.py - Person CRUD Endpoints
# =============================================================================
# Handlers only decode, validate, delegate to PersonService and encode.
# Errors are raised as PersonApiException subclasses and turned into
# responses by the handlers registered in app.main:
#   400 - bad body, missing field, bad id
#   404 - PersonNotFoundError from the service
#   500 - PersonStorageError from the service
# =============================================================================

from fastapi import APIRouter, Request, status

from app.dependencies import PersonServiceDep
from app.validation import (
    decode_json_body,
    parse_person_id,
    validate_new_person,
    validate_update_person,
)
from core.models.person import DeleteResponse, NewPerson, PersonView, UpdatePerson

router = APIRouter()

# Request bodies are read from the raw Request so decoding and validation
# errors come from app.validation; these document the schema in OpenAPI.
_NEW_PERSON_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": NewPerson.model_json_schema()}},
    }
}
_UPDATE_PERSON_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UpdatePerson.model_json_schema()}},
    }
}


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=PersonView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=_NEW_PERSON_BODY,
)
@router.post(
    "/",
    response_model=PersonView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_person(request: Request, service: PersonServiceDep):
    """
    Create a new person.

    Requires non-empty first_name, last_name and email.
    Returns the stored person with its assigned id.
    """
    payload = decode_json_body(await request.body())
    new_person = validate_new_person(payload)

    return await service.create(new_person)


@router.get(
    "/{person_id}",
    response_model=PersonView,
    response_model_exclude_none=True,
)
async def fetch_person(person_id: str, service: PersonServiceDep):
    """
    Get a person by id.

    The id must be a base-10 integer.
    """
    return await service.read(parse_person_id(person_id))


@router.put(
    "",
    response_model=PersonView,
    response_model_exclude_none=True,
    openapi_extra=_UPDATE_PERSON_BODY,
)
@router.put(
    "/",
    response_model=PersonView,
    response_model_exclude_none=True,
    include_in_schema=False,
)
async def update_person(request: Request, service: PersonServiceDep):
    """
    Update an existing person.

    Overwrites first_name, last_name and email of the person with the given id.
    """
    payload = decode_json_body(await request.body())
    update = validate_update_person(payload)

    return await service.update(update)


@router.delete("/{person_id}", response_model=DeleteResponse)
async def delete_person(person_id: str, service: PersonServiceDep):
    """
    Delete a person.

    This is a hard delete; a second delete of the same id returns 404.
    """
    parsed_id = parse_person_id(person_id)
    await service.delete(parsed_id)

    return DeleteResponse(id=parsed_id)
