# =============================================================================
# app/validation.py - Request Decoding and Validation
# =============================================================================
# Turns raw request input into validated models, in separate steps so each
# can be tested on its own:
#
#   decode_json_body(raw)        bytes -> dict          (InvalidRequestBodyError)
#   validate_new_person(data)    dict  -> NewPerson     (PersonValidationError)
#   validate_update_person(data) dict  -> UpdatePerson  (PersonValidationError)
#   parse_person_id(raw)         str   -> int           (InvalidPersonIdError)
#
# All of these fail before any storage call is made.
# =============================================================================

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions import (
    InvalidPersonIdError,
    InvalidRequestBodyError,
    PersonValidationError,
)
from core.models.person import PERSON_ID_MAX, PERSON_ID_MIN, NewPerson, UpdatePerson

ModelT = TypeVar("ModelT", bound=BaseModel)

# Optional sign followed by ASCII digits only (no spaces, underscores or
# other unicode digits, all of which int() would accept)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def decode_json_body(raw: bytes) -> dict[str, Any]:
    """
    Decode a request body into a JSON object.

    Raises:
        InvalidRequestBodyError: If the body is empty, not UTF-8 JSON,
            or not a JSON object
    """
    if not raw or not raw.strip():
        raise InvalidRequestBodyError("body is empty")

    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidRequestBodyError(f"malformed JSON ({e})") from e
    except RecursionError as e:
        raise InvalidRequestBodyError("JSON nested too deeply") from e

    if not isinstance(payload, dict):
        raise InvalidRequestBodyError("expected a JSON object")

    return payload


def _field_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into {field, message} pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _validate(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise PersonValidationError(_field_errors(e)) from e


def validate_new_person(payload: dict[str, Any]) -> NewPerson:
    """
    Check a decoded body has non-empty first_name, last_name and email.

    Raises:
        PersonValidationError: Listing every missing or empty field
    """
    return _validate(NewPerson, payload)


def validate_update_person(payload: dict[str, Any]) -> UpdatePerson:
    """
    Check a decoded body has an integer id and non-empty person fields.

    Raises:
        PersonValidationError: Listing every missing or invalid field
    """
    return _validate(UpdatePerson, payload)


def parse_person_id(raw: str) -> int:
    """
    Parse an {id} path parameter as a base-10 signed 64-bit integer.

    Example:
        parse_person_id("42")   # 42
        parse_person_id("xyz")  # raises InvalidPersonIdError

    Raises:
        InvalidPersonIdError: If the value isn't an integer or overflows 64 bits
    """
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise InvalidPersonIdError(raw)

    value = int(raw, 10)
    if not PERSON_ID_MIN <= value <= PERSON_ID_MAX:
        raise InvalidPersonIdError(raw)

    return value
