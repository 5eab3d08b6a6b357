# =============================================================================
# tests/test_validation.py - Request Decoding/Validation Tests
# =============================================================================
# Covers each step of app.validation on its own:
# - decode_json_body: bytes -> dict
# - validate_new_person / validate_update_person: dict -> model
# - parse_person_id: path parameter -> int
# =============================================================================

import pytest

from app.exceptions import (
    InvalidPersonIdError,
    InvalidRequestBodyError,
    PersonValidationError,
)
from app.validation import (
    decode_json_body,
    parse_person_id,
    validate_new_person,
    validate_update_person,
)


# =============================================================================
# Body Decoding
# =============================================================================

class TestDecodeJsonBody:
    """Tests for decode_json_body."""

    def test_decodes_object(self):
        assert decode_json_body(b'{"first_name": "unit"}') == {"first_name": "unit"}

    @pytest.mark.parametrize("raw", [b"", b"   ", b"\n"])
    def test_empty_body_rejected(self, raw):
        with pytest.raises(InvalidRequestBodyError) as exc_info:
            decode_json_body(raw)
        assert exc_info.value.status_code == 400

    def test_malformed_json_rejected(self):
        with pytest.raises(InvalidRequestBodyError):
            decode_json_body(b'{"first_name": ')

    def test_non_utf8_rejected(self):
        with pytest.raises(InvalidRequestBodyError):
            decode_json_body(b"\xff\xfe\xfa")

    def test_deeply_nested_rejected(self):
        """Test that nesting past the recursion limit is a bad body, not a crash."""
        raw = b"[" * 100000 + b"]" * 100000

        with pytest.raises(InvalidRequestBodyError) as exc_info:
            decode_json_body(raw)
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("raw", [b"[]", b'"person"', b"42", b"null"])
    def test_non_object_rejected(self, raw):
        with pytest.raises(InvalidRequestBodyError) as exc_info:
            decode_json_body(raw)
        assert exc_info.value.code == "INVALID_REQUEST_BODY"


# =============================================================================
# Field Validation
# =============================================================================

class TestValidateNewPerson:
    """Tests for validate_new_person."""

    def test_valid_payload(self, new_person_payload):
        person = validate_new_person(new_person_payload)
        assert person.first_name == "unit"

    def test_empty_first_name_reports_field(self, new_person_payload):
        """Test that errors name the offending field."""
        new_person_payload["first_name"] = ""

        with pytest.raises(PersonValidationError) as exc_info:
            validate_new_person(new_person_payload)

        error = exc_info.value
        assert error.status_code == 400
        assert [e["field"] for e in error.errors] == ["first_name"]
        assert "first_name" in error.suggestion

    def test_reports_every_missing_field(self):
        with pytest.raises(PersonValidationError) as exc_info:
            validate_new_person({})

        fields = {e["field"] for e in exc_info.value.errors}
        assert fields == {"first_name", "last_name", "email"}

    def test_wrong_type_rejected(self, new_person_payload):
        new_person_payload["email"] = 12345
        with pytest.raises(PersonValidationError):
            validate_new_person(new_person_payload)


class TestValidateUpdatePerson:
    """Tests for validate_update_person."""

    def test_valid_payload(self, new_person_payload):
        update = validate_update_person({"id": 3, **new_person_payload})
        assert update.id == 3
        assert update.email == "testing@mailbox.com"

    def test_missing_id_rejected(self, new_person_payload):
        with pytest.raises(PersonValidationError) as exc_info:
            validate_update_person(new_person_payload)
        assert [e["field"] for e in exc_info.value.errors] == ["id"]

    def test_empty_last_name_rejected(self, new_person_payload):
        new_person_payload["last_name"] = ""
        with pytest.raises(PersonValidationError):
            validate_update_person({"id": 3, **new_person_payload})

    @pytest.mark.parametrize("bad_id", [True, False, "1", 1.0, None])
    def test_id_must_be_json_integer(self, new_person_payload, bad_id):
        """Test that bools, strings and floats aren't coerced into an id."""
        with pytest.raises(PersonValidationError) as exc_info:
            validate_update_person({"id": bad_id, **new_person_payload})
        assert [e["field"] for e in exc_info.value.errors] == ["id"]


# =============================================================================
# Path Parameter Parsing
# =============================================================================

class TestParsePersonId:
    """Tests for parse_person_id."""

    @pytest.mark.parametrize("raw,expected", [
        ("1", 1),
        ("42", 42),
        ("007", 7),
        ("-3", -3),
        ("+5", 5),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
    ])
    def test_valid_ids(self, raw, expected):
        assert parse_person_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        "xyz",
        "xyx",
        "",
        "1.5",
        " 1",
        "1_000",
        "0x10",
        "١٢",  # arabic-indic digits
        "9223372036854775808",
    ])
    def test_invalid_ids(self, raw):
        with pytest.raises(InvalidPersonIdError) as exc_info:
            parse_person_id(raw)
        assert exc_info.value.status_code == 400
