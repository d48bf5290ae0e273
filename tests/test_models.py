from __future__ import annotations

import pytest
from pydantic import ValidationError

from user_registry.models import UserOut, UserPayload
from user_registry.user_store import UserRecord


def _body(**overrides):
    body = {"firstName": "John", "lastName": "Doe", "email": "john.doe@example.com", "age": 30}
    body.update(overrides)
    return body


def test_valid_payload_maps_to_record_without_id():
    p = UserPayload.model_validate(_body(id=9, phoneNumber="+15551234567"))
    rec = p.to_record()
    assert rec == UserRecord(
        id=None,
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        age=30,
        phone_number="+15551234567",
    )


def test_names_allow_spaces():
    p = UserPayload.model_validate(_body(firstName="Mary Ann", lastName="Van Dyke"))
    assert p.first_name == "Mary Ann"


@pytest.mark.parametrize(
    "field,value",
    [
        ("firstName", "J"),
        ("firstName", "A" * 51),
        ("firstName", "John3"),
        ("firstName", "   "),
        ("firstName", "Jo\u00a0hn"),
        ("lastName", "Do\u00e9"),
        ("lastName", "O'Brien"),
        ("lastName", ""),
        ("email", "not-an-email"),
        ("email", ""),
        ("age", -1),
        ("age", 151),
        ("phoneNumber", "+1-555-123-4567"),
        ("phoneNumber", "0123456"),
        ("phoneNumber", "+1"),
        ("phoneNumber", "+1\u0662\u0663\u0664"),
        ("phoneNumber", "+15551234567\n"),
    ],
)
def test_invalid_fields_are_rejected(field, value):
    with pytest.raises(ValidationError):
        UserPayload.model_validate(_body(**{field: value}))


@pytest.mark.parametrize("missing", ["firstName", "lastName", "email", "age"])
def test_required_fields(missing):
    body = _body()
    body.pop(missing)
    with pytest.raises(ValidationError):
        UserPayload.model_validate(body)


def test_age_bounds_are_inclusive():
    assert UserPayload.model_validate(_body(age=0)).age == 0
    assert UserPayload.model_validate(_body(age=150)).age == 150


def test_phone_number_is_optional():
    assert UserPayload.model_validate(_body()).phone_number is None
    assert UserPayload.model_validate(_body(phoneNumber=None)).phone_number is None
    assert UserPayload.model_validate(_body(phoneNumber="15551234567")).phone_number == "15551234567"


def test_user_out_serializes_camel_case():
    rec = UserRecord(id=3, first_name="Jane", last_name="Smith", email="jane@x.com", age=25)
    data = UserOut.from_record(rec).model_dump(by_alias=True)
    assert data == {
        "id": 3,
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane@x.com",
        "age": 25,
        "phoneNumber": None,
    }


def test_email_is_kept_exactly_as_submitted():
    p = UserPayload.model_validate(_body(email="John@X.COM"))
    assert p.email == "John@X.COM"
    assert p.to_record().email == "John@X.COM"


def test_names_accept_ascii_whitespace_only():
    p = UserPayload.model_validate(_body(firstName="Mary\tAnn"))
    assert p.first_name == "Mary\tAnn"
