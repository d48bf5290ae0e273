from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, field_validator

from user_registry.user_store import UserRecord

NAME_PATTERN = r"^[a-zA-Z \t\n\x0b\f\r]+$"
PHONE_PATTERN = r"^\+?[1-9][0-9]{1,14}$"


def _check_email(v: str) -> str:
    # Syntax check only; the address is stored exactly as submitted.
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return v


Email = Annotated[str, AfterValidator(_check_email)]
PhoneNumber = Annotated[str, StringConstraints(pattern=PHONE_PATTERN)]


class UserPayload(BaseModel):
    """Request body for POST/PUT /api/users.

    Any ``id`` sent by the client is accepted but never used: the registry
    assigns ids on create and the path id wins on update.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = Field(default=None, description="Ignored on write; assigned by the server")
    first_name: str = Field(
        ...,
        alias="firstName",
        min_length=2,
        max_length=50,
        pattern=NAME_PATTERN,
        description="User's first name",
        examples=["John"],
    )
    last_name: str = Field(
        ...,
        alias="lastName",
        min_length=2,
        max_length=50,
        pattern=NAME_PATTERN,
        description="User's last name",
        examples=["Doe"],
    )
    email: Email = Field(
        ...,
        description="User's email address",
        examples=["john.doe@example.com"],
        json_schema_extra={"format": "email"},
    )
    age: int = Field(..., ge=0, le=150, description="User's age", examples=[30])
    phone_number: Optional[PhoneNumber] = Field(
        default=None,
        alias="phoneNumber",
        description="International phone number",
        examples=["+15551234567"],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=None,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            age=self.age,
            phone_number=self.phone_number,
        )


class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    age: int
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserOut":
        return cls.model_validate(asdict(record))


class UserCount(BaseModel):
    count: int


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: list[FieldError] = Field(default_factory=list)
