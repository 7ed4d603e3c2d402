# =============================================================================
# core/models/user.py - User & Auth Schemas
# =============================================================================
# These models define the API contract for accounts:
# - UserRole / OAuthProvider: Enumerations stored on users rows
# - UserRegister: Input for POST /auth/register
# - LoginRequest / TokenResponse: Credentials in, access token out
# - UserResponse / UserUpdate: Profile read and edit
#
# Operators are users with role OPERATOR plus a one-to-one operators row
# holding the organization metadata (OperatorProfile).
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator


MAX_PASSWORD_BYTES = 72


class UserRole(str, Enum):
    """
    Account roles.

    - USER: Citizen account, may file reports
    - CLIENT: Citizen account allowed to review collection points
    - OPERATOR: Organization managing collection points
    - ADMIN: Full access
    """
    USER = "USER"
    CLIENT = "CLIENT"
    OPERATOR = "OPERATOR"
    ADMIN = "ADMIN"


class OAuthProvider(str, Enum):
    """Where the account's credentials live. APP means a local password."""
    APP = "APP"
    GOOGLE = "GOOGLE"


class OperatorProfile(BaseModel):
    """Organization metadata attached to an OPERATOR account."""

    organization_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Public name of the managing organization"
    )
    vat_number: str | None = Field(default=None, max_length=32)
    telephone: str | None = Field(default=None, max_length=32)
    website: str | None = Field(default=None, max_length=255)


class UserRegister(BaseModel):
    """
    Schema for self-registration.

    ADMIN accounts cannot be created this way. OPERATOR accounts must
    include the `operator` block; other roles must not.

    Example:
        {
            "email": "mario.rossi@example.com",
            "password": "Password123!",
            "name": "Mario",
            "surname": "Rossi",
            "role": "CLIENT"
        }
    """

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    cellphone: str | None = Field(default=None, max_length=32)
    role: UserRole = Field(
        default=UserRole.USER,
        description="USER, CLIENT or OPERATOR"
    )
    operator: OperatorProfile | None = None

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        # bcrypt only accepts up to 72 bytes of input
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return value

    @model_validator(mode="after")
    def check_role(self) -> "UserRegister":
        if self.role == UserRole.ADMIN:
            raise ValueError("ADMIN accounts cannot self-register")
        if self.role == UserRole.OPERATOR and self.operator is None:
            raise ValueError("Operator accounts need an 'operator' block")
        if self.role != UserRole.OPERATOR and self.operator is not None:
            raise ValueError("Only OPERATOR accounts may include an 'operator' block")
        return self


class UserUpdate(BaseModel):
    """Editable profile fields. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    surname: str | None = Field(default=None, min_length=1, max_length=100)
    cellphone: str | None = Field(default=None, max_length=32)


class UserResponse(BaseModel):
    """
    Schema for returning a user to clients.

    Never includes the password hash.
    """

    id: int
    email: str
    name: str
    surname: str
    cellphone: str | None = None
    role: UserRole
    oauth_provider: OAuthProvider = OAuthProvider.APP
    created_at: datetime | None = None
    operator: OperatorProfile | None = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Returned by POST /auth/login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
