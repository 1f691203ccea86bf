"""Auth API schemas."""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from app.application.dtos.user import UserResult

USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class RegisterRequest(BaseModel):
    """Request body for POST /auth (registration)."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    password_confirmation: str = Field(..., min_length=1, max_length=128)
    display_name: str | None = Field(default=None, max_length=100)
    username: str | None = Field(default=None, max_length=50)

    @field_validator("username")
    @classmethod
    def _username_chars(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not USERNAME_RE.match(v):
            raise ValueError("username may only contain letters, digits, '_', '.', '-'")
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.password_confirmation:
            raise ValueError("password and password_confirmation must match")
        return self


class SignInRequest(BaseModel):
    """Request body for POST /auth/sign_in."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserSummary(BaseModel):
    id: int
    email: str


class UserProfile(UserSummary):
    display_name: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    role: str

    @classmethod
    def from_result(cls, user: UserResult) -> "UserProfile":
        return cls(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            username=user.username,
            avatar_url=user.avatar_url,
            role=user.role.value,
        )


class RegisterResponse(BaseModel):
    user: UserSummary


class SignInResponse(BaseModel):
    """Sign-in result. The token is also sent in the Authorization header."""

    user: UserProfile
    access_token: str
    token_type: str = "bearer"


class MeResponse(BaseModel):
    user: UserProfile
