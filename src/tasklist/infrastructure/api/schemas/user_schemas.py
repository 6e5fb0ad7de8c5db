"""Pydantic schemas for user and session endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from tasklist.infrastructure.persistence.models import UserModel


class CredentialsRequest(BaseModel):
    """Request body for signup and login."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v


class UserResponse(BaseModel):
    """Public view of a user. Password and sessions are never included."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    email: str = Field(..., description="User's email address")

    @classmethod
    def from_model(cls, user: UserModel) -> "UserResponse":
        return cls(id=user.id, email=user.email)


class AccessTokenResponse(BaseModel):
    """Response for a freshly minted access token."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken", description="Signed access token")
