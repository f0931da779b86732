from typing import Optional

from pydantic import AliasChoices, EmailStr, Field

from .base import APIModel


class SignupIn(APIModel):
    name: str = Field(min_length=1, max_length=100)
    age: Optional[int] = Field(default=None, ge=0, le=150)
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)


class LoginIn(APIModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class UserOut(APIModel):
    id: int = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    name: str
    age: Optional[int] = None
    username: str
    email: str
    preferences: dict = Field(default_factory=dict)


class ProfileUpdate(APIModel):
    current_password: str = Field(min_length=1, max_length=128)
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    preferences: Optional[dict] = None


class PasswordUpdate(APIModel):
    current_password: str = Field(min_length=1, max_length=128)
    new_password: str = Field(min_length=8, max_length=128)
