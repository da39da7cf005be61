# invoicing/models/users.py

from datetime import datetime

from pydantic import EmailStr, Field

from invoicing.models.base import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    # normalized the same way as on registration
    email: EmailStr
    password: str = Field(..., min_length=1)


class User(CamelModel):
    id: str
    email: str
    name: str


class UserRecord(User):
    """Stored user, including the password hash. Never returned by the API."""

    password_hash: str
    created_at: datetime
    updated_at: datetime

    def public(self) -> User:
        return User(id=self.id, email=self.email, name=self.name)


class AuthResponse(CamelModel):
    token: str
    user: User


class MeResponse(CamelModel):
    user: User
