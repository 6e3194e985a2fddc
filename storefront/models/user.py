"""User models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from authtoken.models import Role

from .common import APIModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class User(APIModel):
    """Registered user; never carries credentials"""
    id: str
    name: str
    email: str
    role: Role = Role.USER
    avatar: str = ""
    created_at: datetime


class RegisterRequest(APIModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)
    password: str = Field(..., min_length=6, max_length=72)
    avatar: str = ""


class LoginRequest(APIModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(APIModel):
    user: User
    message: Optional[str] = None


class AuthResponse(APIModel):
    """User record plus a freshly issued bearer token"""
    user: User
    token: str
    message: str
