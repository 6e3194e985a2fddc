"""Identity token data models"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


class Role(str, Enum):
    """Role carried in the token claims"""
    USER = "user"
    ADMIN = "admin"


class TokenAlgorithm(str, Enum):
    """Supported signature algorithms"""
    EDDSA = "EdDSA"


class AuthError(Exception):
    """Raised when a token cannot be turned into an identity"""


@dataclass
class TokenClaims:
    """Claims signed into an identity token"""
    sub: str
    name: str
    email: str
    role: Role
    iat: int
    exp: int

    def to_dict(self) -> dict:
        return {
            "sub": self.sub,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "iat": self.iat,
            "exp": self.exp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TokenClaims":
        return cls(
            sub=str(data["sub"]),
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            role=Role(data.get("role", Role.USER.value)),
            iat=int(data["iat"]),
            exp=int(data["exp"]),
        )


@dataclass(frozen=True)
class Identity:
    """Who the caller is, as far as downstream handlers care"""
    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass
class VerificationResult:
    """Result of identity token verification"""
    is_valid: bool
    claims: Optional[TokenClaims] = None
    error_message: Optional[str] = None

    @property
    def identity(self) -> Optional[Identity]:
        if not self.is_valid or self.claims is None:
            return None
        return Identity(user_id=self.claims.sub, role=self.claims.role)
