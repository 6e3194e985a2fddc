"""
Identity Token Signer

Issues EdDSA-signed JWTs carrying the user's id, name, email and role.
"""

import time
from typing import Optional

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.backends import default_backend

from .models import Role, TokenAlgorithm, TokenClaims

DEFAULT_TOKEN_TTL_SECONDS = 30 * 24 * 60 * 60


class TokenSigner:
    """
    Issues signed identity tokens.

    Usage:
        signer = TokenSigner(private_key_pem="...")
        token = signer.issue(
            user_id="user-001",
            name="jane doe",
            email="jane@example.com",
            role=Role.USER,
        )

        headers = {"Authorization": f"Bearer {token}"}
    """

    def __init__(
        self,
        private_key_pem: str,
        token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
    ):
        """
        Initialize the token signer.

        Args:
            private_key_pem: PEM-encoded Ed25519 private key
            token_ttl_seconds: How long issued tokens remain valid
        """
        self.ttl_seconds = token_ttl_seconds
        self._private_key = self._load_private_key(private_key_pem)

    def _load_private_key(self, pem: str) -> Ed25519PrivateKey:
        """Load private key from PEM string"""
        pem_bytes = pem.encode() if isinstance(pem, str) else pem

        try:
            key = serialization.load_pem_private_key(
                pem_bytes, password=None, backend=default_backend()
            )
        except Exception as e:
            raise ValueError(f"Failed to load private key: {e}")

        if not isinstance(key, Ed25519PrivateKey):
            raise ValueError("Identity tokens require an Ed25519 private key")
        return key

    def issue(
        self,
        user_id: str,
        name: str,
        email: str,
        role: Role = Role.USER,
        issued_at: Optional[int] = None,
    ) -> str:
        """
        Issue a token for a user.

        Args:
            user_id: Subject of the token
            name: Display name
            email: User email
            role: User role
            issued_at: Override for the issue timestamp (seconds since epoch)

        Returns:
            The encoded JWT
        """
        iat = int(time.time()) if issued_at is None else issued_at
        claims = TokenClaims(
            sub=user_id,
            name=name,
            email=email,
            role=Role(role),
            iat=iat,
            exp=iat + self.ttl_seconds,
        )
        return self.sign_claims(claims)

    def sign_claims(self, claims: TokenClaims) -> str:
        """Sign an already-built claim set"""
        return jwt.encode(
            claims.to_dict(),
            self._private_key,
            algorithm=TokenAlgorithm.EDDSA.value,
        )
