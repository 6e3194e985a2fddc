"""
Identity Token Verifier

Verifies tokens issued by TokenSigner. Verification is a pure function of the
token and the configured public key; nothing is remembered between calls.
"""

import time
from typing import Optional

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.backends import default_backend

from .models import AuthError, Identity, TokenAlgorithm, TokenClaims, VerificationResult


class TokenVerifier:
    """
    Verifies signed identity tokens.

    Usage:
        verifier = TokenVerifier(public_key_pem="...")

        result = verifier.verify(token)
        if result.is_valid:
            print(f"Request from user: {result.claims.sub}")
    """

    def __init__(
        self,
        public_key_pem: Optional[str] = None,
        max_clock_skew_seconds: int = 60,
    ):
        """
        Initialize the token verifier.

        Args:
            public_key_pem: PEM-encoded Ed25519 public key. Without a key every
                token is rejected.
            max_clock_skew_seconds: How far in the future ``iat`` may lie
        """
        self.max_clock_skew = max_clock_skew_seconds
        self._public_key = self._load_public_key(public_key_pem) if public_key_pem else None

    @property
    def is_configured(self) -> bool:
        return self._public_key is not None

    def _load_public_key(self, pem: str) -> Ed25519PublicKey:
        """Load public key from PEM string"""
        pem_bytes = pem.encode() if isinstance(pem, str) else pem

        try:
            key = serialization.load_pem_public_key(pem_bytes, backend=default_backend())
        except Exception as e:
            raise ValueError(f"Failed to load public key: {e}")

        if not isinstance(key, Ed25519PublicKey):
            raise ValueError("Identity tokens require an Ed25519 public key")
        return key

    def verify(self, token: Optional[str]) -> VerificationResult:
        """
        Verify a token.

        Args:
            token: Encoded JWT

        Returns:
            VerificationResult indicating success/failure
        """
        if not token:
            return VerificationResult(is_valid=False, error_message="Missing token")

        if self._public_key is None:
            return VerificationResult(
                is_valid=False,
                error_message="Token verification is not configured",
            )

        try:
            payload = jwt.decode(
                token,
                self._public_key,
                algorithms=[TokenAlgorithm.EDDSA.value],
                options={"require": ["sub", "iat", "exp"], "verify_iat": False},
            )
        except jwt.ExpiredSignatureError:
            return VerificationResult(is_valid=False, error_message="Token has expired")
        except jwt.InvalidSignatureError:
            return VerificationResult(is_valid=False, error_message="Invalid signature")
        except jwt.InvalidTokenError as e:
            return VerificationResult(is_valid=False, error_message=f"Invalid token: {e}")

        try:
            claims = TokenClaims.from_dict(payload)
        except (KeyError, TypeError, ValueError) as e:
            return VerificationResult(
                is_valid=False,
                error_message=f"Invalid token claims: {e}",
            )

        if claims.iat > int(time.time()) + self.max_clock_skew:
            return VerificationResult(
                is_valid=False,
                claims=claims,
                error_message="Token issued in the future",
            )

        return VerificationResult(is_valid=True, claims=claims)

    def verify_identity(self, token: Optional[str]) -> Identity:
        """Verify a token and return the identity it carries, or raise AuthError"""
        result = self.verify(token)
        if not result.is_valid:
            raise AuthError(result.error_message or "Unauthorized")
        return result.identity
