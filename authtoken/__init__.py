# Signed identity tokens (EdDSA JWT)

from .signer import TokenSigner
from .verifier import TokenVerifier
from .models import AuthError, Identity, Role, TokenClaims, VerificationResult

__all__ = [
    "TokenSigner",
    "TokenVerifier",
    "AuthError",
    "Identity",
    "Role",
    "TokenClaims",
    "VerificationResult",
]
