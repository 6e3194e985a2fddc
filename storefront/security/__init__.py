# Request authentication

from .auth import (
    IdentityMiddleware,
    AuthDependency,
    get_token_verifier,
    get_token_signer,
    require_user,
    require_admin,
)

__all__ = [
    "IdentityMiddleware",
    "AuthDependency",
    "get_token_verifier",
    "get_token_signer",
    "require_user",
    "require_admin",
]
