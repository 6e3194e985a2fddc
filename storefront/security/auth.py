"""
Bearer Token Authentication

The middleware verifies any ``Authorization: Bearer`` token and records the
outcome on the request. Routes that need a user depend on ``require_user`` /
``require_admin``, which turn that outcome into a resolved User or an error.
"""

import logging
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from authtoken import Role, TokenSigner, TokenVerifier, VerificationResult

from ..core.config import Settings
from ..database.users import user_db
from ..errors import ForbiddenError, UnauthorizedError
from ..models.user import User

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token part of an ``Authorization: Bearer <token>`` header"""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class IdentityMiddleware(BaseHTTPMiddleware):
    """
    Middleware that verifies identity tokens on requests.

    A request without a token proceeds as anonymous. A request with a token
    proceeds either way; the verification result is stored in request state
    and enforced by the route dependencies.
    """

    def __init__(self, app, verifier: TokenVerifier):
        super().__init__(app)
        self.verifier = verifier

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = extract_bearer_token(request.headers.get("Authorization"))

        if token:
            result = self.verifier.verify(token)
            if not result.is_valid:
                logger.warning(f"Token verification failed: {result.error_message}")
        else:
            result = VerificationResult(is_valid=False, error_message="Missing token")

        request.state.identity_result = result
        request.state.identity = result.identity

        response = await call_next(request)
        return response


class AuthDependency:
    """
    FastAPI dependency resolving the current user.

    Raises UnauthorizedError when the token is missing or invalid, or when it
    names a user that no longer exists.
    """

    def __init__(self, require_admin: bool = False):
        """
        Args:
            require_admin: If True, reject users whose role is not admin
        """
        self.require_admin = require_admin

    async def __call__(self, request: Request) -> User:
        identity = getattr(request.state, "identity", None)
        if identity is None:
            raise UnauthorizedError()

        user = user_db.get_user(identity.user_id)
        if user is None:
            logger.warning(f"Token for unknown user {identity.user_id}")
            raise UnauthorizedError()

        if self.require_admin and user.role != Role.ADMIN:
            raise ForbiddenError()

        request.state.user = user
        return user


def get_token_verifier(settings: Settings) -> TokenVerifier:
    """
    Create the token verifier from configuration.

    Without a configured public key every token is rejected.
    """
    public_key = settings.get_token_public_key()
    verifier = TokenVerifier(
        public_key_pem=public_key,
        max_clock_skew_seconds=settings.token_max_clock_skew,
    )

    if public_key:
        logger.info("Token verification key loaded")
    else:
        logger.warning("No token public key configured - all authenticated routes will return 401")

    return verifier


def get_token_signer(settings: Settings) -> Optional[TokenSigner]:
    """
    Create the token signer from configuration.

    Returns None without a configured private key; registration and login
    are then unavailable.
    """
    private_key = settings.get_token_private_key()
    if not private_key:
        logger.warning("No token private key configured - register and login will return 503")
        return None

    logger.info("Token signing key loaded")
    return TokenSigner(
        private_key_pem=private_key,
        token_ttl_seconds=settings.token_ttl_seconds,
    )


# Dependency instances
require_user = AuthDependency()
require_admin = AuthDependency(require_admin=True)
