"""
Dependency injection utilities.

Every request gets its own RequestContext carrying the caller identity; views
pass it explicitly into the service layer.
"""
from dataclasses import dataclass
from typing import Optional
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from careerchat.core.errors import UnauthorizedError
from careerchat.core.logging import get_logger
from careerchat.core.security import IdentityClaims, verify_identity_token

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped caller context."""
    user_id: Optional[str] = None
    claims: Optional[IdentityClaims] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = RequestContext()


def get_request_context(request) -> RequestContext:
    """
    Resolve the caller identity for a request.

    Reads the bearer token from the Authorization header, verifies it, and
    makes sure a User row exists for the identity (idempotent upsert).
    Missing or invalid tokens resolve to an anonymous context.
    """
    from careerchat.account.services.user_service import ensure_user

    jwt_auth = JWTAuthentication()
    try:
        header = jwt_auth.get_header(request)
        raw_token = jwt_auth.get_raw_token(header) if header else None
    except (AuthenticationFailed, AttributeError, TypeError):
        raw_token = None

    claims = verify_identity_token(raw_token)
    if claims is None:
        return ANONYMOUS

    user = ensure_user(claims)
    return RequestContext(user_id=user.id, claims=claims)


def require_auth(ctx: RequestContext) -> str:
    """
    Check that the context carries an identity.

    Returns:
        The caller's user ID

    Raises:
        UnauthorizedError: if the caller is anonymous
    """
    if not ctx.is_authenticated:
        raise UnauthorizedError()
    return ctx.user_id
