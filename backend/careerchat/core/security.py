"""
Security utilities (identity token verification, secret masking).

Tokens are issued and signed by the external identity provider; this module
only verifies them. Verification is delegated to djangorestframework-simplejwt,
configured through SIMPLE_JWT in settings.
"""
from dataclasses import dataclass
from typing import Optional
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import UntypedToken
from careerchat.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IdentityClaims:
    """Claims of a verified identity token."""
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None


def _display_name(payload: dict) -> Optional[str]:
    name = payload.get('name')
    if name:
        return str(name)
    parts = [payload.get('given_name') or payload.get('first_name'),
             payload.get('family_name') or payload.get('last_name')]
    joined = " ".join(str(p) for p in parts if p).strip()
    return joined or None


def verify_identity_token(raw_token) -> Optional[IdentityClaims]:
    """
    Verify an identity provider token and extract the caller's claims.

    Args:
        raw_token: Encoded token (str or bytes)

    Returns:
        IdentityClaims, or None if the token is invalid, expired, or has
        no subject claim
    """
    if not raw_token:
        return None
    if isinstance(raw_token, bytes):
        raw_token = raw_token.decode('utf-8', errors='replace')

    try:
        token = UntypedToken(raw_token)
    except TokenError as e:
        logger.debug(f"Rejected identity token: {e}")
        return None

    user_id = token.payload.get(api_settings.USER_ID_CLAIM)
    if not user_id:
        logger.debug("Rejected identity token: missing subject claim")
        return None

    email = token.payload.get('email') or token.payload.get('email_address')
    return IdentityClaims(
        user_id=str(user_id),
        name=_display_name(token.payload),
        email=str(email) if email else None,
    )


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """
    Mask a secret for logging, keeping only the last few characters.
    """
    if not value:
        return "<unset>"
    if len(value) <= visible * 2:
        return "*" * len(value)
    return "*" * 8 + value[-visible:]
