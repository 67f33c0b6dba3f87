"""
User service for identity materialisation and profile management.
"""
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from careerchat.core.logging import get_logger
from careerchat.core.security import IdentityClaims

User = get_user_model()
logger = get_logger(__name__)

DEFAULT_DISPLAY_NAME = 'User'


def fallback_email(user_id: str) -> str:
    """Placeholder email for identities whose token carries none."""
    return f"{user_id}@{settings.IDENTITY_EMAIL_DOMAIN}"


def ensure_user(claims: IdentityClaims):
    """
    Idempotent upsert of the User row for a verified identity.

    Existing users are returned untouched; profile edits made through the
    API are not overwritten by token claims. If the claimed email already
    belongs to another user, the fallback email is used instead.

    Args:
        claims: Verified identity claims

    Returns:
        User object
    """
    user = User.objects.filter(id=claims.user_id).first()
    if user:
        return user

    email = claims.email or fallback_email(claims.user_id)
    if User.objects.filter(email__iexact=email).exists():
        email = fallback_email(claims.user_id)

    name = claims.name or DEFAULT_DISPLAY_NAME
    try:
        return _create_user(claims.user_id, email, name)
    except IntegrityError:
        pass

    # Lost a race: either the same identity was created concurrently, or
    # another identity took the claimed email first
    user = User.objects.filter(id=claims.user_id).first()
    if user:
        return user
    try:
        return _create_user(claims.user_id, fallback_email(claims.user_id), name)
    except IntegrityError:
        return User.objects.get(id=claims.user_id)


def _create_user(user_id: str, email: str, name: str):
    with transaction.atomic():
        user = User.objects.create_user(id=user_id, email=email, name=name)
    logger.info(f"Created user record for identity {user_id}")
    return user


def get_user_profile(user_id):
    """
    Get user profile with basic information.
    Returns: User object or None if not found
    """
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        return None


def update_user_profile(user_id, data):
    """
    Update user profile information.
    Returns: Updated user object or None if not found
    Raises: ValueError on invalid data
    """
    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        return None

    if 'name' in data:
        name = (data['name'] or '').strip()
        if not name:
            raise ValueError("Name cannot be empty")
        user.name = name[:255]
    if 'email' in data:
        email = (data['email'] or '').strip()
        if not email:
            raise ValueError("Email cannot be empty")
        # Check if email is already taken by another user
        if User.objects.filter(email__iexact=email).exclude(id=user_id).exists():
            raise ValueError("Email already in use")
        user.email = User.objects.normalize_email(email)

    user.save()
    return user


def serialize_user(user) -> dict:
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'createdAt': user.created_at.isoformat(),
    }
