"""
Account services.
"""
from .user_service import (
    ensure_user,
    get_user_profile,
    update_user_profile,
    serialize_user,
)

__all__ = [
    'ensure_user',
    'get_user_profile',
    'update_user_profile',
    'serialize_user',
]
