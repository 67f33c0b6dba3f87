"""
Configuration management.
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

# Load environment variables
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def _get_bool(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _get_list(name: str, default: str = '') -> list:
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


# Django settings
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-change-this-in-production')
DEBUG = _get_bool('DEBUG', 'True')
ALLOWED_HOSTS = _get_list('ALLOWED_HOSTS', 'localhost,127.0.0.1')

# Database configuration
DB_NAME = os.getenv('DB_NAME', 'career_chat_db')
DB_USER = os.getenv('DB_USER', 'postgres')
DB_PASSWORD = os.getenv('DB_PASSWORD', 'postgres')
DB_HOST = os.getenv('DB_HOST', 'db')
DB_PORT = os.getenv('DB_PORT', '5432')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Chat completion provider ("cohere" or "mock")
CHAT_PROVIDER = os.getenv('CHAT_PROVIDER', 'cohere').strip().lower()
SUPPORTED_CHAT_PROVIDERS = ('cohere', 'mock')

# Cohere configuration (no default key: must be supplied out of band)
COHERE_API_KEY = os.getenv('COHERE_API_KEY', '')
COHERE_MODEL = os.getenv('COHERE_MODEL', 'command-r-plus')

CHAT_TIMEOUT_SECONDS = float(os.getenv('CHAT_TIMEOUT_SECONDS', '30'))
CHAT_TEMPERATURE = float(os.getenv('CHAT_TEMPERATURE', '0.7'))
CHAT_MAX_TOKENS = int(os.getenv('CHAT_MAX_TOKENS', '1000'))
CHAT_HISTORY_LIMIT = int(os.getenv('CHAT_HISTORY_LIMIT', '20'))

# Session pagination
SESSIONS_PAGE_SIZE = int(os.getenv('SESSIONS_PAGE_SIZE', '7'))
SESSIONS_MAX_PAGE_SIZE = int(os.getenv('SESSIONS_MAX_PAGE_SIZE', '50'))

# Identity provider token verification
IDENTITY_ALGORITHM = os.getenv('IDENTITY_ALGORITHM', 'HS256')
IDENTITY_SIGNING_KEY = os.getenv('IDENTITY_SIGNING_KEY', '')
IDENTITY_VERIFYING_KEY = os.getenv('IDENTITY_VERIFYING_KEY', '')
IDENTITY_JWK_URL = os.getenv('IDENTITY_JWK_URL', '')
IDENTITY_ISSUER = os.getenv('IDENTITY_ISSUER', '')
IDENTITY_AUDIENCE = os.getenv('IDENTITY_AUDIENCE', '')
IDENTITY_USER_ID_CLAIM = os.getenv('IDENTITY_USER_ID_CLAIM', 'sub')
IDENTITY_EMAIL_DOMAIN = os.getenv('IDENTITY_EMAIL_DOMAIN', 'clerk.user')


def validate_settings(settings) -> None:
    """
    Validate settings that the app cannot start without.

    Called once from the app config when Django is ready.

    Raises:
        ImproperlyConfigured: if the chat provider or identity verification
            is not configured.
    """
    provider = getattr(settings, 'CHAT_PROVIDER', '')
    if provider not in SUPPORTED_CHAT_PROVIDERS:
        raise ImproperlyConfigured(
            f"CHAT_PROVIDER must be one of {', '.join(SUPPORTED_CHAT_PROVIDERS)}, got '{provider}'"
        )

    if provider == 'cohere' and not getattr(settings, 'COHERE_API_KEY', ''):
        raise ImproperlyConfigured("COHERE_API_KEY environment variable is required")

    jwt_settings = getattr(settings, 'SIMPLE_JWT', {})
    if not (
        jwt_settings.get('SIGNING_KEY')
        or jwt_settings.get('VERIFYING_KEY')
        or jwt_settings.get('JWK_URL')
    ):
        raise ImproperlyConfigured(
            "Identity token verification requires IDENTITY_SIGNING_KEY, "
            "IDENTITY_VERIFYING_KEY or IDENTITY_JWK_URL"
        )

    if settings.SESSIONS_PAGE_SIZE < 1 or settings.SESSIONS_PAGE_SIZE > settings.SESSIONS_MAX_PAGE_SIZE:
        raise ImproperlyConfigured("SESSIONS_PAGE_SIZE must be between 1 and SESSIONS_MAX_PAGE_SIZE")
