"""
Django settings for careerchat project.

Values come from careerchat.core.config, which reads the environment
(and a .env file when present).
"""

from careerchat.core import config

BASE_DIR = config.BASE_DIR

SECRET_KEY = config.SECRET_KEY
DEBUG = config.DEBUG
ALLOWED_HOSTS = config.ALLOWED_HOSTS

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "careerchat.apps.CareerChatConfig",
    "careerchat.account.apps.AccountConfig",
    "careerchat.db.apps.DbConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

ROOT_URLCONF = "careerchat.urls"
ASGI_APPLICATION = "careerchat.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.DB_NAME,
        "USER": config.DB_USER,
        "PASSWORD": config.DB_PASSWORD,
        "HOST": config.DB_HOST,
        "PORT": config.DB_PORT,
    }
}

AUTH_USER_MODEL = "account.User"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Identity provider tokens are verified, never issued, by this service
SIMPLE_JWT = {
    "ALGORITHM": config.IDENTITY_ALGORITHM,
    "SIGNING_KEY": config.IDENTITY_SIGNING_KEY,
    "VERIFYING_KEY": config.IDENTITY_VERIFYING_KEY,
    "JWK_URL": config.IDENTITY_JWK_URL or None,
    "ISSUER": config.IDENTITY_ISSUER or None,
    "AUDIENCE": config.IDENTITY_AUDIENCE or None,
    "USER_ID_CLAIM": config.IDENTITY_USER_ID_CLAIM,
    "JTI_CLAIM": None,
    "AUTH_HEADER_TYPES": ("Bearer",),
    "LEEWAY": 5,
}

LOG_LEVEL = config.LOG_LEVEL

CHAT_PROVIDER = config.CHAT_PROVIDER
COHERE_API_KEY = config.COHERE_API_KEY
COHERE_MODEL = config.COHERE_MODEL
CHAT_TIMEOUT_SECONDS = config.CHAT_TIMEOUT_SECONDS
CHAT_TEMPERATURE = config.CHAT_TEMPERATURE
CHAT_MAX_TOKENS = config.CHAT_MAX_TOKENS
CHAT_HISTORY_LIMIT = config.CHAT_HISTORY_LIMIT

SESSIONS_PAGE_SIZE = config.SESSIONS_PAGE_SIZE
SESSIONS_MAX_PAGE_SIZE = config.SESSIONS_MAX_PAGE_SIZE

IDENTITY_EMAIL_DOMAIN = config.IDENTITY_EMAIL_DOMAIN
