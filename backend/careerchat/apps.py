"""
Django app configuration.
"""

from django.apps import AppConfig
from django.conf import settings


class CareerChatConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "careerchat"
    verbose_name = "Career Chat"

    def ready(self):
        """Initialize logging and validate required settings at startup."""
        from careerchat.core.config import validate_settings
        from careerchat.core.logging import get_logger, setup_logging
        from careerchat.core.security import mask_secret

        setup_logging(settings.LOG_LEVEL)
        validate_settings(settings)

        get_logger(__name__).info(
            f"Career Chat ready: provider={settings.CHAT_PROVIDER}, "
            f"cohere_key={mask_secret(settings.COHERE_API_KEY)}"
        )
