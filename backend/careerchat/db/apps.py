"""
Database models app configuration.
"""
from django.apps import AppConfig


class DbConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'careerchat.db'
    label = 'db'
    verbose_name = 'Chat Models'

    def ready(self):
        # Import models here to avoid circular imports
        # Note: User model is in careerchat.account.models
        from .models import session, message  # noqa
