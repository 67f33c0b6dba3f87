"""
User model for account management.

Users are owned by the external identity provider: the primary key is the
provider's subject id and there is no local password.
"""
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Custom user manager keyed by the identity provider's user id."""

    def create_user(self, id, email, name='User', **extra_fields):
        """Create and save a user for an external identity."""
        if not id:
            raise ValueError('The identity id must be set')
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)
        user = self.model(id=id, email=email, name=name, **extra_fields)
        user.set_unusable_password()
        user.save(using=self._db)
        return user


class User(AbstractUser):
    """Application user mirrored from the identity provider."""

    id = models.CharField(
        primary_key=True,
        max_length=191,
        help_text="Opaque user id issued by the identity provider"
    )
    username = None  # Remove username field
    first_name = None
    last_name = None
    name = models.CharField(max_length=255, default='User')
    email = models.EmailField(unique=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Use email as username
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []  # email is already in USERNAME_FIELD

    objects = UserManager()  # Use custom manager

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-created_at']

    def __str__(self):
        return self.email

    def get_full_name(self):
        """Return the display name of the user."""
        return self.name or self.email

    def get_short_name(self):
        """Return the short name for the user."""
        return self.name or self.email
