"""
Custom User model and authentication for InfraDesk
"""

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Custom user manager for InfraDesk users."""

    def create_user(self, username, password=None, **extra_fields):
        """Create and return a regular user."""
        if not username:
            raise ValueError('The Username field must be set')
        username = username.strip().lower()  # Normalize username
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        """Create and return a superuser."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(username, password, **extra_fields)


class User(AbstractUser):
    """
    Custom User model for InfraDesk.
    Uses username as the primary identifier.
    """

    class Role(models.TextChoices):
        ADMIN = 'admin', 'Administrator'
        TECHNICIAN = 'technician', 'Technician'
        VIEWER = 'viewer', 'Viewer'
        AUDITOR = 'auditor', 'Auditor'
        DEVOPS = 'devops', 'DevOps'

    # Roles allowed to change credentials and notes
    EDITOR_ROLES = (Role.ADMIN, Role.TECHNICIAN, Role.DEVOPS)

    username = models.CharField('Username', max_length=150, unique=True)
    email = models.EmailField('Email Address', blank=True)

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.VIEWER,
        help_text='User role determines access level'
    )

    # Profile fields
    full_name = models.CharField(max_length=255, blank=True)
    job_title = models.CharField(max_length=100, blank=True)
    department = models.CharField(max_length=100, blank=True)

    # On-call details
    on_call_status = models.BooleanField(default=False)
    pager_number = models.CharField(max_length=50, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        """Return full name or username."""
        return self.full_name or self.username

    @property
    def is_admin(self):
        """Check if user has admin role."""
        return self.role == self.Role.ADMIN or self.is_superuser

    def can_edit_credentials(self):
        """Check if user can create/edit/delete credentials and notes."""
        return self.is_superuser or self.role in self.EDITOR_ROLES

    def can_reveal_secrets(self):
        """Check if user can read raw credential passwords."""
        return self.can_edit_credentials()

    def can_view_logs(self):
        """Check if user can browse the audit log."""
        return self.is_admin or self.role == self.Role.AUDITOR
