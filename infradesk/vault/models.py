"""
Vault models - Credentials and Notes attached to inventory entities

Both are keyed by (associated_type, associated_id) rather than a foreign key,
so one table serves every entity kind in the catalog.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from fernet_fields import EncryptedCharField

from infradesk.inventory.catalog import Association, EntityKind

PASSWORD_MASK = '••••••••••••'


class AssociatedRecord(models.Model):
    """Common association columns for credentials and notes."""

    associated_type = models.CharField(
        max_length=20,
        choices=EntityKind.choices
    )
    associated_id = models.PositiveIntegerField()

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    class Meta:
        abstract = True

    @property
    def association(self):
        return Association(EntityKind(self.associated_type), self.associated_id)


class Credential(AssociatedRecord):
    """
    Reusable login for one associated entity.
    The password is encrypted at rest.
    """

    username = models.CharField(max_length=255, blank=True, default='')
    password = EncryptedCharField(
        max_length=255,
        blank=True,
        default='',
        help_text='Login password (encrypted)'
    )
    note = models.TextField(blank=True, default='')
    hidden_display = models.BooleanField(
        default=True,
        help_text='Mask the password until it is explicitly revealed'
    )
    port = models.PositiveIntegerField(default=22)
    protocol = models.ForeignKey(
        'inventory.Protocol',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='credentials'
    )
    url = models.CharField('URL', max_length=500, blank=True, default='')
    last_updated = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = 'Credential'
        verbose_name_plural = 'Credentials'
        ordering = ['id']
        indexes = [
            models.Index(fields=['associated_type', 'associated_id'], name='credential_association_idx'),
        ]

    def __str__(self):
        return f"{self.username or '(no username)'} @ {self.association}"

    @property
    def masked_password(self):
        """Placeholder shown instead of the secret. Empty when there is no password."""
        return PASSWORD_MASK if self.password else ''


class Note(AssociatedRecord):
    """
    Timestamped operational annotation on an associated entity.
    """

    class Severity(models.TextChoices):
        INFO = 'info', 'Info'
        NOTICE = 'notice', 'Notice'
        WARNING = 'warning', 'Warning'
        CRITICAL = 'critical', 'Critical'

    severity = models.CharField(
        max_length=10,
        choices=Severity.choices,
        default=Severity.INFO,
        db_index=True
    )
    note = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        verbose_name = 'Note'
        verbose_name_plural = 'Notes'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['associated_type', 'associated_id'], name='note_association_idx'),
        ]

    def __str__(self):
        return f"[{self.severity.upper()}] {self.association}: {self.note[:50]}"

    @property
    def severity_rank(self):
        """Position in info < notice < warning < critical."""
        return list(self.Severity.values).index(self.severity)
