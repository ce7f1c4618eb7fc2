"""
Activities models - audit trail of credential, note, connection and
authentication events
"""

from django.db import models
from django.conf import settings


class SystemLog(models.Model):
    """
    Centralized audit log for application events.
    Secrets are never written to message or details.
    """

    class Category(models.TextChoices):
        CREDENTIAL = 'credential', 'Credential'
        NOTE = 'note', 'Note'
        CONNECTION = 'connection', 'Connection'
        AUTH = 'auth', 'Authentication'
        SYSTEM = 'system', 'System'

    class Level(models.TextChoices):
        DEBUG = 'debug', 'Debug'
        INFO = 'info', 'Info'
        WARNING = 'warning', 'Warning'
        ERROR = 'error', 'Error'
        CRITICAL = 'critical', 'Critical'
        SUCCESS = 'success', 'Success'

    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=Category.SYSTEM,
        db_index=True
    )
    level = models.CharField(
        max_length=20,
        choices=Level.choices,
        default=Level.INFO,
        db_index=True
    )
    message = models.TextField()
    details = models.JSONField(null=True, blank=True)

    # Entity the event refers to, if any
    associated_type = models.CharField(max_length=20, blank=True, default='')
    associated_id = models.PositiveIntegerField(null=True, blank=True)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='system_logs'
    )

    # Source info
    source = models.CharField(max_length=100, blank=True, default='')
    ip_address = models.GenericIPAddressField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name = 'System Log'
        verbose_name_plural = 'System Logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category', 'created_at'], name='syslog_category_created_idx'),
            models.Index(fields=['level', 'created_at'], name='syslog_level_created_idx'),
            models.Index(fields=['associated_type', 'associated_id'], name='syslog_association_idx'),
        ]

    def __str__(self):
        return f"[{self.level.upper()}] {self.category}: {self.message[:50]}"

    @classmethod
    def log(cls, category, level, message, user=None, details=None,
            source='', ip_address=None, association=None):
        """
        Create a log entry. Convenience class method.

        Usage:
            SystemLog.log('credential', 'success', 'Credential created', user=user)
            SystemLog.log('auth', 'warning', 'Failed login attempt', ip_address='1.2.3.4')
        """
        details = details or None
        associated_type, associated_id = '', None
        if association is not None:
            associated_type, associated_id = association.kind.value, association.entity_id
        elif details:
            associated_type = details.get('associated_type', '')
            associated_id = details.get('associated_id')
        return cls.objects.create(
            category=category,
            level=level,
            message=message,
            user=user,
            details=details,
            source=source,
            ip_address=ip_address,
            associated_type=associated_type,
            associated_id=associated_id,
        )

    @classmethod
    def connection_event(cls, message, association, user=None, **kwargs):
        return cls.log('connection', 'info', message, user=user, association=association, **kwargs)

    @classmethod
    def auth_event(cls, level, message, user=None, ip_address=None, **kwargs):
        return cls.log('auth', level, message, user=user, ip_address=ip_address, **kwargs)
