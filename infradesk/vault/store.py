"""
Association store.

Holds credentials and notes and answers "every record attached to
(kind, id)". All callers (managers, launcher, API, entity rows) go through
the same database tables, so a change made in one place is visible in every
other. The acting user is passed in explicitly and stamped on new records.

Ordering rules:
    credentials - insertion order (new records are appended)
    notes       - newest first (new records are prepended)

Deleting an id that no longer exists raises NotFoundError, so a second
delete of the same record fails the same way every time.
"""

import logging

from django.db import transaction
from django.utils import timezone

from infradesk.activities.models import SystemLog
from infradesk.inventory.models import Protocol
from .errors import NotFoundError, ValidationError
from .models import Credential, Note

logger = logging.getLogger('infradesk.vault')


class RecordStore:
    """CRUD over one associated record type."""

    model = None
    # Fields a caller may set when creating a record
    create_fields = ()
    # Fields a caller may change on an existing record
    editable_fields = ()
    audit_category = SystemLog.Category.SYSTEM

    def __init__(self, actor=None):
        self.actor = actor if getattr(actor, 'is_authenticated', False) else None

    # ---- queries ----

    def list(self, association):
        """Records attached to the association, in display order."""
        return self.model.objects.filter(**association.as_filter()).select_related('created_by')

    def get(self, association, pk):
        """Return one record of the association or raise NotFoundError."""
        try:
            return self.model.objects.get(pk=int(pk), **association.as_filter())
        except (self.model.DoesNotExist, TypeError, ValueError):
            raise NotFoundError(
                f'{self.model._meta.verbose_name} {pk} not found for {association}.'
            )

    # ---- mutations ----

    def create(self, association, **fields):
        self._check_fields(fields, self.create_fields)
        values = self.clean(fields, instance=None)
        with transaction.atomic():
            record = self.model(created_by=self.actor, **association.as_filter())
            for name, value in values.items():
                setattr(record, name, value)
            self.before_save(record)
            record.save()
        logger.info("Created %s %s for %s", self.model._meta.model_name, record.pk, association)
        self.audit('success', f'{self.model._meta.verbose_name} created', record)
        return record

    def update(self, association, pk, **patch):
        self._check_fields(patch, self.editable_fields)
        with transaction.atomic():
            record = self.get(association, pk)
            values = self.clean(patch, instance=record)
            for name, value in values.items():
                setattr(record, name, value)
            self.before_save(record)
            record.save()
        logger.info("Updated %s %s for %s", self.model._meta.model_name, record.pk, association)
        self.audit('success', f'{self.model._meta.verbose_name} updated', record,
                   details={'fields': sorted(values)})
        return record

    def delete(self, association, pk):
        with transaction.atomic():
            record = self.get(association, pk)
            record_pk = record.pk
            record.delete()
        record.pk = record_pk
        logger.info("Deleted %s %s for %s", self.model._meta.model_name, record_pk, association)
        self.audit('warning', f'{self.model._meta.verbose_name} deleted', record)

    # ---- hooks ----

    def clean(self, fields, instance):
        """Validate and normalise caller values. Returns the values to assign."""
        return dict(fields)

    def before_save(self, record):
        pass

    def audit(self, level, message, record, details=None):
        details = dict(details or {})
        details.update({
            'record_id': record.pk,
            'associated_type': record.associated_type,
            'associated_id': record.associated_id,
        })
        SystemLog.log(
            self.audit_category, level,
            f'{message}: {record.association}',
            user=self.actor,
            details=details,
            source='vault',
        )

    def _check_fields(self, fields, allowed):
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise ValidationError({name: 'This field cannot be set.' for name in unknown})


class CredentialStore(RecordStore):
    model = Credential
    create_fields = ('username', 'password', 'note', 'port', 'url', 'protocol', 'hidden_display')
    editable_fields = ('username', 'password', 'note', 'port', 'url', 'protocol')
    audit_category = SystemLog.Category.CREDENTIAL

    def list(self, association):
        return super().list(association).select_related('protocol').order_by('id')

    def clean(self, fields, instance):
        values = {}
        errors = {}
        for name in ('username', 'note', 'url'):
            if name in fields:
                values[name] = (fields[name] or '').strip()
        if 'password' in fields:
            # Secrets are stored verbatim, surrounding whitespace included
            values['password'] = fields['password'] or ''
        if 'port' in fields:
            port = fields['port']
            if port in (None, ''):
                port = 22
            try:
                port = int(port)
            except (TypeError, ValueError):
                errors['port'] = 'Port must be a number.'
            else:
                if not 1 <= port <= 65535:
                    errors['port'] = 'Port must be between 1 and 65535.'
            values['port'] = port
        if 'protocol' in fields:
            protocol = fields['protocol']
            if protocol in (None, ''):
                values['protocol'] = None
            elif isinstance(protocol, Protocol):
                values['protocol'] = protocol
            else:
                values['protocol'] = Protocol.objects.filter(pk=protocol).first()
                if values['protocol'] is None:
                    errors['protocol'] = f'Unknown protocol "{protocol}".'
        if 'hidden_display' in fields:
            values['hidden_display'] = bool(fields['hidden_display'])
        if errors:
            raise ValidationError(errors)
        return values

    def before_save(self, record):
        record.last_updated = timezone.now()

    def reveal(self, association, pk):
        """Return the raw password of one credential and audit the access."""
        record = self.get(association, pk)
        self.audit('info', 'Credential password revealed', record)
        return record.password


class NoteStore(RecordStore):
    model = Note
    create_fields = ('note', 'severity')
    editable_fields = ('note', 'severity')
    audit_category = SystemLog.Category.NOTE

    def list(self, association):
        return super().list(association).order_by('-created_at', '-id')

    def clean(self, fields, instance):
        values = {}
        errors = {}
        if instance is None or 'note' in fields:
            text = (fields.get('note') or '').strip()
            if not text:
                errors['note'] = 'Note text is required.'
            values['note'] = text
        if instance is None or 'severity' in fields:
            severity = fields.get('severity') or ''
            if severity not in Note.Severity.values:
                errors['severity'] = f'Severity must be one of {", ".join(Note.Severity.values)}.'
            values['severity'] = severity
        if errors:
            raise ValidationError(errors)
        return values

    def before_save(self, record):
        if record.pk is None:
            record.created_at = timezone.now()
