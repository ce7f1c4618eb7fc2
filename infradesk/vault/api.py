"""
API endpoints for credentials, notes and the connection launcher.

Provides JSON for in-page widgets: masked credential lists, notes, the
derived SSH command and the raw password for clipboard copy.
"""

import logging
from django.http import JsonResponse
from django.views import View
from django.contrib.auth.mixins import LoginRequiredMixin

from infradesk.accounts.views import client_ip
from infradesk.activities.models import SystemLog
from infradesk.inventory.catalog import Association
from .errors import NotFoundError, VaultError
from .forms import LauncherForm
from .launcher import ConnectionTarget, LaunchOptions, build_command, build_launch_url
from .store import CredentialStore, NoteStore

logger = logging.getLogger('infradesk.vault')


def error_response(message, status):
    return JsonResponse({'success': False, 'error': message}, status=status)


class EntityAPIView(LoginRequiredMixin, View):
    """
    Base for endpoints scoped to one entity.

    Errors come back as {"success": false, "error": ...} with 400 for bad
    input and 404 for unknown entities or records.
    """

    raise_exception = True

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()
        try:
            self.association = Association.parse(kwargs['kind'], kwargs['entity_id'])
        except VaultError as e:
            return error_response(e.message, 404)
        self.entity = self.association.resolve()
        if self.entity is None:
            return error_response(f'{self.association} does not exist.', 404)
        try:
            return super().dispatch(request, *args, **kwargs)
        except VaultError as e:
            return error_response(e.message, e.status_code)


class CredentialListAPIView(EntityAPIView):
    """Credentials of an entity. Passwords are always masked here."""

    def get(self, request, kind, entity_id):
        credentials = CredentialStore(actor=request.user).list(self.association)

        credential_list = []
        for cred in credentials:
            credential_list.append({
                'id': cred.pk,
                'username': cred.username,
                'password': cred.masked_password,
                'port': cred.port,
                'protocol': cred.protocol.name if cred.protocol else None,
                'url': cred.url,
                'note': cred.note,
                'hidden_display': cred.hidden_display,
                'last_updated': cred.last_updated.isoformat(),
            })

        return JsonResponse({
            'success': True,
            'associated_type': self.association.kind.value,
            'associated_id': self.association.entity_id,
            'credentials': credential_list,
            'total': len(credential_list),
        })


class NoteListAPIView(EntityAPIView):
    """Notes of an entity, newest first."""

    def get(self, request, kind, entity_id):
        notes = NoteStore(actor=request.user).list(self.association)
        note_list = [
            {
                'id': note.pk,
                'severity': note.severity,
                'note': note.note,
                'created_at': note.created_at.isoformat(),
                'created_by': note.created_by.username if note.created_by else None,
            }
            for note in notes
        ]
        return JsonResponse({
            'success': True,
            'associated_type': self.association.kind.value,
            'associated_id': self.association.entity_id,
            'notes': note_list,
            'total': len(note_list),
        })


class ConnectAPIView(EntityAPIView):
    """
    Derived SSH command for the launcher query parameters:
    credential, use_custom_credentials, custom_username, custom_port.
    """

    def get(self, request, kind, entity_id):
        credentials = CredentialStore(actor=request.user).list(self.association)
        form = LauncherForm(request.GET, credentials=credentials)
        if not form.is_valid():
            errors = '; '.join(
                f'{field}: {" ".join(messages)}' for field, messages in form.errors.items()
            )
            return error_response(errors, 400)

        data = form.cleaned_data
        options = LaunchOptions(
            use_custom_credentials=data['use_custom_credentials'],
            custom_username=data['custom_username'],
            custom_port=data['custom_port'],
            selected_credential=data['credential'],
        )
        target = ConnectionTarget.from_entity(self.entity)
        return JsonResponse({
            'success': True,
            'target': target.name,
            'address': target.address,
            'command': build_command(target, options),
            'launch_url': build_launch_url(target, options),
        })


class CredentialSecretAPIView(EntityAPIView):
    """
    Raw password of one credential, for the copy-to-clipboard button.
    Restricted to roles that can reveal secrets; every read is audited.
    """

    def post(self, request, kind, entity_id, pk):
        if not request.user.can_reveal_secrets():
            return error_response('Your role cannot read passwords.', 403)

        store = CredentialStore(actor=request.user)
        try:
            credential = store.get(self.association, pk)
        except NotFoundError as e:
            return error_response(e.message, 404)

        SystemLog.log(
            'credential', 'info',
            f'Credential password copied: {self.association}',
            user=request.user,
            details={'record_id': credential.pk},
            source='api',
            ip_address=client_ip(request),
            association=self.association,
        )
        logger.info("Password of credential %s read by %s", credential.pk, request.user)
        return JsonResponse({'success': True, 'id': credential.pk, 'password': credential.password})
