"""
Vault views - credential manager, notes manager and connection launcher.

Each page is scoped to one inventory entity given by ``<kind>/<entity_id>``
in the URL. Managers follow post/redirect/get: every action posts an
``action`` field, the view applies it and redirects back to the manager,
and the result is reported through the messages framework.
"""

import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import redirect
from django.urls import reverse
from django.views.generic import TemplateView

from infradesk.accounts.views import client_ip
from infradesk.activities.models import SystemLog
from infradesk.inventory.catalog import Association
from .errors import InvalidTransition, ValidationError, VaultError
from .forms import CredentialForm, LauncherForm, NoteForm
from .launcher import (
    ConnectionTarget, LaunchOptions, build_command, build_launch_url, password_source,
)
from .models import Note
from .state import Action, ManagerSession
from .store import CredentialStore, NoteStore

logger = logging.getLogger('infradesk.vault')

CREDENTIALS_EMPTY_MESSAGE = 'No credentials found. Click "Add Credential" to create the first one.'
NOTES_EMPTY_MESSAGE = 'No notes found. Click "Add Note" to create the first one.'

SEVERITY_STYLES = {
    Note.Severity.INFO: {'color': 'primary', 'icon': 'bi-info-circle'},
    Note.Severity.NOTICE: {'color': 'success', 'icon': 'bi-check-circle'},
    Note.Severity.WARNING: {'color': 'warning', 'icon': 'bi-exclamation-triangle'},
    Note.Severity.CRITICAL: {'color': 'danger', 'icon': 'bi-x-octagon'},
}


class EntityMixin:
    """Resolve ``kind``/``entity_id`` URL kwargs to an association and entity."""

    def dispatch(self, request, *args, **kwargs):
        try:
            self.association = Association.parse(kwargs['kind'], kwargs['entity_id'])
        except ValidationError as e:
            raise Http404(e.message)
        self.entity = self.association.resolve()
        if self.entity is None:
            raise Http404(f'{self.association} does not exist.')
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['entity'] = self.entity
        context['association'] = self.association
        context['kind'] = self.association.kind.value
        context['can_edit'] = self.request.user.can_edit_credentials()
        return context


# ============== Managers ==============

class ManagerView(LoginRequiredMixin, EntityMixin, TemplateView):
    """
    Shared add/edit/delete flow of the credential and notes managers.

    The open form (if any) and per-row flags live in a ManagerSession so
    they survive the redirect after each action. ``?open=1`` on a GET
    mounts the manager fresh, which is how list pages link to it.
    """

    manager_name = None
    store_class = None
    form_class = None
    record_label = 'Record'
    empty_message = ''
    actions = ('add', 'edit', 'save', 'cancel', 'delete')

    @property
    def manager(self):
        return ManagerSession(self.request.session, self.manager_name, self.association)

    def get_store(self):
        return self.store_class(actor=self.request.user)

    def get(self, request, *args, **kwargs):
        if request.GET.get('open'):
            self.manager.mount()
            return redirect(request.path)
        return super().get(request, *args, **kwargs)

    def get_form(self, state, data=None):
        if data is not None:
            return self.form_class(data, **self.get_form_kwargs(state))
        initial = {}
        if state.is_editing:
            record = self.get_store().get(self.association, state.record_id)
            initial = self.form_class.initial_for(record)
        return self.form_class(initial=initial, **self.get_form_kwargs(state))

    def get_form_kwargs(self, state):
        return {}

    def get_context_data(self, form=None, **kwargs):
        context = super().get_context_data(**kwargs)
        manager = self.manager
        state = manager.state
        if state.is_open and form is None:
            try:
                form = self.get_form(state)
            except VaultError:
                # Record vanished while its form was open
                manager.forget(state.record_id)
                state = manager.state
        context['records'] = self.get_rows(self.get_store().list(self.association), manager)
        context['state'] = state
        context['form'] = form
        context['empty_message'] = self.empty_message
        context['record_label'] = self.record_label
        return context

    def get_rows(self, records, manager):
        return list(records)

    def post(self, request, *args, **kwargs):
        action = request.POST.get('action', '').strip().lower()
        if action not in self.actions:
            messages.error(request, f'Unknown action "{action}".')
            return redirect(request.path)
        self.check_permission(action)

        handler = getattr(self, f'do_{action}')
        try:
            response = handler(request)
        except VaultError as e:
            logger.info("%s %s rejected for %s: %s",
                        self.manager_name, action, self.association, e.message)
            messages.error(request, e.message)
            return redirect(request.path)
        return response or redirect(request.path)

    def check_permission(self, action):
        if action == 'cancel':
            return
        if not self.request.user.can_edit_credentials():
            raise PermissionDenied('Your role cannot change credentials or notes.')

    def record_id(self):
        record_id = self.request.POST.get('record_id')
        if not record_id:
            raise ValidationError({'record_id': 'No record selected.'})
        return record_id

    # ---- actions ----

    def do_add(self, request):
        self.manager.apply(Action.ADD)

    def do_edit(self, request):
        record = self.get_store().get(self.association, self.record_id())
        self.manager.apply(Action.EDIT, record.pk)

    def do_cancel(self, request):
        self.manager.apply(Action.CANCEL)

    def do_save(self, request):
        manager = self.manager
        state = manager.state
        if not state.is_open:
            raise InvalidTransition('There is no open form.')

        form = self.get_form(state, data=request.POST)
        if not form.is_valid():
            messages.error(request, 'Please correct the errors below.')
            return self.render_to_response(self.get_context_data(form=form))

        values = self.form_values(form)
        store = self.get_store()
        try:
            if state.is_adding:
                store.create(self.association, **values)
            else:
                store.update(self.association, state.record_id, **values)
        except ValidationError as e:
            for field, error in e.errors.items():
                form.add_error(field if field in form.fields else None, error)
            messages.error(request, e.message)
            return self.render_to_response(self.get_context_data(form=form))

        manager.apply(Action.SAVE)
        verb = 'added' if state.is_adding else 'updated'
        messages.success(request, f'{self.record_label} {verb} successfully.')

    def do_delete(self, request):
        record_id = self.record_id()
        self.get_store().delete(self.association, record_id)
        self.manager.forget(record_id)
        messages.success(request, f'{self.record_label} deleted successfully.')

    def form_values(self, form):
        return dict(form.cleaned_data)


class CredentialManagerView(ManagerView):
    """List, add, edit, delete and reveal credentials of one entity."""

    template_name = 'vault/credential_manager.html'
    manager_name = 'credentials'
    store_class = CredentialStore
    form_class = CredentialForm
    record_label = 'Credential'
    empty_message = CREDENTIALS_EMPTY_MESSAGE
    actions = ManagerView.actions + ('toggle',)

    def get_form_kwargs(self, state):
        return {'editing': state.is_editing}

    def get_rows(self, records, manager):
        # Roles without reveal rights always see the mask
        can_reveal = self.request.user.can_reveal_secrets()
        return [
            {'credential': c, 'revealed': can_reveal and manager.is_revealed(c)}
            for c in records
        ]

    def form_values(self, form):
        values = super().form_values(form)
        if self.manager.state.is_editing and not values.get('password'):
            # Blank password on edit keeps the stored one
            values.pop('password', None)
        return values

    def check_permission(self, action):
        if action == 'toggle':
            if not self.request.user.can_reveal_secrets():
                raise PermissionDenied('Your role cannot reveal passwords.')
            return
        super().check_permission(action)

    def do_toggle(self, request):
        credential = self.get_store().get(self.association, self.record_id())
        revealed = self.manager.toggle_reveal(credential)
        if revealed:
            self.get_store().reveal(self.association, credential.pk)


class NotesManagerView(ManagerView):
    """List, add, edit and delete notes of one entity."""

    template_name = 'vault/notes_manager.html'
    manager_name = 'notes'
    store_class = NoteStore
    form_class = NoteForm
    record_label = 'Note'
    empty_message = NOTES_EMPTY_MESSAGE

    def get_rows(self, records, manager):
        return [
            {'note': n, 'style': SEVERITY_STYLES[n.severity]}
            for n in records
        ]


# ============== Connection Launcher ==============

class ConnectionLauncherView(LoginRequiredMixin, EntityMixin, TemplateView):
    """
    Compose the SSH command for an entity.

    GET recomputes the command from the query string on every form change.
    POST records the launch in the system log and hands the ssh:// URL back
    through a message; no connection is made from the server.
    """

    template_name = 'vault/connection_launcher.html'

    def get_form(self, data):
        credentials = CredentialStore(actor=self.request.user).list(self.association)
        return LauncherForm(data or None, credentials=credentials)

    def get_options(self, form):
        if not form.is_bound or not form.is_valid():
            return LaunchOptions()
        data = form.cleaned_data
        return LaunchOptions(
            use_custom_credentials=data['use_custom_credentials'],
            custom_username=data['custom_username'],
            custom_password=data['custom_password'],
            custom_port=data['custom_port'],
            selected_credential=data['credential'],
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        form = kwargs.get('form') or self.get_form(self.request.GET)
        target = ConnectionTarget.from_entity(self.entity)
        options = self.get_options(form)
        context.update({
            'form': form,
            'target': target,
            'command': build_command(target, options),
            'launch_url': build_launch_url(target, options),
            'selected_credential': options.selected_credential,
            'copy_password': self.copy_password(options),
        })
        return context

    def copy_password(self, options):
        """Copy-password button of the page, or None when there is nothing to copy."""
        source = password_source(options)
        if source == 'custom':
            # Typed by the user, copied from the form field in the browser
            return {'source': source}
        if source == 'saved' and self.request.user.can_reveal_secrets():
            return {
                'source': source,
                'url': reverse('vault:credential_secret_api', args=[
                    self.association.kind.value, self.association.entity_id,
                    options.selected_credential.pk,
                ]),
            }
        return None

    def post(self, request, *args, **kwargs):
        form = self.get_form(request.POST)
        if not form.is_valid():
            messages.error(request, 'Please correct the errors below.')
            return self.render_to_response(self.get_context_data(form=form))

        target = ConnectionTarget.from_entity(self.entity)
        options = self.get_options(form)
        command = build_command(target, options)
        SystemLog.connection_event(
            f'SSH session launched to {target.address}',
            self.association,
            user=request.user,
            details={
                'command': command,
                'custom_credentials': options.use_custom_credentials,
                'credential_id': getattr(options.selected_credential, 'pk', None),
            },
            source='launcher',
            ip_address=client_ip(request),
        )
        logger.info("Launch %s by %s: %s", self.association, request.user, command)
        messages.info(request, f'Launching: {command}')
        return self.render_to_response(self.get_context_data(form=form))
