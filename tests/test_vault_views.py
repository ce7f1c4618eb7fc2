import pytest
from django.contrib.messages import get_messages
from django.urls import reverse
from django.utils.html import escape

from infradesk.activities.models import SystemLog
from infradesk.vault.models import Credential, Note, PASSWORD_MASK
from infradesk.vault.store import CredentialStore, NoteStore
from infradesk.vault.views import NOTES_EMPTY_MESSAGE

pytestmark = pytest.mark.django_db


def notes_url(entity):
    return reverse('vault:notes', args=[entity.entity_kind.value, entity.pk])


def credentials_url(entity):
    return reverse('vault:credentials', args=[entity.entity_kind.value, entity.pk])


def message_texts(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class TestNotesManager:

    def test_empty_state(self, editor_client, server):
        response = editor_client.get(notes_url(server))
        assert response.status_code == 200
        assert escape(NOTES_EMPTY_MESSAGE) in response.content.decode()
        assert 'id="note-list"' not in response.content.decode()

    def test_add_note(self, editor_client, server, admin_user):
        url = notes_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.post(url, {'action': 'Save', 'note': 'Disk replaced', 'severity': 'notice'}, follow=True)

        note = Note.objects.get()
        assert note.association == server.association
        assert note.created_by == admin_user
        assert 'Note added successfully.' in message_texts(response)
        assert 'Disk replaced' in response.content.decode()
        assert response.context['state'].is_open is False

    def test_add_form_defaults_to_info(self, editor_client, server):
        url = notes_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.get(url)
        assert response.context['form']['severity'].value() == 'info'

    def test_blank_note_keeps_form_open(self, editor_client, server):
        url = notes_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.post(url, {'action': 'save', 'note': '', 'severity': 'info'})
        assert response.status_code == 200
        assert response.context['form'].errors
        assert not Note.objects.exists()

    def test_edit_note(self, editor_client, server):
        note = NoteStore().create(server.association, note='old', severity='info')
        url = notes_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': note.pk})
        response = editor_client.get(url)
        assert response.context['form'].initial == {'note': 'old', 'severity': 'info'}

        editor_client.post(url, {'action': 'save', 'note': 'new', 'severity': 'critical'})
        note.refresh_from_db()
        assert (note.note, note.severity) == ('new', 'critical')

    def test_add_while_editing_is_rejected(self, editor_client, server):
        note = NoteStore().create(server.association, note='x', severity='info')
        url = notes_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': note.pk})
        response = editor_client.post(url, {'action': 'add'}, follow=True)
        assert any('Save or cancel' in text for text in message_texts(response))
        assert response.context['state'].is_editing

    def test_double_delete_reports_error(self, editor_client, server):
        note = NoteStore().create(server.association, note='x', severity='info')
        url = notes_url(server)
        first = editor_client.post(url, {'action': 'delete', 'record_id': note.pk}, follow=True)
        assert 'Note deleted successfully.' in message_texts(first)
        second = editor_client.post(url, {'action': 'delete', 'record_id': note.pk}, follow=True)
        assert any('not found' in text for text in message_texts(second))

    def test_notes_of_other_entities_are_not_shown(self, editor_client, server, appliance):
        NoteStore().create(appliance.association, note='appliance only', severity='warning')
        response = editor_client.get(notes_url(server))
        assert 'appliance only' not in response.content.decode()

    def test_open_remounts(self, editor_client, server):
        url = notes_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.get(url + '?open=1', follow=True)
        assert response.context['state'].is_open is False

    def test_viewer_cannot_change_notes(self, viewer_client, server):
        response = viewer_client.post(notes_url(server), {'action': 'add'})
        assert response.status_code == 403

    def test_viewer_can_read_notes(self, viewer_client, server):
        NoteStore().create(server.association, note='visible', severity='info')
        response = viewer_client.get(notes_url(server))
        assert 'visible' in response.content.decode()

    def test_login_required(self, client, server):
        response = client.get(notes_url(server))
        assert response.status_code == 302
        assert reverse('accounts:login') in response['Location']

    def test_unknown_entity_is_404(self, editor_client):
        assert editor_client.get('/vault/router/1/notes/').status_code == 404
        assert editor_client.get('/vault/application/999/notes/').status_code == 404


class TestCredentialManager:

    def test_passwords_masked_by_default(self, editor_client, server):
        CredentialStore().create(server.association, username='admin', password='SecurePassword123!')
        content = editor_client.get(credentials_url(server)).content.decode()
        assert PASSWORD_MASK in content
        assert 'SecurePassword123!' not in content

    def test_toggle_reveals_only_that_row(self, editor_client, server):
        store = CredentialStore()
        row_a = store.create(server.association, username='admin', password='AlphaSecret1')
        store.create(server.association, username='backup', password='BravoSecret2')
        url = credentials_url(server)

        editor_client.post(url, {'action': 'toggle', 'record_id': row_a.pk})
        content = editor_client.get(url).content.decode()
        assert 'AlphaSecret1' in content
        assert 'BravoSecret2' not in content
        assert content.count(PASSWORD_MASK) == 1

    def test_add_credential_appends(self, editor_client, server):
        first = CredentialStore().create(server.association, username='admin', password='a')
        url = credentials_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.post(url, {
            'action': 'save',
            'username': 'backup',
            'password': 'BackupPass456!',
            'port': '',
            'hidden_display': 'on',
        }, follow=True)

        assert 'Credential added successfully.' in message_texts(response)
        rows = response.context['records']
        assert [row['credential'].username for row in rows] == ['admin', 'backup']
        assert rows[0]['credential'] == first
        assert Credential.objects.get(username='backup').port == 22

    def test_edit_form_has_no_display_toggle(self, editor_client, server):
        cred = CredentialStore().create(server.association, username='admin', password='a')
        url = credentials_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': cred.pk})
        form = editor_client.get(url).context['form']
        assert 'hidden_display' not in form.fields
        assert form.initial['username'] == 'admin'

    def test_invalid_port_reports_error(self, editor_client, server):
        url = credentials_url(server)
        editor_client.post(url, {'action': 'add'})
        response = editor_client.post(url, {'action': 'save', 'username': 'x', 'port': '70000'})
        assert response.status_code == 200
        assert 'port' in response.context['form'].errors
        assert not Credential.objects.exists()

    def test_viewer_cannot_reveal(self, viewer_client, server):
        cred = CredentialStore().create(server.association, username='admin', password='a')
        response = viewer_client.post(credentials_url(server), {'action': 'toggle', 'record_id': cred.pk})
        assert response.status_code == 403

    def test_viewer_never_sees_clear_passwords(self, client, viewer, admin_user, server):
        CredentialStore().create(server.association, username='admin', password='ShownByDefault7', hidden_display=False)

        client.force_login(admin_user)
        assert 'ShownByDefault7' in client.get(credentials_url(server)).content.decode()

        client.force_login(viewer)
        response = client.get(credentials_url(server))
        content = response.content.decode()
        assert 'ShownByDefault7' not in content
        assert PASSWORD_MASK in content
        assert response.context['records'][0]['revealed'] is False

    def test_edit_form_does_not_render_stored_password(self, editor_client, server):
        cred = CredentialStore().create(server.association, username='admin', password='StoredSecret9')
        url = credentials_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': cred.pk})
        response = editor_client.get(url)
        assert 'password' not in response.context['form'].initial
        assert 'StoredSecret9' not in response.content.decode()

    def test_blank_password_on_edit_keeps_stored_one(self, editor_client, server):
        cred = CredentialStore().create(server.association, username='admin', password='StoredSecret9')
        url = credentials_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': cred.pk})
        editor_client.post(url, {'action': 'save', 'username': 'root', 'password': '', 'port': '22'})
        cred.refresh_from_db()
        assert cred.username == 'root'
        assert cred.password == 'StoredSecret9'

    def test_new_password_on_edit_replaces_stored_one(self, editor_client, server):
        cred = CredentialStore().create(server.association, username='admin', password='StoredSecret9')
        url = credentials_url(server)
        editor_client.post(url, {'action': 'edit', 'record_id': cred.pk})
        editor_client.post(url, {'action': 'save', 'username': 'admin', 'password': 'Rotated10', 'port': '22'})
        cred.refresh_from_db()
        assert cred.password == 'Rotated10'

    def test_mutations_are_audited(self, editor_client, server):
        url = credentials_url(server)
        editor_client.post(url, {'action': 'add'})
        editor_client.post(url, {'action': 'save', 'username': 'admin', 'password': 'pw', 'port': '22'})
        entry = SystemLog.objects.get(category='credential')
        assert entry.user.username == 'alice'
        assert 'pw' not in str(entry.details)


class TestConnectionLauncher:

    def test_default_command(self, editor_client, appliance):
        response = editor_client.get(reverse('vault:connect', args=['virtual_appliance', appliance.pk]))
        assert response.context['command'] == 'ssh 10.0.1.100'

    def test_saved_credential_command(self, editor_client, appliance):
        cred = CredentialStore().create(appliance.association, username='admin', password='a', port=2222)
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.get(url, {'credential': cred.pk})
        assert response.context['command'] == 'ssh admin@10.0.1.100 -p 2222'
        assert response.context['launch_url'] == 'ssh://admin@10.0.1.100:2222'

    def test_custom_credentials_command(self, editor_client, appliance):
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.get(url, {'use_custom_credentials': 'on', 'custom_username': '', 'custom_port': '22'})
        assert response.context['command'] == 'ssh 10.0.1.100 -p 22'

    def test_application_uses_appliance_address(self, editor_client, apache):
        response = editor_client.get(reverse('vault:connect', args=['application', apache.pk]))
        assert response.context['command'] == 'ssh 10.0.1.100'

    def test_credentials_of_other_entities_are_not_offered(self, editor_client, appliance, server):
        other = CredentialStore().create(server.association, username='root', password='a')
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.get(url, {'credential': other.pk})
        assert 'credential' in response.context['form'].errors
        assert response.context['command'] == 'ssh 10.0.1.100'

    def test_launch_is_audited(self, editor_client, appliance):
        cred = CredentialStore().create(appliance.association, username='admin', password='a', port=22)
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.post(url, {'credential': cred.pk, 'action': 'launch'})

        assert response.status_code == 200
        assert 'Launching: ssh admin@10.0.1.100 -p 22' in message_texts(response)
        entry = SystemLog.objects.get(category='connection')
        assert entry.associated_type == 'virtual_appliance'
        assert entry.associated_id == appliance.pk
        assert entry.details['command'] == 'ssh admin@10.0.1.100 -p 22'

    def test_copy_password_follows_custom_credentials(self, editor_client, appliance):
        saved = CredentialStore().create(appliance.association, username='admin', password='SavedSecret', port=2222)
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.get(url, {
            'credential': saved.pk,
            'use_custom_credentials': 'on',
            'custom_username': 'ops',
            'custom_password': 'TypedSecret',
        })

        assert response.context['command'] == 'ssh ops@10.0.1.100 -p 22'
        assert response.context['copy_password'] == {'source': 'custom'}
        secret_url = reverse('vault:credential_secret_api', args=['virtual_appliance', appliance.pk, saved.pk])
        content = response.content.decode()
        assert 'id="copy-password"' in content
        assert secret_url not in content

    def test_copy_password_for_custom_only(self, editor_client, appliance):
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        response = editor_client.get(url, {'use_custom_credentials': 'on', 'custom_password': 'TypedSecret'})
        assert response.context['copy_password'] == {'source': 'custom'}
        assert 'data-source="custom"' in response.content.decode()

    def test_no_copy_password_without_a_secret(self, editor_client, appliance):
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        for params in ({}, {'use_custom_credentials': 'on', 'custom_username': 'ops'}):
            response = editor_client.get(url, params)
            assert response.context['copy_password'] is None
            assert 'id="copy-password"' not in response.content.decode()

    def test_copy_password_of_saved_credential(self, client, admin_user, viewer, appliance):
        saved = CredentialStore().create(appliance.association, username='admin', password='SavedSecret')
        url = reverse('vault:connect', args=['virtual_appliance', appliance.pk])
        secret_url = reverse('vault:credential_secret_api', args=['virtual_appliance', appliance.pk, saved.pk])

        client.force_login(admin_user)
        response = client.get(url, {'credential': saved.pk})
        assert response.context['copy_password'] == {'source': 'saved', 'url': secret_url}
        assert secret_url in response.content.decode()

        client.force_login(viewer)
        assert client.get(url, {'credential': saved.pk}).context['copy_password'] is None
