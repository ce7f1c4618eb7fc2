import pytest
from django.urls import reverse

from infradesk.activities.models import SystemLog
from infradesk.vault.models import PASSWORD_MASK
from infradesk.vault.store import CredentialStore, NoteStore

pytestmark = pytest.mark.django_db


@pytest.fixture
def credential(server):
    return CredentialStore().create(server.association, username='admin', password='SecurePassword123!', port=22)


def test_credential_list_is_masked(editor_client, server, credential):
    response = editor_client.get(reverse('vault:credentials_api', args=['vmware_server', server.pk]))
    data = response.json()
    assert data['success'] is True
    assert data['total'] == 1
    assert data['credentials'][0]['username'] == 'admin'
    assert data['credentials'][0]['password'] == PASSWORD_MASK
    assert 'SecurePassword123!' not in response.content.decode()


def test_notes_newest_first(viewer_client, server):
    store = NoteStore()
    store.create(server.association, note='first', severity='info')
    store.create(server.association, note='second', severity='critical')
    data = viewer_client.get(reverse('vault:notes_api', args=['vmware_server', server.pk])).json()
    assert [n['note'] for n in data['notes']] == ['second', 'first']


def test_secret_returns_raw_password_and_audits(editor_client, server, credential):
    url = reverse('vault:credential_secret_api', args=['vmware_server', server.pk, credential.pk])
    data = editor_client.post(url).json()
    assert data == {'success': True, 'id': credential.pk, 'password': 'SecurePassword123!'}
    entry = SystemLog.objects.get(message__startswith='Credential password copied')
    assert entry.user.username == 'alice'
    assert 'SecurePassword123!' not in str(entry.details)


def test_secret_forbidden_for_viewer(viewer_client, server, credential):
    url = reverse('vault:credential_secret_api', args=['vmware_server', server.pk, credential.pk])
    response = viewer_client.post(url)
    assert response.status_code == 403
    assert response.json()['success'] is False


def test_secret_of_other_association_is_404(editor_client, server, appliance, credential):
    url = reverse('vault:credential_secret_api', args=['virtual_appliance', appliance.pk, credential.pk])
    response = editor_client.post(url)
    assert response.status_code == 404
    assert response.json()['success'] is False


def test_secret_requires_post(editor_client, server, credential):
    url = reverse('vault:credential_secret_api', args=['vmware_server', server.pk, credential.pk])
    assert editor_client.get(url).status_code == 405


def test_unknown_entity(editor_client):
    response = editor_client.get('/vault/api/router/1/credentials/')
    assert response.status_code == 404
    assert response.json()['success'] is False
    assert editor_client.get('/vault/api/vmware_server/999/notes/').status_code == 404


def test_connect(editor_client, appliance):
    cred = CredentialStore().create(appliance.association, username='admin', port=2222)
    url = reverse('vault:connect_api', args=['virtual_appliance', appliance.pk])
    data = editor_client.get(url, {'credential': cred.pk}).json()
    assert data['command'] == 'ssh admin@10.0.1.100 -p 2222'
    assert data['launch_url'] == 'ssh://admin@10.0.1.100:2222'
    assert data['address'] == '10.0.1.100'


def test_connect_bad_port_is_400(editor_client, appliance):
    url = reverse('vault:connect_api', args=['virtual_appliance', appliance.pk])
    response = editor_client.get(url, {'use_custom_credentials': 'on', 'custom_port': '99999'})
    assert response.status_code == 400
    assert 'custom_port' in response.json()['error']


def test_anonymous_is_rejected(client, server):
    response = client.get(reverse('vault:credentials_api', args=['vmware_server', server.pk]))
    assert response.status_code == 403
