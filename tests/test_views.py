import pytest
from django.urls import reverse

from infradesk.activities.models import SystemLog
from infradesk.vault.store import NoteStore

pytestmark = pytest.mark.django_db


class TestDashboard:

    def test_counters(self, editor_client, server, dev_server, apache, mysql, container):
        store = NoteStore()
        store.create(server.association, note='RAID degraded', severity='critical')
        store.create(server.association, note='CPU high', severity='warning')
        store.create(apache.association, note='patched', severity='info')

        stats = editor_client.get(reverse('dashboard')).context['stats']
        assert stats['servers'] == 2
        assert stats['appliances'] == 2
        assert stats['applications'] == 2
        assert stats['containers'] == 1
        assert stats['cpu_cores'] == 56
        assert stats['ram_gb'] == 384
        assert float(stats['storage_tb']) == pytest.approx(3.5)
        assert stats['critical_notes'] == 1
        assert stats['warning_notes'] == 1

    def test_empty_inventory(self, editor_client):
        stats = editor_client.get(reverse('dashboard')).context['stats']
        assert stats['cpu_cores'] == 0
        assert stats['servers'] == 0

    def test_search_is_passed_to_every_tab(self, editor_client, apache, mysql):
        response = editor_client.get(reverse('dashboard'), {'tab': 'application', 'q': 'SQL'})
        tabs = {tab['key']: tab for tab in response.context['tabs']}
        assert list(tabs['application']['entities']) == [mysql]
        assert tabs['vmware_server']['count'] == 0
        assert tabs['vmware_server']['entities'] is None
        content = response.content.decode()
        assert 'MySQL Database' in content
        assert 'Apache Web Server' not in content

    def test_unknown_tab_falls_back(self, editor_client):
        response = editor_client.get(reverse('dashboard'), {'tab': 'bogus'})
        assert response.context['active_tab'] == 'vmware_server'


class TestInventoryLists:

    def test_application_list_search(self, viewer_client, apache, mysql):
        response = viewer_client.get(reverse('inventory:application_list'), {'q': 'sql'})
        assert list(response.context['entities']) == [mysql]
        assert response.context['total_count'] == 2

    def test_rows_link_to_managers(self, viewer_client, server):
        content = viewer_client.get(reverse('inventory:server_list')).content.decode()
        assert reverse('vault:credentials', args=['vmware_server', server.pk]) in content
        assert reverse('vault:notes', args=['vmware_server', server.pk]) in content
        assert reverse('vault:connect', args=['vmware_server', server.pk]) in content

    def test_detail(self, viewer_client, appliance, apache):
        NoteStore().create(appliance.association, note='kernel update pending', severity='notice')
        response = viewer_client.get(reverse('inventory:appliance_detail', args=[appliance.pk]))
        assert response.status_code == 200
        content = response.content.decode()
        assert 'Apache Web Server' in content
        assert 'kernel update pending' in content

    @pytest.mark.parametrize('name', ['server_list', 'appliance_list', 'application_list', 'container_list', 'url_list'])
    def test_lists_render(self, viewer_client, name):
        assert viewer_client.get(reverse(f'inventory:{name}')).status_code == 200


class TestLogs:

    def test_admin_and_auditor_can_view(self, client, admin_user, auditor):
        SystemLog.log('system', 'info', 'Inventory seeded')
        for user in (admin_user, auditor):
            client.force_login(user)
            response = client.get(reverse('logs'))
            assert response.status_code == 200
            assert 'Inventory seeded' in response.content.decode()

    def test_viewer_is_forbidden(self, viewer_client):
        assert viewer_client.get(reverse('logs')).status_code == 403

    def test_filters(self, editor_client):
        SystemLog.log('credential', 'success', 'Credential created: VMware Server #1')
        SystemLog.log('connection', 'info', 'SSH session launched to 10.0.1.100')
        response = editor_client.get(reverse('logs'), {'category': 'connection'})
        assert [log.message for log in response.context['logs']] == ['SSH session launched to 10.0.1.100']
        response = editor_client.get(reverse('logs'), {'search': 'vmware', 'date_from': 'garbage'})
        assert response.context['stats']['total'] == 1
        assert response.context['current_date_from'] == ''


class TestAccounts:

    def test_login_page(self, client):
        assert client.get(reverse('accounts:login')).status_code == 200

    def test_logout_flow(self, editor_client):
        assert editor_client.get(reverse('accounts:logout')).status_code == 200
        response = editor_client.post(reverse('accounts:logout'))
        assert response['Location'] == reverse('accounts:logged_out')
        assert editor_client.get(reverse('dashboard')).status_code == 302
