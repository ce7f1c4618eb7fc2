from types import SimpleNamespace

import pytest

from infradesk.vault.launcher import (
    ConnectionTarget, LaunchOptions, build_command, build_launch_url, password_source, password_to_copy,
)

TARGET = ConnectionTarget(target_type='virtual_appliance', ip_address='10.0.1.100', hostname='web-prod-01')
SAVED = SimpleNamespace(username='admin', port=2222, password='SecurePassword123!')


class TestBuildCommand:

    def test_nothing_selected(self):
        assert build_command(TARGET, LaunchOptions()) == 'ssh 10.0.1.100'

    def test_saved_credential(self):
        assert build_command(TARGET, LaunchOptions(selected_credential=SAVED)) == 'ssh admin@10.0.1.100 -p 2222'

    def test_custom_without_username(self):
        options = LaunchOptions(use_custom_credentials=True, custom_username='', custom_port=22)
        assert build_command(TARGET, options) == 'ssh 10.0.1.100 -p 22'

    def test_custom_with_username(self):
        options = LaunchOptions(use_custom_credentials=True, custom_username='ops', custom_port=2200,
                                selected_credential=SAVED)
        assert build_command(TARGET, options) == 'ssh ops@10.0.1.100 -p 2200'

    def test_custom_port_defaults_to_22(self):
        options = LaunchOptions(use_custom_credentials=True, custom_username='ops')
        assert build_command(TARGET, options) == 'ssh ops@10.0.1.100 -p 22'

    def test_saved_credential_without_port(self):
        options = LaunchOptions(selected_credential=SimpleNamespace(username='admin', port=None, password=''))
        assert build_command(TARGET, options) == 'ssh admin@10.0.1.100 -p 22'

    @pytest.mark.parametrize('ip, hostname, expected', [
        ('10.0.1.100', 'web-prod-01', 'ssh 10.0.1.100'),
        ('', 'web-prod-01', 'ssh web-prod-01'),
        ('', '', 'ssh unknown'),
    ])
    def test_address_fallback(self, ip, hostname, expected):
        target = ConnectionTarget(target_type='vmware_server', ip_address=ip, hostname=hostname)
        assert build_command(target, LaunchOptions()) == expected


def test_launch_url():
    assert build_launch_url(TARGET, LaunchOptions(selected_credential=SAVED)) == 'ssh://admin@10.0.1.100:2222'
    assert build_launch_url(TARGET, LaunchOptions()) == 'ssh://10.0.1.100:22'


class TestPasswordToCopy:

    def test_raw_secret_of_saved_credential(self):
        assert password_to_copy(LaunchOptions(selected_credential=SAVED)) == 'SecurePassword123!'

    def test_custom_password_wins_when_custom(self):
        options = LaunchOptions(use_custom_credentials=True, custom_password='typed', selected_credential=SAVED)
        assert password_to_copy(options) == 'typed'

    def test_empty_when_nothing_selected(self):
        assert password_to_copy(LaunchOptions()) == ''


class TestPasswordSource:

    def test_custom_beats_selected_credential(self):
        options = LaunchOptions(use_custom_credentials=True, custom_password='typed', selected_credential=SAVED)
        assert password_source(options) == 'custom'

    def test_custom_without_typed_password(self):
        options = LaunchOptions(use_custom_credentials=True, selected_credential=SAVED)
        assert password_source(options) is None

    def test_saved(self):
        assert password_source(LaunchOptions(selected_credential=SAVED)) == 'saved'

    def test_nothing(self):
        assert password_source(LaunchOptions()) is None


@pytest.mark.django_db
class TestTargetFromEntity:

    def test_server_uses_own_address(self, server):
        target = ConnectionTarget.from_entity(server)
        assert target.address == '192.168.1.10'
        assert target.target_type == 'vmware_server'

    def test_application_connects_through_appliance(self, apache):
        assert ConnectionTarget.from_entity(apache).address == '10.0.1.100'

    def test_container_and_url_connect_through_appliance(self, container, app_url):
        assert ConnectionTarget.from_entity(container).address == '10.0.1.100'
        assert ConnectionTarget.from_entity(app_url).address == '10.0.1.100'

    def test_appliance_without_ip_uses_hostname(self, appliance):
        appliance.ip_address = None
        assert ConnectionTarget.from_entity(appliance).address == 'web-prod-01'
