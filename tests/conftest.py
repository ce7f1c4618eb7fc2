from decimal import Decimal

import pytest

from infradesk.accounts.models import User
from infradesk.inventory.models import VMwareServer, VirtualAppliance, Application, Container, AppUrl


@pytest.fixture
def admin_user(db):
    return User.objects.create_user('alice', 'pass', role=User.Role.ADMIN)


@pytest.fixture
def technician(db):
    return User.objects.create_user('tom', 'pass', role=User.Role.TECHNICIAN)


@pytest.fixture
def viewer(db):
    return User.objects.create_user('vera', 'pass', role=User.Role.VIEWER)


@pytest.fixture
def auditor(db):
    return User.objects.create_user('audrey', 'pass', role=User.Role.AUDITOR)


@pytest.fixture
def server(db):
    return VMwareServer.objects.create(
        hostname='esxi-prod-01',
        ip_address='192.168.1.10',
        location='Datacenter A - Rack 12',
        total_cpu_cores=32,
        total_ram_gb=256,
        total_storage_tb=Decimal('2.00'),
    )


@pytest.fixture
def dev_server(db):
    return VMwareServer.objects.create(
        hostname='esxi-dev-01',
        ip_address='192.168.1.11',
        location='Datacenter A - Rack 13',
        total_cpu_cores=24,
        total_ram_gb=128,
        total_storage_tb=Decimal('1.50'),
    )


@pytest.fixture
def appliance(server):
    return VirtualAppliance.objects.create(
        vmware_server=server,
        hostname='web-prod-01',
        ip_address='10.0.1.100',
        fqdn='web-prod-01.company.com',
    )


@pytest.fixture
def db_appliance(server):
    return VirtualAppliance.objects.create(
        vmware_server=server,
        hostname='db-prod-01',
        ip_address='10.0.1.101',
        fqdn='db-prod-01.company.com',
    )


@pytest.fixture
def apache(appliance):
    return Application.objects.create(
        virtual_appliance=appliance,
        name='Apache Web Server',
        type='Web Server',
        description='Main web server for company website',
    )


@pytest.fixture
def mysql(db_appliance):
    return Application.objects.create(
        virtual_appliance=db_appliance,
        name='MySQL Database',
        type='Database',
        description='Primary database server',
    )


@pytest.fixture
def container(appliance):
    return Container.objects.create(virtual_appliance=appliance, name='redis-cache', image='redis:7')


@pytest.fixture
def app_url(apache):
    return AppUrl.objects.create(application=apache, url='https://www.company.com', description='Public site')


@pytest.fixture
def editor_client(client, admin_user):
    client.force_login(admin_user)
    return client


@pytest.fixture
def viewer_client(client, viewer):
    client.force_login(viewer)
    return client
