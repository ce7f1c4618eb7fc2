from io import StringIO

import pytest
from django.core.management import call_command

from infradesk.accounts.models import User
from infradesk.inventory.models import VMwareServer, VirtualAppliance, Application, Protocol
from infradesk.vault.models import Credential, Note

pytestmark = pytest.mark.django_db


def test_seed_inventory_is_idempotent():
    call_command('seed_inventory', '--quiet', stdout=StringIO())
    call_command('seed_inventory', '--quiet', stdout=StringIO())

    assert VMwareServer.objects.count() == 2
    assert VirtualAppliance.objects.count() == 2
    assert Application.objects.count() == 3
    assert Protocol.objects.filter(name='SSH').exists()
    # two demo accounts on each host and appliance
    assert Credential.objects.count() == 8
    assert Note.objects.count() == 3


def test_seed_inventory_without_vault():
    out = StringIO()
    call_command('seed_inventory', '--no-vault', stdout=out)
    assert Credential.objects.count() == 0
    assert 'Created Server: ' in out.getvalue()


def test_seeded_notes_newest_first():
    call_command('seed_inventory', '--quiet', stdout=StringIO())
    server = VMwareServer.objects.get(hostname='esxi-prod-01')
    severities = list(Note.objects.filter(
        associated_type='vmware_server', associated_id=server.pk
    ).order_by('-created_at').values_list('severity', flat=True))
    assert severities[-1] == 'info'


def test_create_default_admin():
    call_command('create_default_admin', stdout=StringIO())
    user = User.objects.get(username='admin')
    assert user.is_superuser
    assert user.check_password('changeme123')

    out = StringIO()
    call_command('create_default_admin', stdout=out)
    assert 'Users already exist' in out.getvalue()
