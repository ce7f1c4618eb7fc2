"""
Management command to load the sample inventory.

Creates two ESXi hosts, two appliances, three applications and the common
protocols, then attaches demo credentials and notes through the vault
stores. Safe to run repeatedly: existing rows are left alone.
"""

from datetime import date, datetime
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone


PROTOCOLS = [
    {'name': 'SSH', 'default_port': 22, 'transport': 'TCP', 'description': 'Secure Shell'},
    {'name': 'HTTP', 'default_port': 80, 'transport': 'TCP', 'description': 'Hypertext Transfer Protocol'},
    {'name': 'HTTPS', 'default_port': 443, 'transport': 'TCP', 'description': 'HTTP over TLS'},
    {'name': 'RDP', 'default_port': 3389, 'transport': 'TCP', 'description': 'Remote Desktop Protocol'},
    {'name': 'MySQL', 'default_port': 3306, 'transport': 'TCP', 'description': 'MySQL client protocol'},
    {'name': 'SNMP', 'default_port': 161, 'transport': 'UDP', 'description': 'Simple Network Management Protocol'},
]

SERVERS = [
    {
        'hostname': 'esxi-prod-01',
        'ip_address': '192.168.1.10',
        'location': 'Datacenter A - Rack 12',
        'datacenter': 'Primary DC',
        'vendor': 'Dell',
        'model': 'PowerEdge R740',
        'serial_number': 'DL001234',
        'total_cpu_cores': 32,
        'total_ram_gb': 256,
        'total_storage_tb': Decimal('2.00'),
        'esxi_version': '7.0.3',
        'network_zone': 'Production',
    },
    {
        'hostname': 'esxi-dev-01',
        'ip_address': '192.168.1.11',
        'location': 'Datacenter A - Rack 13',
        'datacenter': 'Primary DC',
        'vendor': 'HPE',
        'model': 'ProLiant DL380',
        'serial_number': 'HP001234',
        'total_cpu_cores': 24,
        'total_ram_gb': 128,
        'total_storage_tb': Decimal('1.50'),
        'esxi_version': '7.0.2',
        'network_zone': 'Development',
    },
]

# (server hostname, fields)
APPLIANCES = [
    ('esxi-prod-01', {
        'hostname': 'web-prod-01',
        'ip_address': '10.0.1.100',
        'fqdn': 'web-prod-01.company.com',
        'operating_system': 'Ubuntu Server',
        'os_version': '22.04 LTS',
        'cpu_allocated': 4,
        'ram_allocated': 8,
        'disk_allocated_gb': 100,
        'mac_address': '00:50:56:a1:b2:c3',
    }),
    ('esxi-prod-01', {
        'hostname': 'db-prod-01',
        'ip_address': '10.0.1.101',
        'fqdn': 'db-prod-01.company.com',
        'operating_system': 'CentOS',
        'os_version': '8.5',
        'cpu_allocated': 8,
        'ram_allocated': 16,
        'disk_allocated_gb': 500,
        'mac_address': '00:50:56:a1:b2:c4',
    }),
]

# (appliance hostname, fields)
APPLICATIONS = [
    ('web-prod-01', {
        'name': 'Apache Web Server',
        'description': 'Main web server for company website',
        'type': 'Web Server',
        'version': '2.4.52',
        'default_ports': '80,443',
        'dependent_services': 'MySQL, PHP',
        'last_updated': date(2024, 1, 15),
    }),
    ('db-prod-01', {
        'name': 'MySQL Database',
        'description': 'Primary database server',
        'type': 'Database',
        'version': '8.0.28',
        'default_ports': '3306',
        'dependent_services': 'None',
        'last_updated': date(2024, 1, 10),
    }),
    ('web-prod-01', {
        'name': 'Nginx Reverse Proxy',
        'description': 'Load balancer and reverse proxy',
        'type': 'Proxy',
        'version': '1.22.1',
        'default_ports': '80,443',
        'dependent_services': 'Apache',
        'last_updated': date(2024, 1, 12),
    }),
]

DEMO_CREDENTIALS = [
    {'username': 'admin', 'password': 'SecurePassword123!', 'note': 'Primary admin account', 'port': 22},
    {'username': 'backup', 'password': 'BackupPass456!', 'note': 'Backup service account', 'port': 22},
]

DEMO_NOTES = [
    ('info', 'Server was migrated from old datacenter on 2024-01-15. All services verified working.',
     datetime(2024, 1, 15, 14, 30)),
    ('warning', 'CPU usage has been consistently high (>80%) during peak hours. '
                'Consider resource allocation review.',
     datetime(2024, 1, 20, 9, 15)),
    ('critical', 'RAID array showing degraded status. Replacement disk ordered - ticket #12345.',
     datetime(2024, 1, 22, 16, 45)),
]


class Command(BaseCommand):
    help = 'Load the sample inventory with demo credentials and notes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-vault',
            action='store_true',
            help='Skip demo credentials and notes',
        )
        parser.add_argument(
            '--quiet',
            action='store_true',
            help='Suppress individual row output',
        )

    def handle(self, *args, **options):
        from infradesk.inventory.models import Protocol, VMwareServer, VirtualAppliance, Application

        self.quiet = options['quiet']

        with transaction.atomic():
            for data in PROTOCOLS:
                protocol, created = Protocol.objects.get_or_create(
                    name=data['name'],
                    defaults=data,
                )
                self.report('Protocol', protocol, created)

            servers = {}
            for data in SERVERS:
                server, created = VMwareServer.objects.get_or_create(
                    hostname=data['hostname'],
                    defaults=data,
                )
                servers[server.hostname] = server
                self.report('Server', server, created)

            appliances = {}
            for server_name, data in APPLIANCES:
                appliance, created = VirtualAppliance.objects.get_or_create(
                    hostname=data['hostname'],
                    defaults=dict(data, vmware_server=servers[server_name]),
                )
                appliances[appliance.hostname] = appliance
                self.report('Appliance', appliance, created)

            for appliance_name, data in APPLICATIONS:
                application, created = Application.objects.get_or_create(
                    name=data['name'],
                    virtual_appliance=appliances[appliance_name],
                    defaults=data,
                )
                self.report('Application', application, created)

            if not options['no_vault']:
                self.seed_vault(list(servers.values()) + list(appliances.values()))

        self.stdout.write(
            self.style.SUCCESS(
                f"Inventory: {VMwareServer.objects.count()} servers, "
                f"{VirtualAppliance.objects.count()} appliances, "
                f"{Application.objects.count()} applications"
            )
        )

    def seed_vault(self, entities):
        from infradesk.vault.store import CredentialStore, NoteStore

        credentials = CredentialStore()
        notes = NoteStore()
        ssh = self.protocol('SSH')

        for entity in entities:
            association = entity.association
            if not credentials.list(association).exists():
                for data in DEMO_CREDENTIALS:
                    credentials.create(association, protocol=ssh, **data)
                self.report('Credentials', entity, True)

        # Notes only on the first production host
        association = entities[0].association
        if not notes.list(association).exists():
            for severity, text, created_at in DEMO_NOTES:
                note = notes.create(association, note=text, severity=severity)
                note.created_at = timezone.make_aware(created_at)
                note.save(update_fields=['created_at'])
            self.report('Notes', entities[0], True)

    def protocol(self, name):
        from infradesk.inventory.models import Protocol
        return Protocol.objects.filter(name=name).first()

    def report(self, label, obj, created):
        if self.quiet:
            return
        if created:
            self.stdout.write(f"  Created {label}: {obj}")
        else:
            self.stdout.write(f"  Exists {label}: {obj}")
