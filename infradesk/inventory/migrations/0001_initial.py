# Generated manually for version control
# InfraDesk - Inventory Initial Migration

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Protocol',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Protocol name (e.g., "SSH", "HTTPS")', max_length=50, unique=True)),
                ('default_port', models.PositiveIntegerField(blank=True, null=True)),
                ('transport', models.CharField(choices=[('TCP', 'TCP'), ('UDP', 'UDP'), ('BOTH', 'TCP & UDP')], default='TCP', max_length=4)),
                ('description', models.TextField(blank=True)),
            ],
            options={
                'verbose_name': 'Protocol',
                'verbose_name_plural': 'Protocols',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='VMwareServer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('hostname', models.CharField(blank=True, max_length=255)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('location', models.CharField(blank=True, max_length=200)),
                ('datacenter', models.CharField(blank=True, max_length=100)),
                ('rack_position', models.CharField(blank=True, max_length=50)),
                ('vendor', models.CharField(blank=True, max_length=100)),
                ('model', models.CharField(blank=True, max_length=100)),
                ('serial_number', models.CharField(blank=True, max_length=100)),
                ('asset_tag', models.CharField(blank=True, max_length=100)),
                ('purchase_date', models.DateField(blank=True, null=True)),
                ('warranty_expiry', models.DateField(blank=True, null=True)),
                ('total_cpu_cores', models.PositiveIntegerField(blank=True, null=True)),
                ('total_ram_gb', models.PositiveIntegerField(blank=True, null=True)),
                ('total_storage_tb', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('cpu_model', models.CharField(blank=True, max_length=100)),
                ('power_draw_watts', models.PositiveIntegerField(blank=True, null=True)),
                ('ilo_address', models.GenericIPAddressField(blank=True, help_text='Out-of-band management (iLO/iDRAC) address', null=True)),
                ('esxi_version', models.CharField(blank=True, max_length=50)),
                ('bios_version', models.CharField(blank=True, max_length=50)),
                ('network_zone', models.CharField(blank=True, max_length=100)),
                ('management_vlan', models.CharField(blank=True, max_length=50)),
                ('last_audit', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'VMware Server',
                'verbose_name_plural': 'VMware Servers',
                'ordering': ['hostname'],
            },
        ),
        migrations.CreateModel(
            name='VirtualAppliance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('hostname', models.CharField(blank=True, max_length=255)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('fqdn', models.CharField(blank=True, max_length=255, verbose_name='FQDN')),
                ('operating_system', models.CharField(blank=True, max_length=100)),
                ('os_version', models.CharField(blank=True, max_length=50)),
                ('cpu_allocated', models.PositiveIntegerField(blank=True, help_text='vCPUs', null=True)),
                ('ram_allocated', models.PositiveIntegerField(blank=True, help_text='RAM in GB', null=True)),
                ('disk_allocated_gb', models.PositiveIntegerField(blank=True, null=True)),
                ('mac_address', models.CharField(blank=True, max_length=17)),
                ('vmware_server', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='virtual_appliances', to='inventory.vmwareserver')),
            ],
            options={
                'verbose_name': 'Virtual Appliance',
                'verbose_name_plural': 'Virtual Appliances',
                'ordering': ['hostname'],
            },
        ),
        migrations.CreateModel(
            name='Application',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('type', models.CharField(blank=True, help_text='e.g., "Web Server", "Database"', max_length=100)),
                ('version', models.CharField(blank=True, max_length=50)),
                ('default_ports', models.CharField(blank=True, help_text='Comma separated, e.g., "80,443"', max_length=100)),
                ('dependent_services', models.CharField(blank=True, max_length=255)),
                ('last_updated', models.DateField(blank=True, null=True)),
                ('virtual_appliance', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='inventory.virtualappliance')),
            ],
            options={
                'verbose_name': 'Application',
                'verbose_name_plural': 'Applications',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='AppUrl',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('url', models.CharField(max_length=500, verbose_name='URL')),
                ('port', models.PositiveIntegerField(blank=True, null=True)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('application', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='urls', to='inventory.application')),
                ('protocol', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='app_urls', to='inventory.protocol')),
            ],
            options={
                'verbose_name': 'Application URL',
                'verbose_name_plural': 'Application URLs',
                'ordering': ['url'],
            },
        ),
        migrations.CreateModel(
            name='Container',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('image', models.CharField(blank=True, max_length=255)),
                ('version', models.CharField(blank=True, max_length=100)),
                ('runtime', models.CharField(choices=[('docker', 'Docker'), ('podman', 'Podman')], default='docker', max_length=10)),
                ('ports', models.CharField(blank=True, help_text='Port mappings, e.g., "8080:80"', max_length=255)),
                ('volumes', models.TextField(blank=True)),
                ('environment_variables', models.TextField(blank=True)),
                ('virtual_appliance', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='containers', to='inventory.virtualappliance')),
            ],
            options={
                'verbose_name': 'Container',
                'verbose_name_plural': 'Containers',
                'ordering': ['name'],
            },
        ),
    ]
