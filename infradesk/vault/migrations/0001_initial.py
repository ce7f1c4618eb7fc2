# Generated manually for version control
# InfraDesk - Vault Initial Migration

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import fernet_fields.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('inventory', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Credential',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('associated_type', models.CharField(choices=[('vmware_server', 'VMware Server'), ('virtual_appliance', 'Virtual Appliance'), ('application', 'Application'), ('container', 'Container'), ('url', 'URL')], max_length=20)),
                ('associated_id', models.PositiveIntegerField()),
                ('username', models.CharField(blank=True, default='', max_length=255)),
                ('password', fernet_fields.fields.EncryptedCharField(blank=True, default='', help_text='Login password (encrypted)', max_length=255)),
                ('note', models.TextField(blank=True, default='')),
                ('hidden_display', models.BooleanField(default=True, help_text='Mask the password until it is explicitly revealed')),
                ('port', models.PositiveIntegerField(default=22)),
                ('url', models.CharField(blank=True, default='', max_length=500, verbose_name='URL')),
                ('last_updated', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('protocol', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='credentials', to='inventory.protocol')),
            ],
            options={
                'verbose_name': 'Credential',
                'verbose_name_plural': 'Credentials',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['associated_type', 'associated_id'], name='credential_association_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Note',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('associated_type', models.CharField(choices=[('vmware_server', 'VMware Server'), ('virtual_appliance', 'Virtual Appliance'), ('application', 'Application'), ('container', 'Container'), ('url', 'URL')], max_length=20)),
                ('associated_id', models.PositiveIntegerField()),
                ('severity', models.CharField(choices=[('info', 'Info'), ('notice', 'Notice'), ('warning', 'Warning'), ('critical', 'Critical')], db_index=True, default='info', max_length=10)),
                ('note', models.TextField()),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Note',
                'verbose_name_plural': 'Notes',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['associated_type', 'associated_id'], name='note_association_idx'),
                ],
            },
        ),
    ]
