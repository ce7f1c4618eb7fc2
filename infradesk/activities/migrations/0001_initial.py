# Generated manually for version control
# InfraDesk - Activities Initial Migration

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SystemLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category', models.CharField(choices=[('credential', 'Credential'), ('note', 'Note'), ('connection', 'Connection'), ('auth', 'Authentication'), ('system', 'System')], db_index=True, default='system', max_length=20)),
                ('level', models.CharField(choices=[('debug', 'Debug'), ('info', 'Info'), ('warning', 'Warning'), ('error', 'Error'), ('critical', 'Critical'), ('success', 'Success')], db_index=True, default='info', max_length=20)),
                ('message', models.TextField()),
                ('details', models.JSONField(blank=True, null=True)),
                ('associated_type', models.CharField(blank=True, default='', max_length=20)),
                ('associated_id', models.PositiveIntegerField(blank=True, null=True)),
                ('source', models.CharField(blank=True, default='', max_length=100)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='system_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'System Log',
                'verbose_name_plural': 'System Logs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['category', 'created_at'], name='syslog_category_created_idx'),
                    models.Index(fields=['level', 'created_at'], name='syslog_level_created_idx'),
                    models.Index(fields=['associated_type', 'associated_id'], name='syslog_association_idx'),
                ],
            },
        ),
    ]
