from django.apps import AppConfig


class VaultConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'infradesk.vault'
    verbose_name = 'Credentials & Notes'
