"""
WSGI config for InfraDesk.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application
from django.core.exceptions import ImproperlyConfigured

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'infradesk.settings.production')

# Fallback key shipped in settings/base.py for local development
DEV_FERNET_KEY = 'Xq3c8m1ZbH0sV7nQyR2tL5kP9wA4eJ6uD8fG1hK3lM0='


def validate_production_keys():
    """
    Refuse to start with development keys when DEBUG is off.

    Every stored credential password is encrypted with FERNET_KEYS, so a
    published key exposes all of them.
    """
    from django.conf import settings

    if settings.DEBUG:
        return

    if 'insecure' in settings.SECRET_KEY.lower():
        raise ImproperlyConfigured(
            "\n" + "=" * 70 + "\n"
            "FATAL SECURITY ERROR: Using development SECRET_KEY in production!\n"
            "=" * 70 + "\n\n"
            "Generate a new key with:\n"
            "  python -c \"import secrets; print(secrets.token_urlsafe(50))\"\n\n"
            "Then set it in the environment:\n"
            "  SECRET_KEY=your-new-secure-key\n"
            + "=" * 70
        )

    if DEV_FERNET_KEY in getattr(settings, 'FERNET_KEYS', []):
        raise ImproperlyConfigured(
            "\n" + "=" * 70 + "\n"
            "FATAL SECURITY ERROR: Using development FERNET_KEY in production!\n"
            "=" * 70 + "\n\n"
            "All stored credentials can be decrypted by anyone with the source code!\n\n"
            "Generate a new key with:\n"
            "  python -c \"from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())\"\n\n"
            "Then set it in the environment:\n"
            "  FERNET_KEY=your-new-secure-key\n"
            + "=" * 70
        )


application = get_wsgi_application()

# Validate keys after Django is loaded
validate_production_keys()
