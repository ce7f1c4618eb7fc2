"""
InfraDesk - Test Settings
In-memory SQLite, fast password hashing, no brute force lockouts.
"""

from .base import *

DEBUG = False

if 'debug_toolbar' in INSTALLED_APPS:
    INSTALLED_APPS.remove('debug_toolbar')
if 'debug_toolbar.middleware.DebugToolbarMiddleware' in MIDDLEWARE:
    MIDDLEWARE.remove('debug_toolbar.middleware.DebugToolbarMiddleware')

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

AXES_ENABLED = False

FERNET_KEYS = ['test-only-fernet-key']

LOGGING['loggers']['infradesk']['level'] = 'WARNING'
