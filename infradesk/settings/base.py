"""
InfraDesk - Base Django Settings
Development configuration (SQLite, Debug=True)
"""

import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
# This is overridden in production settings
SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-dev-key-change-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]']

# Application definition
INSTALLED_APPS = [
    # Django built-in apps
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.humanize',

    # Third-party apps
    'crispy_forms',
    'crispy_bootstrap5',
    'django_filters',

    # InfraDesk apps
    'infradesk.accounts',
    'infradesk.inventory',
    'infradesk.vault',
    'infradesk.activities',

    # Security
    'axes',  # Brute force protection
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'axes.middleware.AxesMiddleware',  # Must be after AuthenticationMiddleware
]

# Authentication backends (axes must be first)
AUTHENTICATION_BACKENDS = [
    'axes.backends.AxesStandaloneBackend',
    'django.contrib.auth.backends.ModelBackend',
]

ROOT_URLCONF = 'infradesk.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'infradesk' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'infradesk.context_processors.app_context',
            ],
            # Auto-load date_filters in all templates for consistent date formatting
            'builtins': [
                'infradesk.inventory.templatetags.date_filters',
            ],
        },
    },
]

WSGI_APPLICATION = 'infradesk.wsgi.application'

# Database
# https://docs.djangoproject.com/en/5.0/ref/settings/#databases
# Development uses SQLite
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {
            'min_length': 8,
        }
    },
]

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Date and Time Formatting
# =============================================================================
# All dates displayed as: 16-Feb-2026
# All datetimes displayed as: 16-Feb-2026 14:30 or 16-Feb-2026 14:30:45
#
# Template usage: {{ note.created_at|infra_datetime }}
#
# Available filters:
#   infra_datetime       -> 16-Feb-2026 14:30:45
#   infra_datetime_short -> 16-Feb-2026 14:30
#   infra_relative       -> "2 hours ago" or fallback to date
# =============================================================================

DATE_FORMAT = 'd-M-Y'                    # 16-Feb-2026
DATETIME_FORMAT = 'd-M-Y H:i'            # 16-Feb-2026 14:30
SHORT_DATE_FORMAT = 'd-M-Y'              # 16-Feb-2026
SHORT_DATETIME_FORMAT = 'd-M-Y H:i'      # 16-Feb-2026 14:30
TIME_FORMAT = 'H:i:s'                    # 14:30:45

# Static files (CSS, JavaScript, Images)
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Authentication
LOGIN_URL = 'accounts:login'
LOGIN_REDIRECT_URL = 'dashboard'
LOGOUT_REDIRECT_URL = 'accounts:login'

# Custom user model
AUTH_USER_MODEL = 'accounts.User'

# Crispy Forms
CRISPY_ALLOWED_TEMPLATE_PACKS = 'bootstrap5'
CRISPY_TEMPLATE_PACK = 'bootstrap5'

# Bootstrap alert classes for django.contrib.messages
from django.contrib.messages import constants as message_constants

MESSAGE_TAGS = {
    message_constants.DEBUG: 'secondary',
    message_constants.ERROR: 'danger',
}

# =============================================================================
# Django-Axes: Brute Force Protection
# =============================================================================
from datetime import timedelta

AXES_FAILURE_LIMIT = 5  # Lock after 5 failed attempts
AXES_COOLOFF_TIME = timedelta(minutes=30)  # Lockout duration
AXES_LOCKOUT_PARAMETERS = ['username', 'ip_address']  # Track both
AXES_RESET_ON_SUCCESS = True  # Reset counter on successful login
AXES_ENABLE_ADMIN = True  # Show axes data in admin
AXES_VERBOSE = True  # Log lockouts

# Fernet encryption keys for credential passwords
# In production, this MUST be set via the FERNET_KEY environment variable
# WARNING: This is a DEV-ONLY key. Generate new key for production!
FERNET_KEYS = [
    os.environ.get('FERNET_KEY', 'Xq3c8m1ZbH0sV7nQyR2tL5kP9wA4eJ6uD8fG1hK3lM0='),
]

# Logging
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'infradesk': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'axes': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}

# Connection launcher defaults
DEFAULT_SSH_PORT = 22


# Session settings
SESSION_COOKIE_AGE = 3600  # 1 hour timeout for security
SESSION_COOKIE_SECURE = not DEBUG  # HTTPS only in production
SESSION_COOKIE_HTTPONLY = True  # Prevent JavaScript access to session cookie
SESSION_COOKIE_SAMESITE = 'Lax'  # CSRF protection
SESSION_SAVE_EVERY_REQUEST = True  # Extend session on activity

# CSRF settings
CSRF_COOKIE_SECURE = not DEBUG  # HTTPS only in production
CSRF_COOKIE_SAMESITE = 'Lax'

# Debug toolbar (development only)
if DEBUG:
    INSTALLED_APPS += ['debug_toolbar']
    MIDDLEWARE.insert(0, 'debug_toolbar.middleware.DebugToolbarMiddleware')
    INTERNAL_IPS = ['127.0.0.1', '::1']
