"""
Context processors for InfraDesk
"""

from django.conf import settings


def app_context(request):
    """Add common context variables to all templates."""
    user = getattr(request, 'user', None)
    authenticated = bool(user and user.is_authenticated)
    return {
        'app_name': 'InfraDesk',
        'app_version': '1.0.0',
        'debug_mode': settings.DEBUG,
        'user_can_edit': authenticated and user.can_edit_credentials(),
        'user_can_view_logs': authenticated and user.can_view_logs(),
    }
