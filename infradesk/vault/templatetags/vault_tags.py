"""
Template filters for credential and note display.
"""
from django import template

from infradesk.vault.models import PASSWORD_MASK
from infradesk.vault.views import SEVERITY_STYLES

register = template.Library()


@register.filter
def severity_color(severity):
    """Return Bootstrap color name for a note severity."""
    style = SEVERITY_STYLES.get(str(severity).lower())
    return style['color'] if style else 'secondary'


@register.filter
def severity_icon(severity):
    """Return Bootstrap icon for a note severity."""
    style = SEVERITY_STYLES.get(str(severity).lower())
    return style['icon'] if style else 'bi-circle'


@register.filter
def password_display(credential, revealed=False):
    """Clear-text password when revealed, otherwise the fixed mask."""
    if revealed:
        return credential.password
    return PASSWORD_MASK if credential.password else ''
