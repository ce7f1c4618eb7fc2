"""
Template filters for the system log viewer.
"""
from django import template

register = template.Library()


@register.filter
def underscore_to_space(value):
    """Convert underscores to spaces."""
    if not value:
        return value
    return str(value).replace('_', ' ')


@register.filter
def log_level_class(level):
    """Return Bootstrap class for log level."""
    level_map = {
        'debug': 'bg-secondary',
        'info': 'bg-info',
        'warning': 'bg-warning text-dark',
        'error': 'bg-danger',
        'critical': 'bg-dark',
        'success': 'bg-success',
    }
    return level_map.get(str(level).lower(), 'bg-secondary')


@register.filter
def log_level_icon(level):
    """Return Bootstrap icon for log level."""
    icon_map = {
        'debug': 'bi-bug',
        'info': 'bi-info-circle',
        'warning': 'bi-exclamation-triangle',
        'error': 'bi-x-circle',
        'critical': 'bi-exclamation-octagon',
        'success': 'bi-check-circle',
    }
    return icon_map.get(str(level).lower(), 'bi-circle')


@register.filter
def log_category_icon(category):
    """Return Bootstrap icon for log category."""
    icon_map = {
        'credential': 'bi-key',
        'note': 'bi-journal-text',
        'connection': 'bi-terminal',
        'auth': 'bi-shield-lock',
        'system': 'bi-gear',
    }
    return icon_map.get(str(category).lower(), 'bi-circle')
