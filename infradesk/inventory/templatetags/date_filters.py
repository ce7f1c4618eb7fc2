"""
Timestamp filters shared by every page.

Credential updates, note timelines and the audit log all render through
these, so the UI shows one "d-M-Y" format. Registered as a template builtin:

    {{ credential.last_updated|infra_datetime }}   -> "16-Feb-2026 14:30:45"
    {{ note.created_at|infra_datetime_short }}     -> "16-Feb-2026 14:30"
    {{ note.created_at|infra_relative }}           -> "2 hours ago"
"""

from datetime import timedelta

from django import template
from django.utils import timezone
from django.utils.dateformat import format as django_format
from django.utils.timesince import timesince

register = template.Library()

FULL = 'd-M-Y H:i:s'
SHORT = 'd-M-Y H:i'


def _format(value, fmt):
    if value is None:
        return ''
    try:
        return django_format(value, fmt)
    except (ValueError, TypeError, AttributeError):
        return str(value)


@register.filter
def infra_datetime(value):
    return _format(value, FULL)


@register.filter
def infra_datetime_short(value):
    return _format(value, SHORT)


@register.filter
def infra_relative(value, recent_days=7):
    """"2 hours ago" inside the recent window, the short datetime after it."""
    if value is None:
        return ''
    try:
        if timezone.is_naive(value):
            value = timezone.make_aware(value)
        now = timezone.now()
        if now - value < timedelta(days=int(recent_days)):
            # Largest unit only
            return timesince(value, now).split(',')[0] + ' ago'
    except (ValueError, TypeError, AttributeError):
        return str(value)
    return _format(value, SHORT)
