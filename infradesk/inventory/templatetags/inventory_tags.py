"""
Template tags for inventory app.
"""
from django import template
from django.urls import reverse

from infradesk.inventory.catalog import EntityKind

register = template.Library()

DETAIL_URLS = {
    EntityKind.VMWARE_SERVER: 'inventory:server_detail',
    EntityKind.VIRTUAL_APPLIANCE: 'inventory:appliance_detail',
    EntityKind.APPLICATION: 'inventory:application_detail',
    EntityKind.CONTAINER: 'inventory:container_detail',
    EntityKind.URL: 'inventory:url_detail',
}


@register.filter
def entity_url(entity):
    """Return the detail page URL of an inventory entity."""
    return reverse(DETAIL_URLS[entity.entity_kind], kwargs={'pk': entity.pk})


@register.filter
def column_value(entity, field_name):
    """Return a list column value, using choice labels where defined."""
    display = getattr(entity, f'get_{field_name}_display', None)
    value = display() if display else getattr(entity, field_name, '')
    return '' if value is None else value
