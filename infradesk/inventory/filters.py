"""
Search filters for the inventory lists.

Each list takes a single ``q`` parameter matched case-insensitively as a
substring against the searchable fields of its kind; a row matches when any
field does. An empty term matches everything.
"""

from functools import reduce
import operator

import django_filters
from django.db.models import Q

from .models import VMwareServer, VirtualAppliance, Application, Container, AppUrl


class SearchFilterSet(django_filters.FilterSet):
    """FilterSet with one OR-across-fields search box."""

    search_fields = ()

    q = django_filters.CharFilter(method='filter_search', label='Search')

    def filter_search(self, queryset, name, value):
        term = (value or '').strip()
        if not term:
            return queryset
        query = reduce(operator.or_, (Q(**{f'{field}__icontains': term}) for field in self.search_fields))
        return queryset.filter(query)


class VMwareServerFilter(SearchFilterSet):
    search_fields = ('hostname', 'ip_address', 'location')

    class Meta:
        model = VMwareServer
        fields = ['datacenter']


class VirtualApplianceFilter(SearchFilterSet):
    search_fields = ('hostname', 'ip_address', 'fqdn')

    class Meta:
        model = VirtualAppliance
        fields = ['vmware_server']


class ApplicationFilter(SearchFilterSet):
    search_fields = ('name', 'type', 'description')

    class Meta:
        model = Application
        fields = ['virtual_appliance']


class ContainerFilter(SearchFilterSet):
    search_fields = ('name', 'image', 'runtime')

    class Meta:
        model = Container
        fields = ['runtime', 'virtual_appliance']


class AppUrlFilter(SearchFilterSet):
    search_fields = ('url', 'description')

    class Meta:
        model = AppUrl
        fields = ['application', 'is_active']


FILTERS = {
    'vmware_server': VMwareServerFilter,
    'virtual_appliance': VirtualApplianceFilter,
    'application': ApplicationFilter,
    'container': ContainerFilter,
    'url': AppUrlFilter,
}


def search(kind, term, queryset=None):
    """Filter one entity kind by a search term. Used by the dashboard tabs."""
    filterset_class = FILTERS[kind]
    if queryset is None:
        queryset = filterset_class._meta.model.objects.all()
    return filterset_class({'q': term}, queryset=queryset).qs
