from django.views.generic import ListView, DetailView
from django.contrib.auth.mixins import LoginRequiredMixin

from infradesk.vault.store import CredentialStore, NoteStore
from .catalog import EntityKind
from .filters import (
    VMwareServerFilter, VirtualApplianceFilter, ApplicationFilter,
    ContainerFilter, AppUrlFilter,
)
from .models import VMwareServer, VirtualAppliance, Application, Container, AppUrl


# ============== List Views ==============

class EntityListView(LoginRequiredMixin, ListView):
    """
    Searchable list of one entity kind.

    Rows link to the credential manager, notes manager and connection
    launcher scoped to the row's (kind, id).
    """

    filterset_class = None
    kind = None
    template_name = 'inventory/entity_list.html'
    context_object_name = 'entities'
    paginate_by = 25
    columns = ()

    def get_queryset(self):
        self.filterset = self.filterset_class(
            self.request.GET,
            queryset=super().get_queryset(),
            request=self.request
        )
        return self.filterset.qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['filter'] = self.filterset
        context['search'] = self.request.GET.get('q', '').strip()
        context['kind'] = self.kind.value
        context['kind_label'] = self.model._meta.verbose_name_plural
        context['columns'] = self.columns
        context['total_count'] = self.model.objects.count()
        return context


class VMwareServerListView(EntityListView):
    model = VMwareServer
    filterset_class = VMwareServerFilter
    kind = EntityKind.VMWARE_SERVER
    columns = (
        ('hostname', 'Hostname'),
        ('ip_address', 'IP Address'),
        ('location', 'Location'),
        ('esxi_version', 'ESXi'),
        ('total_cpu_cores', 'Cores'),
        ('total_ram_gb', 'RAM (GB)'),
    )


class VirtualApplianceListView(EntityListView):
    model = VirtualAppliance
    filterset_class = VirtualApplianceFilter
    kind = EntityKind.VIRTUAL_APPLIANCE
    columns = (
        ('hostname', 'Hostname'),
        ('ip_address', 'IP Address'),
        ('fqdn', 'FQDN'),
        ('operating_system', 'OS'),
        ('vmware_server', 'Host'),
    )

    def get_queryset(self):
        return super().get_queryset().select_related('vmware_server')


class ApplicationListView(EntityListView):
    model = Application
    filterset_class = ApplicationFilter
    kind = EntityKind.APPLICATION
    columns = (
        ('name', 'Name'),
        ('type', 'Type'),
        ('version', 'Version'),
        ('default_ports', 'Ports'),
        ('virtual_appliance', 'Appliance'),
    )

    def get_queryset(self):
        return super().get_queryset().select_related('virtual_appliance')


class ContainerListView(EntityListView):
    model = Container
    filterset_class = ContainerFilter
    kind = EntityKind.CONTAINER
    columns = (
        ('name', 'Name'),
        ('image', 'Image'),
        ('version', 'Version'),
        ('runtime', 'Runtime'),
        ('virtual_appliance', 'Appliance'),
    )

    def get_queryset(self):
        return super().get_queryset().select_related('virtual_appliance')


class AppUrlListView(EntityListView):
    model = AppUrl
    filterset_class = AppUrlFilter
    kind = EntityKind.URL
    columns = (
        ('url', 'URL'),
        ('port', 'Port'),
        ('protocol', 'Protocol'),
        ('description', 'Description'),
        ('application', 'Application'),
    )

    def get_queryset(self):
        return super().get_queryset().select_related('application', 'protocol')


# ============== Detail Views ==============

class EntityDetailView(LoginRequiredMixin, DetailView):
    """Entity fields with its credentials and notes."""

    template_name = 'inventory/entity_detail.html'
    context_object_name = 'entity'
    children = ()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        association = self.object.association
        context['kind'] = association.kind.value
        context['fields'] = [
            (field.verbose_name, getattr(self.object, field.name))
            for field in self.model._meta.concrete_fields
            if field.name != 'id'
        ]
        context['children'] = [
            (label, getattr(self.object, related).all(), kind)
            for label, related, kind in self.children
        ]
        context['credential_count'] = CredentialStore().list(association).count()
        context['notes'] = NoteStore().list(association)[:5]
        return context


class VMwareServerDetailView(EntityDetailView):
    model = VMwareServer
    children = (('Virtual Appliances', 'virtual_appliances', EntityKind.VIRTUAL_APPLIANCE),)


class VirtualApplianceDetailView(EntityDetailView):
    model = VirtualAppliance
    children = (
        ('Applications', 'applications', EntityKind.APPLICATION),
        ('Containers', 'containers', EntityKind.CONTAINER),
    )


class ApplicationDetailView(EntityDetailView):
    model = Application
    children = (('URLs', 'urls', EntityKind.URL),)


class ContainerDetailView(EntityDetailView):
    model = Container


class AppUrlDetailView(EntityDetailView):
    model = AppUrl


LIST_VIEWS = {
    EntityKind.VMWARE_SERVER: VMwareServerListView,
    EntityKind.VIRTUAL_APPLIANCE: VirtualApplianceListView,
    EntityKind.APPLICATION: ApplicationListView,
    EntityKind.CONTAINER: ContainerListView,
    EntityKind.URL: AppUrlListView,
}
