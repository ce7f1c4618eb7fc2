"""
Inventory models - VMware servers, virtual appliances, applications,
containers, application URLs and network protocols
"""

from django.db import models

from .catalog import Association, EntityKind


class Protocol(models.Model):
    """
    Network protocol referenced by credentials and application URLs.
    """

    class Transport(models.TextChoices):
        TCP = 'TCP', 'TCP'
        UDP = 'UDP', 'UDP'
        BOTH = 'BOTH', 'TCP & UDP'

    name = models.CharField(
        max_length=50,
        unique=True,
        help_text='Protocol name (e.g., "SSH", "HTTPS")'
    )
    default_port = models.PositiveIntegerField(null=True, blank=True)
    transport = models.CharField(
        max_length=4,
        choices=Transport.choices,
        default=Transport.TCP
    )
    description = models.TextField(blank=True)

    class Meta:
        verbose_name = 'Protocol'
        verbose_name_plural = 'Protocols'
        ordering = ['name']

    def __str__(self):
        if self.default_port:
            return f"{self.name} ({self.default_port}/{self.transport})"
        return self.name


class InventoryEntity(models.Model):
    """
    Base for every entity kind that credentials and notes attach to.
    """

    entity_kind = None

    class Meta:
        abstract = True

    @property
    def association(self):
        return Association(self.entity_kind, self.pk)

    @property
    def credentials(self):
        from infradesk.vault.store import CredentialStore
        return CredentialStore().list(self.association)

    @property
    def notes(self):
        from infradesk.vault.store import NoteStore
        return NoteStore().list(self.association)

    @property
    def connection_host(self):
        """Entity whose ip_address/hostname is used to connect to this one."""
        return self

    @property
    def display_name(self):
        return str(self)


class VMwareServer(InventoryEntity):
    """
    Physical ESXi host.
    """

    entity_kind = EntityKind.VMWARE_SERVER

    hostname = models.CharField(max_length=255, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    location = models.CharField(max_length=200, blank=True)
    datacenter = models.CharField(max_length=100, blank=True)
    rack_position = models.CharField(max_length=50, blank=True)

    # Hardware
    vendor = models.CharField(max_length=100, blank=True)
    model = models.CharField(max_length=100, blank=True)
    serial_number = models.CharField(max_length=100, blank=True)
    asset_tag = models.CharField(max_length=100, blank=True)
    purchase_date = models.DateField(null=True, blank=True)
    warranty_expiry = models.DateField(null=True, blank=True)
    total_cpu_cores = models.PositiveIntegerField(null=True, blank=True)
    total_ram_gb = models.PositiveIntegerField(null=True, blank=True)
    total_storage_tb = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    cpu_model = models.CharField(max_length=100, blank=True)
    power_draw_watts = models.PositiveIntegerField(null=True, blank=True)

    # Management
    ilo_address = models.GenericIPAddressField(
        null=True,
        blank=True,
        help_text='Out-of-band management (iLO/iDRAC) address'
    )
    esxi_version = models.CharField(max_length=50, blank=True)
    bios_version = models.CharField(max_length=50, blank=True)
    network_zone = models.CharField(max_length=100, blank=True)
    management_vlan = models.CharField(max_length=50, blank=True)
    last_audit = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'VMware Server'
        verbose_name_plural = 'VMware Servers'
        ordering = ['hostname']

    def __str__(self):
        return self.hostname or self.ip_address or f"Server {self.pk}"


class VirtualAppliance(InventoryEntity):
    """
    Virtual machine running on a VMware server.
    """

    entity_kind = EntityKind.VIRTUAL_APPLIANCE

    vmware_server = models.ForeignKey(
        VMwareServer,
        on_delete=models.CASCADE,
        related_name='virtual_appliances'
    )
    hostname = models.CharField(max_length=255, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    fqdn = models.CharField('FQDN', max_length=255, blank=True)
    operating_system = models.CharField(max_length=100, blank=True)
    os_version = models.CharField(max_length=50, blank=True)
    cpu_allocated = models.PositiveIntegerField(null=True, blank=True, help_text='vCPUs')
    ram_allocated = models.PositiveIntegerField(null=True, blank=True, help_text='RAM in GB')
    disk_allocated_gb = models.PositiveIntegerField(null=True, blank=True)
    mac_address = models.CharField(max_length=17, blank=True)

    class Meta:
        verbose_name = 'Virtual Appliance'
        verbose_name_plural = 'Virtual Appliances'
        ordering = ['hostname']

    def __str__(self):
        return self.hostname or self.fqdn or self.ip_address or f"Appliance {self.pk}"


class Application(InventoryEntity):
    """
    Application installed on a virtual appliance.
    """

    entity_kind = EntityKind.APPLICATION

    virtual_appliance = models.ForeignKey(
        VirtualAppliance,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=100, blank=True, help_text='e.g., "Web Server", "Database"')
    version = models.CharField(max_length=50, blank=True)
    default_ports = models.CharField(max_length=100, blank=True, help_text='Comma separated, e.g., "80,443"')
    dependent_services = models.CharField(max_length=255, blank=True)
    last_updated = models.DateField(null=True, blank=True)

    class Meta:
        verbose_name = 'Application'
        verbose_name_plural = 'Applications'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def connection_host(self):
        return self.virtual_appliance


class AppUrl(InventoryEntity):
    """
    URL endpoint exposed by an application.
    """

    entity_kind = EntityKind.URL

    application = models.ForeignKey(
        Application,
        on_delete=models.CASCADE,
        related_name='urls'
    )
    url = models.CharField('URL', max_length=500)
    port = models.PositiveIntegerField(null=True, blank=True)
    protocol = models.ForeignKey(
        Protocol,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='app_urls'
    )
    description = models.CharField(max_length=255, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        verbose_name = 'Application URL'
        verbose_name_plural = 'Application URLs'
        ordering = ['url']

    def __str__(self):
        return self.url

    @property
    def connection_host(self):
        return self.application.virtual_appliance


class Container(InventoryEntity):
    """
    Container running on a virtual appliance.
    """

    entity_kind = EntityKind.CONTAINER

    class Runtime(models.TextChoices):
        DOCKER = 'docker', 'Docker'
        PODMAN = 'podman', 'Podman'

    virtual_appliance = models.ForeignKey(
        VirtualAppliance,
        on_delete=models.CASCADE,
        related_name='containers'
    )
    name = models.CharField(max_length=200)
    image = models.CharField(max_length=255, blank=True)
    version = models.CharField(max_length=100, blank=True)
    runtime = models.CharField(
        max_length=10,
        choices=Runtime.choices,
        default=Runtime.DOCKER
    )
    ports = models.CharField(max_length=255, blank=True, help_text='Port mappings, e.g., "8080:80"')
    volumes = models.TextField(blank=True)
    environment_variables = models.TextField(blank=True)

    class Meta:
        verbose_name = 'Container'
        verbose_name_plural = 'Containers'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def connection_host(self):
        return self.virtual_appliance
