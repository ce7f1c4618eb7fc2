"""
Inventory Admin

Servers, appliances, applications, containers, URLs and protocols are
maintained here. Credentials and notes are managed from the inventory
pages at /vault/<kind>/<id>/credentials/ and /vault/<kind>/<id>/notes/.
"""

from django.contrib import admin

from .models import Protocol, VMwareServer, VirtualAppliance, Application, AppUrl, Container


@admin.register(Protocol)
class ProtocolAdmin(admin.ModelAdmin):
    list_display = ['name', 'default_port', 'transport']
    search_fields = ['name']


class VirtualApplianceInline(admin.TabularInline):
    model = VirtualAppliance
    fields = ['hostname', 'ip_address', 'operating_system']
    extra = 0


@admin.register(VMwareServer)
class VMwareServerAdmin(admin.ModelAdmin):
    list_display = ['hostname', 'ip_address', 'location', 'esxi_version', 'total_cpu_cores', 'total_ram_gb']
    list_filter = ['datacenter', 'vendor']
    search_fields = ['hostname', 'ip_address', 'location', 'serial_number', 'asset_tag']
    inlines = [VirtualApplianceInline]
    fieldsets = (
        (None, {'fields': ('hostname', 'ip_address', 'location', 'datacenter', 'rack_position')}),
        ('Hardware', {'fields': (
            'vendor', 'model', 'serial_number', 'asset_tag', 'purchase_date', 'warranty_expiry',
            'total_cpu_cores', 'total_ram_gb', 'total_storage_tb', 'cpu_model', 'power_draw_watts',
        )}),
        ('Management', {'fields': (
            'ilo_address', 'esxi_version', 'bios_version', 'network_zone', 'management_vlan', 'last_audit',
        )}),
    )


@admin.register(VirtualAppliance)
class VirtualApplianceAdmin(admin.ModelAdmin):
    list_display = ['hostname', 'ip_address', 'fqdn', 'operating_system', 'vmware_server']
    list_filter = ['vmware_server', 'operating_system']
    search_fields = ['hostname', 'ip_address', 'fqdn']


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'version', 'virtual_appliance']
    list_filter = ['type']
    search_fields = ['name', 'type', 'description']


@admin.register(AppUrl)
class AppUrlAdmin(admin.ModelAdmin):
    list_display = ['url', 'port', 'protocol', 'application', 'is_active']
    list_filter = ['is_active', 'protocol']
    search_fields = ['url', 'description']


@admin.register(Container)
class ContainerAdmin(admin.ModelAdmin):
    list_display = ['name', 'image', 'version', 'runtime', 'virtual_appliance']
    list_filter = ['runtime']
    search_fields = ['name', 'image']
