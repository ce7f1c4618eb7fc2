"""
Activities Admin

The audit log is read-only: entries are written by the application and
browsed at /logs/.
"""

from django.contrib import admin

from .models import SystemLog


@admin.register(SystemLog)
class SystemLogAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'category', 'level', 'message', 'user', 'ip_address']
    list_filter = ['category', 'level']
    search_fields = ['message', 'source']
    readonly_fields = [field.name for field in SystemLog._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
