"""
InfraDesk - Dashboard and system log views
"""

from datetime import datetime

from django.views.generic import TemplateView
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import Q, Sum

from infradesk.accounts.views import LogViewerRequiredMixin


class DashboardView(LoginRequiredMixin, TemplateView):
    """
    Main dashboard: inventory counters and one tab per entity kind.

    The search box value (``q``) is passed down to every tab, so switching
    tabs keeps the filter.
    """

    template_name = 'dashboard.html'

    TABS = (
        ('vmware_server', 'VMware Servers', 'bi-hdd-rack'),
        ('virtual_appliance', 'Virtual Appliances', 'bi-pc-display'),
        ('application', 'Applications', 'bi-app-indicator'),
        ('container', 'Containers', 'bi-box-seam'),
    )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        from infradesk.inventory.filters import search
        from infradesk.inventory.views import LIST_VIEWS
        from infradesk.inventory.models import VMwareServer, VirtualAppliance, Application, Container
        from infradesk.vault.models import Note

        search_term = self.request.GET.get('q', '').strip()
        active_tab = self.request.GET.get('tab', 'vmware_server')
        if active_tab not in dict((key, label) for key, label, icon in self.TABS):
            active_tab = 'vmware_server'

        # Hardware totals come from the physical hosts only
        totals = VMwareServer.objects.aggregate(
            cpu_cores=Sum('total_cpu_cores'),
            ram_gb=Sum('total_ram_gb'),
            storage_tb=Sum('total_storage_tb'),
        )

        context['stats'] = {
            'servers': VMwareServer.objects.count(),
            'appliances': VirtualAppliance.objects.count(),
            'applications': Application.objects.count(),
            'containers': Container.objects.count(),
            'cpu_cores': totals['cpu_cores'] or 0,
            'ram_gb': totals['ram_gb'] or 0,
            'storage_tb': totals['storage_tb'] or 0,
            'critical_notes': Note.objects.filter(severity=Note.Severity.CRITICAL).count(),
            'warning_notes': Note.objects.filter(severity=Note.Severity.WARNING).count(),
        }

        tabs = []
        for key, label, icon in self.TABS:
            results = search(key, search_term)
            tabs.append({
                'key': key,
                'label': label,
                'icon': icon,
                'count': results.count(),
                'columns': LIST_VIEWS[key].columns,
                'entities': results if key == active_tab else None,
            })

        context['tabs'] = tabs
        context['active_tab'] = active_tab
        context['search'] = search_term

        # Latest critical and warning notes across the inventory
        context['attention_notes'] = Note.objects.filter(
            severity__in=[Note.Severity.CRITICAL, Note.Severity.WARNING]
        ).order_by('-created_at')[:5]

        return context


class LogsView(LoginRequiredMixin, LogViewerRequiredMixin, TemplateView):
    """
    Audit log viewer.
    Filters by category, level, free text and date range.
    """

    template_name = 'logs.html'

    LOG_CATEGORIES = {
        'all': {'name': 'All Logs', 'icon': 'bi-list-ul'},
        'credential': {'name': 'Credentials', 'icon': 'bi-key'},
        'note': {'name': 'Notes', 'icon': 'bi-journal-text'},
        'connection': {'name': 'Connections', 'icon': 'bi-terminal'},
        'auth': {'name': 'Authentication', 'icon': 'bi-shield-lock'},
        'system': {'name': 'System Events', 'icon': 'bi-gear'},
    }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        from infradesk.activities.models import SystemLog

        # Get filter parameters
        category = self.request.GET.get('category', 'all')
        level = self.request.GET.get('level', 'all')
        search = self.request.GET.get('search', '').strip()
        date_from = self.request.GET.get('date_from', '')
        date_to = self.request.GET.get('date_to', '')
        try:
            limit = max(1, min(int(self.request.GET.get('limit', 100)), 1000))
        except ValueError:
            limit = 100

        qs = SystemLog.objects.all()

        if category != 'all':
            qs = qs.filter(category=category)

        if level != 'all':
            qs = qs.filter(level=level)

        if search:
            qs = qs.filter(
                Q(message__icontains=search) |
                Q(source__icontains=search) |
                Q(user__username__icontains=search)
            )

        if date_from:
            try:
                qs = qs.filter(created_at__date__gte=datetime.strptime(date_from, '%Y-%m-%d').date())
            except ValueError:
                date_from = ''

        if date_to:
            try:
                qs = qs.filter(created_at__date__lte=datetime.strptime(date_to, '%Y-%m-%d').date())
            except ValueError:
                date_to = ''

        context['stats'] = {
            'total': qs.count(),
            'success': qs.filter(level='success').count(),
            'info': qs.filter(level='info').count(),
            'warning': qs.filter(level='warning').count(),
            'error': qs.filter(level__in=['error', 'critical']).count(),
        }

        context['categories'] = self.LOG_CATEGORIES
        context['levels'] = SystemLog.Level.choices
        context['current_category'] = category
        context['current_level'] = level
        context['current_search'] = search
        context['current_date_from'] = date_from
        context['current_date_to'] = date_to
        context['current_limit'] = limit
        context['logs'] = qs.select_related('user')[:limit]

        return context
