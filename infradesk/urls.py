"""
InfraDesk - URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings

from infradesk.views import DashboardView, LogsView

urlpatterns = [
    # Admin site
    path('admin/', admin.site.urls),

    # Dashboard (home)
    path('', DashboardView.as_view(), name='dashboard'),

    # Audit log
    path('logs/', LogsView.as_view(), name='logs'),

    # Apps
    path('accounts/', include('infradesk.accounts.urls')),
    path('inventory/', include('infradesk.inventory.urls')),
    path('vault/', include('infradesk.vault.urls')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Customize admin site
admin.site.site_header = 'InfraDesk'
admin.site.site_title = 'InfraDesk Admin'
admin.site.index_title = 'Infrastructure Inventory Administration'
