from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    # VMware Servers
    path('servers/', views.VMwareServerListView.as_view(), name='server_list'),
    path('servers/<int:pk>/', views.VMwareServerDetailView.as_view(), name='server_detail'),

    # Virtual Appliances
    path('appliances/', views.VirtualApplianceListView.as_view(), name='appliance_list'),
    path('appliances/<int:pk>/', views.VirtualApplianceDetailView.as_view(), name='appliance_detail'),

    # Applications
    path('applications/', views.ApplicationListView.as_view(), name='application_list'),
    path('applications/<int:pk>/', views.ApplicationDetailView.as_view(), name='application_detail'),

    # Containers
    path('containers/', views.ContainerListView.as_view(), name='container_list'),
    path('containers/<int:pk>/', views.ContainerDetailView.as_view(), name='container_detail'),

    # Application URLs
    path('urls/', views.AppUrlListView.as_view(), name='url_list'),
    path('urls/<int:pk>/', views.AppUrlDetailView.as_view(), name='url_detail'),
]
