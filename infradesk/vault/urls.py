from django.urls import path
from . import views
from . import api

app_name = 'vault'

urlpatterns = [
    # Managers
    path('<str:kind>/<int:entity_id>/credentials/', views.CredentialManagerView.as_view(), name='credentials'),
    path('<str:kind>/<int:entity_id>/notes/', views.NotesManagerView.as_view(), name='notes'),
    path('<str:kind>/<int:entity_id>/connect/', views.ConnectionLauncherView.as_view(), name='connect'),

    # JSON API
    path('api/<str:kind>/<int:entity_id>/credentials/', api.CredentialListAPIView.as_view(), name='credentials_api'),
    path('api/<str:kind>/<int:entity_id>/credentials/<int:pk>/secret/', api.CredentialSecretAPIView.as_view(), name='credential_secret_api'),
    path('api/<str:kind>/<int:entity_id>/notes/', api.NoteListAPIView.as_view(), name='notes_api'),
    path('api/<str:kind>/<int:entity_id>/connect/', api.ConnectAPIView.as_view(), name='connect_api'),
]
