from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import TemplateView
from django.contrib.auth import logout
from django.contrib.auth import views as auth_views
from django.contrib.auth.mixins import UserPassesTestMixin

from .forms import LoginForm


def client_ip(request):
    """Return the client address, honouring a reverse proxy header."""
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    return forwarded.split(',')[0].strip() or request.META.get('REMOTE_ADDR')


class LogViewerRequiredMixin(UserPassesTestMixin):
    """Mixin that requires an admin or auditor."""

    def test_func(self):
        user = self.request.user
        return user.is_authenticated and user.can_view_logs()


class LoginView(auth_views.LoginView):
    """
    Login view with audit logging.

    Successful and failed attempts are written to the system log with the
    client IP address. Always redirects to the dashboard.
    """

    template_name = 'accounts/login.html'
    authentication_form = LoginForm
    redirect_authenticated_user = True

    def get_success_url(self):
        return reverse_lazy('dashboard')

    def form_valid(self, form):
        response = super().form_valid(form)
        from infradesk.activities.models import SystemLog
        SystemLog.auth_event(
            'success',
            f"User logged in: {self.request.user.username}",
            user=self.request.user,
            ip_address=client_ip(self.request),
            source='login',
        )
        return response

    def form_invalid(self, form):
        response = super().form_invalid(form)
        from infradesk.activities.models import SystemLog
        username = form.cleaned_data.get('username', 'unknown')
        SystemLog.auth_event(
            'warning',
            f"Failed login attempt for: {username}",
            ip_address=client_ip(self.request),
            source='login',
        )
        return response


class LogoutView(TemplateView):
    """
    GET shows a confirmation page, POST performs the logout.
    """

    template_name = 'accounts/logout_confirm.html'

    def get(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect('accounts:login')
        return super().get(request, *args, **kwargs)

    def post(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            from infradesk.activities.models import SystemLog
            SystemLog.auth_event(
                'info',
                f"User logged out: {request.user.username}",
                user=request.user,
                ip_address=client_ip(request),
                source='logout',
            )
        logout(request)
        return redirect('accounts:logged_out')


class LoggedOutView(TemplateView):
    template_name = 'accounts/logged_out.html'
