"""
Connection launcher.

Derives the SSH command for a target entity from its address and either a
saved credential or ad-hoc values typed by the user. Nothing here opens a
connection: the command, the ssh:// launch URL and the password are handed
to the browser (terminal integration and clipboard live client side).
"""

from dataclasses import dataclass

from django.conf import settings


def default_port():
    return getattr(settings, 'DEFAULT_SSH_PORT', 22)


@dataclass(frozen=True)
class ConnectionTarget:
    """Address fields of the entity being connected to."""

    target_type: str
    entity_id: int = None
    name: str = ''
    ip_address: str = ''
    hostname: str = ''

    @classmethod
    def from_entity(cls, entity):
        # Applications, containers and URLs connect through their host appliance
        host = entity.connection_host
        return cls(
            target_type=entity.entity_kind.value,
            entity_id=entity.pk,
            name=str(entity),
            ip_address=getattr(host, 'ip_address', None) or '',
            hostname=getattr(host, 'hostname', None) or '',
        )

    @property
    def address(self):
        return self.ip_address or self.hostname or 'unknown'


@dataclass(frozen=True)
class LaunchOptions:
    """User choices on the launcher form."""

    use_custom_credentials: bool = False
    custom_username: str = ''
    custom_password: str = ''
    custom_port: int = None
    selected_credential: object = None

    @property
    def username(self):
        if self.use_custom_credentials:
            return self.custom_username or ''
        if self.selected_credential is not None:
            return self.selected_credential.username or ''
        return ''

    @property
    def port(self):
        """Port to connect to, or None when the command omits it."""
        if self.use_custom_credentials:
            return self.custom_port or default_port()
        if self.selected_credential is not None:
            return self.selected_credential.port or default_port()
        return None


def build_command(target, options):
    """
    Compose the SSH command line.

        ssh admin@10.0.1.100 -p 2222   saved or custom credential with a username
        ssh 10.0.1.100 -p 22           custom credentials without a username
        ssh 10.0.1.100                 nothing selected
    """
    address = target.address
    port = options.port
    if port is None:
        return f"ssh {address}"
    if options.username:
        return f"ssh {options.username}@{address} -p {port}"
    return f"ssh {address} -p {port}"


def build_launch_url(target, options):
    """ssh:// URL for handing the session to a local SSH client."""
    port = options.port or default_port()
    userinfo = f"{options.username}@" if options.username else ''
    return f"ssh://{userinfo}{target.address}:{port}"


def password_to_copy(options):
    """
    Raw secret for the clipboard: the custom password when custom credentials
    are in use, otherwise the selected credential's password. Never masked.
    """
    if options.use_custom_credentials:
        return options.custom_password or ''
    if options.selected_credential is not None:
        return options.selected_credential.password or ''
    return ''


def password_source(options):
    """
    Where the copy-password action reads from: 'custom' for the typed
    password, 'saved' for the selected credential, None when there is
    nothing to copy. Follows the same precedence as password_to_copy.
    """
    if options.use_custom_credentials:
        return 'custom' if password_to_copy(options) else None
    if options.selected_credential is not None:
        return 'saved'
    return None
