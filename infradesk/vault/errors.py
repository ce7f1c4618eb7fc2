"""
Vault error taxonomy.

Stores raise these; manager views turn them into inline notifications and
the JSON API maps them onto HTTP status codes.
"""


class VaultError(Exception):
    """Base class for credential/note store and manager errors."""

    status_code = 400

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class ValidationError(VaultError):
    """A required field is missing or a value is malformed."""

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = {'__all__': errors}
        message = '; '.join(f'{field}: {text}' if field != '__all__' else text
                            for field, text in errors.items())
        super().__init__(message, errors)


class NotFoundError(VaultError):
    """The record id does not exist within the requested association."""

    status_code = 404


class InvalidTransition(VaultError):
    """A manager action is not allowed from the current form state."""

    status_code = 409
