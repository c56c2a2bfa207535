"""
Errors raised by API route handlers.

Each carries the HTTP status it is reported with; ``core.views.api_endpoint``
turns them into the error envelope.
"""
from django.utils.translation import gettext_lazy as _


class ApiError(Exception):
    status = 500
    default_message = _('Internal server error')

    def __init__(self, message=None, status=None):
        self.message = str(message if message is not None else self.default_message)
        if status is not None:
            self.status = status
        super().__init__(self.message)


class Unauthorized(ApiError):
    status = 401
    default_message = _('Unauthorized')


class ValidationFailed(ApiError):
    status = 400
    default_message = _('Invalid request')


class Conflict(ApiError):
    """Duplicate records and operations refused because of related data."""
    status = 400
    default_message = _('Conflict')


class NotFound(ApiError):
    status = 404
    default_message = _('Not found')


class MethodNotAllowed(ApiError):
    status = 405
    default_message = _('Method not allowed')
