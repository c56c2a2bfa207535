import logging
from functools import wraps

from django.utils.translation import gettext_lazy as _

from .envelope import error_response
from .errors import ApiError, MethodNotAllowed

logger = logging.getLogger(__name__)

VERBS = {
    'GET': _('fetch'),
    'POST': _('create'),
    'PUT': _('update'),
    'DELETE': _('delete'),
}


def failure_message(method, noun):
    """Generic message reported for unexpected errors, e.g. 'Failed to fetch books'."""
    verb = VERBS.get(method, _('process'))
    return _('Failed to %(verb)s %(noun)s') % {'verb': verb, 'noun': noun}


def api_endpoint(methods, failure=None):
    """
    Decorator for JSON API views.

    Rejects methods not listed, reports ``ApiError`` with its own status and
    message, and reports anything else as a logged 500. ``failure`` maps the
    request method to the generic 500 message.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            try:
                if request.method not in methods:
                    raise MethodNotAllowed()
                return view_func(request, *args, **kwargs)
            except ApiError as exc:
                if exc.status >= 500:
                    logger.error('%s %s failed: %s', request.method, request.path, exc.message)
                return error_response(exc.message, status=exc.status)
            except Exception:
                logger.exception('%s %s failed', request.method, request.path)
                message = failure(request.method) if failure else _('Internal server error')
                return error_response(message, status=500)
        return wrapper
    return decorator
