"""
Helpers shared by the API apps: JSON bodies, key casing, query values and
generated record codes.
"""
import json
import re

from django.utils.translation import gettext_lazy as _

from .errors import ValidationFailed


EMPTY_FILTER_VALUES = ('', 'all', None)

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def snake_case(name):
    """
    Convert a camelCase wire key to its snake_case field name.

    Examples:
        'startTime' -> 'start_time'
        'sectionIds' -> 'section_ids'
        'room' -> 'room'
    """
    return _CAMEL_BOUNDARY.sub(r'_\1', name).lower()


def parse_json_body(request):
    """Decode the request body; it must be a JSON object."""
    try:
        payload = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        raise ValidationFailed(_('Invalid JSON body'))
    if not isinstance(payload, dict):
        raise ValidationFailed(_('Invalid JSON body'))
    return payload


def filter_value(params, name):
    """Query parameter value, or None when absent, empty or 'all'."""
    value = params.get(name)
    if value is None:
        return None
    value = value.strip()
    if value.lower() in EMPTY_FILTER_VALUES:
        return None
    return value


def parse_bool(value):
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def next_sequence_code(latest_code, prefix, width=4):
    """
    Next code in a '<prefix><number>' series.

    The number restarts at 1 when the latest code belongs to another prefix
    (e.g. last year's admission numbers).

    Examples:
        ('20250007', '2025') -> '20250008'
        ('20240120', '2025') -> '20250001'
        (None, 'AMS-2025-') -> 'AMS-2025-0001'
    """
    next_number = 1
    if latest_code and latest_code.startswith(prefix):
        match = re.search(r'(\d+)$', latest_code[len(prefix):])
        if match:
            next_number = int(match.group(1)) + 1
    return f"{prefix}{next_number:0{width}d}"
