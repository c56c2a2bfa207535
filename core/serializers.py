"""
Small helpers for turning model instances into JSON-ready dicts.
"""


def relation(obj, name_attr='name', **extra):
    """One level of a related record: {'id', 'name', ...} or None."""
    if obj is None:
        return None
    data = {'id': obj.pk, 'name': getattr(obj, name_attr)}
    for key, attr in extra.items():
        data[key] = getattr(obj, attr)
    return data


def iso(value):
    return value.isoformat() if value else None


def hhmm(value):
    return value.strftime('%H:%M') if value else None


def number(value):
    """Decimals travel as JSON numbers."""
    return float(value) if value is not None else None
