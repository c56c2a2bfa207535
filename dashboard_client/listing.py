"""
Table rows and figures computed from the loaded records.

Everything here works on the in-memory list only; nothing reaches the
network.
"""
from collections import Counter

from .filters import is_set

PLACEHOLDER = '-'
NO_CLASSES = 'No classes scheduled'
WEEK_DAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')


def lookup(record, path):
    """Value at a dotted path ('subject.name'), or None when any step is missing."""
    value = record
    for part in path.split('.'):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def full_name(relation):
    if not relation:
        return None
    name = f"{relation.get('firstName') or ''} {relation.get('lastName') or ''}".strip()
    return name or None


class Column:
    def __init__(self, key, label=None, value=None):
        self.key = key
        self.label = label or key
        self.value = value

    def render(self, record):
        value = self.value(record) if self.value else lookup(record, self.key)
        if value is None or value == '':
            return PLACEHOLDER
        return value


class ListView:
    """
    Columns plus the client-side narrowing of a page: free-text ``search``
    over ``search_fields`` and named choice predicates.
    """

    def __init__(self, columns, search_fields=(), predicates=None):
        self.columns = list(columns)
        self.search_fields = tuple(search_fields)
        self.predicates = dict(predicates or {})

    @property
    def headers(self):
        return [column.label for column in self.columns]

    def matches(self, record, search='', choices=None):
        if search and self.search_fields:
            needle = search.strip().lower()
            haystack = [lookup(record, field) for field in self.search_fields]
            if not any(needle in str(value).lower() for value in haystack if value is not None):
                return False
        for name, value in (choices or {}).items():
            if is_set(value) and not self.predicates[name](record, value):
                return False
        return True

    def visible(self, items, search='', choices=None):
        return [record for record in items if self.matches(record, search, choices)]

    def rows(self, items, search='', choices=None):
        return [
            [column.render(record) for column in self.columns]
            for record in self.visible(items, search, choices)
        ]


def count_where(items, predicate):
    return sum(1 for record in items if predicate(record))


def count_by(items, key):
    """Records per value of ``key``; a related record counts under its name."""
    counts = Counter()
    for record in items:
        value = lookup(record, key)
        if isinstance(value, dict):
            value = value.get('name', value.get('id'))
        counts[value] += 1
    return dict(counts)


def sum_of(items, key):
    total = 0
    for record in items:
        value = lookup(record, key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            total += value
    return total


def describe_period(entry):
    parts = [f"{entry.get('startTime') or PLACEHOLDER}-{entry.get('endTime') or PLACEHOLDER}"]
    parts.append(lookup(entry, 'subject.name') or PLACEHOLDER)
    teacher = full_name(entry.get('staff'))
    if teacher:
        parts.append(f"({teacher})")
    if entry.get('room'):
        parts.append(f"Room {entry['room']}")
    return ' '.join(parts)


def render_timetable(entries, days=WEEK_DAYS):
    """
    Weekly view: day -> list of lines, periods ordered by start time.
    Days without periods hold a single "No classes scheduled" line.
    """
    schedule = {}
    for day in days:
        periods = sorted(
            (entry for entry in entries if entry.get('day') == day),
            key=lambda entry: entry.get('startTime') or '',
        )
        schedule[day] = [describe_period(entry) for entry in periods] or [NO_CLASSES]
    return schedule
