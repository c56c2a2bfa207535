"""
Filter values chosen on a page, with parent -> child dependencies
(e.g. class -> section).
"""

UNSET_VALUES = (None, '', 'all')


def is_set(value):
    return value not in UNSET_VALUES


def selectable_options(records, id_field='id'):
    """Records that can be offered in a dropdown: those with an identifier."""
    return [
        record for record in records
        if isinstance(record, dict) and record.get(id_field) not in (None, '')
    ]


class FilterState:
    """
    Named filter values.

    Setting a filter clears every filter that depends on it, directly or
    through another dependent, before listeners are told about the change.
    """

    def __init__(self, names, dependencies=None, initial=None):
        self.values = {name: '' for name in names}
        self.dependencies = {
            parent: tuple(children) for parent, children in (dependencies or {}).items()
        }
        for name, value in (initial or {}).items():
            self._check(name)
            self.values[name] = value
        self.listeners = []

    def _check(self, name):
        if name not in self.values:
            raise KeyError(f"Unknown filter: {name}")

    def get(self, name):
        self._check(name)
        return self.values[name]

    def subscribe(self, listener):
        """``listener(changed_names)`` runs after every effective change."""
        self.listeners.append(listener)

    def dependents(self, name):
        found = []
        pending = list(self.dependencies.get(name, ()))
        while pending:
            child = pending.pop(0)
            if child in found:
                continue
            found.append(child)
            pending.extend(self.dependencies.get(child, ()))
        return found

    def set(self, name, value):
        self._check(name)
        if value is None:
            value = ''
        if self.values[name] == value:
            return []

        self.values[name] = value
        changed = [name]
        for child in self.dependents(name):
            self.values[child] = ''
            changed.append(child)

        for listener in self.listeners:
            listener(changed)
        return changed

    def params(self):
        """Query parameters for the filters that are set."""
        return {name: value for name, value in self.values.items() if is_set(value)}

    def is_complete(self, required):
        return all(is_set(self.get(name)) for name in required)
