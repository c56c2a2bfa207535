"""
Create / edit dialog state for one record type.

The draft is checked and converted by a pydantic model built from the
dialog's field lists; an invalid draft raises ``pydantic.ValidationError``.
"""
import re
from typing import Annotated, Any, Union

from pydantic import BeforeValidator, ConfigDict, TypeAdapter, ValidationError, create_model
from pydantic_core import PydanticCustomError

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')

_NUMBER = TypeAdapter(Union[int, float])


def humanize(field):
    """'startTime' -> 'Start time'"""
    words = _CAMEL_BOUNDARY.sub(r' \1', field).lower()
    if words.endswith(' id'):
        words = words[:-3]
    return words.capitalize()


def is_blank(value):
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def coerce_number(value):
    """Numeric-looking strings become numbers; anything else is returned unchanged."""
    if not isinstance(value, str):
        return value
    try:
        return _NUMBER.validate_python(value.strip())
    except ValidationError:
        return value


class FormDialog:
    """
    A form draft opened either for a new record (defaults) or for an existing
    one (seeded from the record). The record's identifier is held apart from
    the draft and cannot be edited.
    """

    def __init__(self, defaults, id_field='id', required=(), numeric_fields=(),
                 nullable_fields=(), labels=None, seed=None):
        self.defaults = dict(defaults)
        self.id_field = id_field
        self.required = tuple(required)
        self.numeric_fields = frozenset(numeric_fields)
        self.nullable_fields = frozenset(nullable_fields)
        self.labels = dict(labels or {})
        self.seed = seed

        self.mode = None
        self.record_id = None
        self.draft = dict(self.defaults)

    @property
    def is_open(self):
        return self.mode is not None

    @property
    def editing(self):
        return self.mode == 'edit'

    def open_create(self):
        self.mode = 'create'
        self.record_id = None
        self.draft = dict(self.defaults)

    def open_edit(self, record):
        values = dict(record)
        if self.seed:
            values.update(self.seed(record))

        self.mode = 'edit'
        self.record_id = record.get(self.id_field)
        self.draft = {}
        for field, default in self.defaults.items():
            value = values.get(field, default)
            # Inputs hold text; a null from the server shows as empty
            self.draft[field] = '' if value is None else value

    def set(self, field, value):
        if field == self.id_field:
            raise ValueError(f"{self.id_field} cannot be changed")
        self.draft[field] = value

    def update(self, **values):
        for field, value in values.items():
            self.set(field, value)

    def label(self, field):
        return self.labels.get(field) or humanize(field)

    def _cleaner(self, field):
        def clean(value):
            if field in self.required and is_blank(value):
                raise PydanticCustomError('required', '{label} is required', {'label': self.label(field)})
            if field in self.nullable_fields and is_blank(value):
                return None
            if field in self.numeric_fields:
                return coerce_number(value)
            return value
        return clean

    def draft_model(self):
        """pydantic model of the draft; required fields are checked first."""
        names = list(self.required) + [name for name in self.defaults if name not in self.required]
        fields = {
            name: (Annotated[Any, BeforeValidator(self._cleaner(name))], self.defaults.get(name))
            for name in names
            if name != self.id_field
        }
        return create_model(
            'Draft',
            __config__=ConfigDict(extra='allow', validate_default=True),
            **fields,
        )

    def validate(self):
        """First problem with the draft, or None."""
        try:
            self.payload()
        except ValidationError as e:
            return e.errors()[0]['msg']
        return None

    def payload(self):
        """
        Request body for the draft.

        Raises:
            pydantic.ValidationError when a required field is blank
        """
        draft = {name: value for name, value in self.draft.items() if name != self.id_field}
        body = self.draft_model().model_validate(draft).model_dump()
        # Field order follows the draft
        return {name: body[name] for name in draft if name in body}

    def close(self):
        self.mode = None
        self.record_id = None
        self.draft = dict(self.defaults)
