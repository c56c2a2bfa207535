"""
Decoding of the API envelope

    {"success": bool, "data": ..., "error": str, "message": str,
     "pagination": {"page", "limit", "total", "totalPages"}}

Every response body goes through ``Envelope``; a body that is not an
envelope raises ``pydantic.ValidationError``. Collections are read in one
place so callers always get a list back.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_ERROR = 'Operation failed'


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias='totalPages')


class Envelope(BaseModel):
    # Older routes put their records under a resource key ({"staff": [...]})
    model_config = ConfigDict(extra='allow')

    success: Optional[bool] = None
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    pagination: Any = None

    def records(self, key=None):
        candidates = [self.data]
        if key:
            candidates.append((self.model_extra or {}).get(key))
        for value in candidates:
            if isinstance(value, list):
                return value
        return []


def decode_envelope(body):
    """
    Validate a decoded JSON body as an envelope.

    A bare list is accepted as the records of an envelope.

    Raises:
        pydantic.ValidationError when the body has any other shape
    """
    if isinstance(body, list):
        body = {'data': body}
    return Envelope.model_validate(body)


def decode_collection(body, key=None):
    """
    The records carried by a response body.

    Accepts ``{"data": [...]}``, ``{"<key>": [...]}`` or a bare list; any
    other shape gives an empty list.
    """
    try:
        return decode_envelope(body).records(key)
    except ValidationError:
        return []


def decode_pagination(body):
    try:
        envelope = decode_envelope(body)
        if envelope.pagination is None:
            return None
        return Pagination.model_validate(envelope.pagination).model_dump(by_alias=True)
    except ValidationError:
        return None


def error_message(body, fallback=DEFAULT_ERROR):
    try:
        envelope = decode_envelope(body)
    except ValidationError:
        return fallback
    return envelope.error or envelope.message or fallback


def success_message(body, fallback):
    try:
        return decode_envelope(body).message or fallback
    except ValidationError:
        return fallback


def first_problem(error, fallback=DEFAULT_ERROR):
    """Message of the first failure in a ``pydantic.ValidationError``."""
    problems = error.errors()
    return problems[0]['msg'] if problems else fallback
