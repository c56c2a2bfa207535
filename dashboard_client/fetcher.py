"""
Loading of record collections into page state.
"""
import logging

import requests
from pydantic import ValidationError

from .api import read_json
from .envelope import (
    decode_collection,
    decode_envelope,
    decode_pagination,
    error_message,
    first_problem,
)
from .filters import selectable_options

logger = logging.getLogger(__name__)


class CollectionState:
    """
    Records currently shown by a page.

    ``items`` is always a list and is only ever replaced as a whole. Each
    request takes a new generation number; a response for an older
    generation is discarded.
    """

    def __init__(self):
        self.items = []
        self.pagination = None
        self.loading = False
        self.loaded = False
        self.generation = 0

    def begin(self):
        self.generation += 1
        self.loading = True
        return self.generation

    def is_current(self, generation):
        return generation == self.generation

    def commit(self, generation, items, pagination=None):
        if not self.is_current(generation):
            logger.debug('Discarding stale response %s (latest %s)', generation, self.generation)
            return False
        self.items = list(items)
        self.pagination = pagination
        self.loading = False
        self.loaded = True
        return True

    def fail(self, generation):
        if not self.is_current(generation):
            return False
        self.loading = False
        return True

    def clear(self):
        # Also invalidates any request still in flight
        self.generation += 1
        self.items = []
        self.pagination = None
        self.loading = False
        self.loaded = False


class CollectionFetcher:
    """GETs a collection and commits it into a CollectionState."""

    def __init__(self, api, notifier, state=None, label='records'):
        self.api = api
        self.notifier = notifier
        self.state = state if state is not None else CollectionState()
        self.label = label

    @property
    def failure_message(self):
        return f"Failed to load {self.label}"

    def fetch(self, path, params=None, key=None):
        generation = self.state.begin()
        try:
            response = self.api.get(path, params)
        except requests.RequestException as e:
            logger.warning('GET %s failed: %s', path, e)
            if self.state.fail(generation):
                self.notifier.error(self.failure_message)
            return False

        body = read_json(response)
        if not response.ok or body is None:
            logger.warning('GET %s returned %s', path, response.status_code)
            if self.state.fail(generation):
                self.notifier.error(error_message(body, self.failure_message))
            return False

        try:
            envelope = decode_envelope(body)
        except ValidationError as e:
            logger.warning('GET %s returned an unexpected body: %s', path, first_problem(e))
            if self.state.fail(generation):
                self.notifier.error(self.failure_message)
            return False

        return self.state.commit(generation, envelope.records(key), decode_pagination(body))


class ReferenceList:
    """
    Options for a dropdown (classes, sections, subjects...).

    Failures are logged, not shown, and leave the list empty.
    """

    def __init__(self, api, path, key=None, params=None, depends_on=(), id_field='id'):
        self.api = api
        self.path = path
        self.key = key
        self.params = dict(params or {})
        self.depends_on = tuple(depends_on)
        self.id_field = id_field
        self.options = []
        self.generation = 0

    def clear(self):
        self.generation += 1
        self.options = []

    def load(self, params=None):
        self.generation += 1
        generation = self.generation
        query = {**self.params, **(params or {})}
        try:
            response = self.api.get(self.path, query)
        except requests.RequestException as e:
            logger.warning('Could not load %s: %s', self.path, e)
            options = []
        else:
            body = read_json(response)
            if response.ok:
                options = selectable_options(decode_collection(body, self.key), self.id_field)
            else:
                logger.warning('Could not load %s: %s', self.path, error_message(body))
                options = []

        if generation == self.generation:
            self.options = options
        return self.options

    def find(self, record_id):
        for option in self.options:
            if str(option[self.id_field]) == str(record_id):
                return option
        return None
