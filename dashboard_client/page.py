"""
One list + filter + mutate page, wired for the resource a PageConfig
describes.

    mount()            load dropdown options, then the records
    set_filter()       change a server-side filter and refetch
    open_create()      dialog for a new record
    open_edit(record)  dialog seeded from a record
    submit()           POST or PUT, then refetch
    delete(record_id)  confirm -> DELETE -> refetch
"""
import logging
from dataclasses import dataclass, field

import requests
from pydantic import ValidationError

from .api import read_json
from .dialogs import FormDialog, coerce_number
from .envelope import DEFAULT_ERROR, error_message, first_problem, success_message
from .fetcher import CollectionFetcher, CollectionState, ReferenceList
from .filters import FilterState, is_set
from .listing import ListView
from .notify import ToastLog

logger = logging.getLogger(__name__)


@dataclass
class Reference:
    path: str
    key: str = None
    params: dict = field(default_factory=dict)
    # Filters passed through as query parameters; the list loads only once
    # they are all set and empties whenever one of them changes.
    depends_on: tuple = ()


@dataclass
class PageConfig:
    endpoint: str
    noun: str
    plural: str
    key: str = None

    filters: tuple = ()
    dependencies: dict = field(default_factory=dict)
    required_filters: tuple = ()
    initial_filters: dict = field(default_factory=dict)
    page_size: int = None

    references: dict = field(default_factory=dict)

    defaults: dict = field(default_factory=dict)
    id_field: str = 'id'
    required_fields: tuple = ()
    numeric_fields: tuple = ()
    nullable_fields: tuple = ()
    labels: dict = field(default_factory=dict)
    seed: object = None
    # Body field -> filter name, for records created under the current filters
    body_from_filters: dict = field(default_factory=dict)

    columns: tuple = ()
    search_fields: tuple = ()
    predicates: dict = field(default_factory=dict)
    stats: dict = field(default_factory=dict)


def decline(message):
    return False


class ResourcePage:
    def __init__(self, api, config, notifier=None, confirm=None):
        self.api = api
        self.config = config
        self.notifier = notifier if notifier is not None else ToastLog()
        # Without a way to ask, deletes are refused
        self.confirm = confirm if confirm is not None else decline

        self.filters = FilterState(config.filters, config.dependencies, config.initial_filters)
        self.filters.subscribe(self._filters_changed)

        self.collection = CollectionState()
        self.fetcher = CollectionFetcher(api, self.notifier, self.collection, label=config.plural)
        self.references = {
            name: ReferenceList(api, ref.path, ref.key, ref.params, ref.depends_on)
            for name, ref in config.references.items()
        }
        self.dialog = FormDialog(
            config.defaults,
            id_field=config.id_field,
            required=config.required_fields,
            numeric_fields=config.numeric_fields,
            nullable_fields=config.nullable_fields,
            labels=config.labels,
            seed=config.seed,
        )
        self.listing = ListView(config.columns, config.search_fields, config.predicates)

        self.page = 1
        self.search = ''
        self.choices = {}
        self.pending = False

    @property
    def items(self):
        return self.collection.items

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def mount(self):
        for reference in self.references.values():
            self._load_reference(reference)
        self.refresh()

    def _load_reference(self, reference):
        if not self.filters.is_complete(reference.depends_on):
            reference.clear()
            return
        params = {name: self.filters.get(name) for name in reference.depends_on}
        reference.load(params)

    def params(self):
        params = self.filters.params()
        if self.config.page_size:
            params['page'] = self.page
            params['limit'] = self.config.page_size
        return params

    def refresh(self):
        """Refetch the records, when every required filter is set."""
        if not self.filters.is_complete(self.config.required_filters):
            return False
        return self.fetcher.fetch(self.config.endpoint, self.params(), self.config.key)

    def set_filter(self, name, value):
        return self.filters.set(name, value)

    def go_to_page(self, page):
        self.page = max(int(page), 1)
        return self.refresh()

    def _filters_changed(self, changed):
        for reference in self.references.values():
            if any(name in changed for name in reference.depends_on):
                self._load_reference(reference)

        self.page = 1
        if not self.filters.is_complete(self.config.required_filters):
            self.collection.clear()
            return
        self.refresh()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def open_create(self):
        self.dialog.open_create()

    def open_edit(self, record):
        self.dialog.open_edit(record)

    def record_path(self, record_id, action=None):
        path = f"{self.config.endpoint}/{record_id}"
        return f"{path}/{action}" if action else path

    def _send(self, method, path, payload=None):
        """
        Send one mutation. Returns the decoded body on success; on failure
        shows the server's message and returns None.
        """
        self.pending = True
        try:
            response = self.api.send(method, path, payload)
        except requests.RequestException as e:
            logger.warning('%s %s failed: %s', method, path, e)
            self.notifier.error(DEFAULT_ERROR)
            return None
        finally:
            self.pending = False

        body = read_json(response)
        if not response.ok:
            self.notifier.error(error_message(body))
            return None
        return body if body is not None else {}

    def submit(self):
        if self.pending or not self.dialog.is_open:
            return False

        try:
            payload = self.dialog.payload()
        except ValidationError as e:
            self.notifier.error(first_problem(e))
            return False

        for body_field, filter_name in self.config.body_from_filters.items():
            value = self.filters.get(filter_name)
            if is_set(value) and payload.get(body_field) in (None, ''):
                payload[body_field] = coerce_number(value)

        if self.dialog.editing:
            body = self._send('PUT', self.record_path(self.dialog.record_id), payload)
            fallback = f"{self.config.noun.capitalize()} updated successfully"
        else:
            body = self._send('POST', self.config.endpoint, payload)
            fallback = f"{self.config.noun.capitalize()} created successfully"
        if body is None:
            return False

        self.notifier.success(success_message(body, fallback))
        self.dialog.close()
        self.refresh()
        return True

    def delete(self, record_id):
        if self.pending:
            return False
        if not self.confirm(f"Are you sure you want to delete this {self.config.noun}?"):
            return False

        body = self._send('DELETE', self.record_path(record_id))
        if body is None:
            return False

        self.notifier.success(
            success_message(body, f"{self.config.noun.capitalize()} deleted successfully")
        )
        self.refresh()
        return True

    def perform(self, record_id, action):
        """POST to a record action route (e.g. a visitor's checkout)."""
        if self.pending:
            return False
        body = self._send('POST', self.record_path(record_id, action))
        if body is None:
            return False
        self.notifier.success(success_message(body, 'Done'))
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def set_search(self, text):
        self.search = text or ''

    def set_choice(self, name, value):
        self.choices[name] = value

    def visible(self):
        return self.listing.visible(self.items, self.search, self.choices)

    def rows(self):
        return self.listing.rows(self.items, self.search, self.choices)

    def stats(self):
        return {name: compute(self.items) for name, compute in self.config.stats.items()}

    def options(self, name):
        return self.references[name].options
