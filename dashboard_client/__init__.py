"""
Client side of the SchoolDesk dashboard: the list / filter / mutate page
pattern over the JSON API.
"""
from .api import ApiClient
from .attendance import AttendanceSheet
from .dialogs import FormDialog
from .envelope import decode_collection, error_message
from .fetcher import CollectionFetcher, CollectionState, ReferenceList
from .filters import FilterState, selectable_options
from .listing import Column, ListView, count_by, count_where, render_timetable, sum_of
from .notify import Notifier, ToastLog
from .page import PageConfig, Reference, ResourcePage

__all__ = [
    'ApiClient',
    'AttendanceSheet',
    'CollectionFetcher',
    'CollectionState',
    'Column',
    'FilterState',
    'FormDialog',
    'ListView',
    'Notifier',
    'PageConfig',
    'Reference',
    'ReferenceList',
    'ResourcePage',
    'ToastLog',
    'count_by',
    'count_where',
    'decode_collection',
    'error_message',
    'render_timetable',
    'selectable_options',
    'sum_of',
]
