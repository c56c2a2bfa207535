"""
HTTP access to the SchoolDesk JSON API.
"""
import logging
import os

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000'
CSRF_COOKIE_NAME = 'csrftoken'


class ApiClient:
    """
    Thin wrapper over a ``requests.Session``.

    Requests are sent once; nothing is retried and no timeout applies unless
    one is given.
    """

    def __init__(self, base_url=None, session=None, timeout=None):
        base_url = base_url or os.getenv('SCHOOLDESK_API_URL', DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self):
        headers = {'Accept': 'application/json'}
        # Django rejects unsafe methods without the token from its cookie
        token = self.session.cookies.get(CSRF_COOKIE_NAME)
        if token:
            headers['X-CSRFToken'] = token
        return headers

    def get(self, path, params=None):
        logger.debug('GET %s %s', path, params or {})
        return self.session.get(
            self.url(path),
            params=params or {},
            headers=self.headers(),
            timeout=self.timeout,
        )

    def send(self, method, path, payload=None):
        logger.debug('%s %s', method, path)
        return self.session.request(
            method,
            self.url(path),
            json=payload,
            headers=self.headers(),
            timeout=self.timeout,
        )


def read_json(response):
    """Response body as JSON, or None when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return None
