"""
Shared test helpers: tenant fixtures and stand-ins for ``requests.Session``.
"""
import json
from collections import namedtuple
from urllib.parse import urlsplit

from accounts.models import User
from schools.models import School

PASSWORD = 'secret-pass-123'

Call = namedtuple('Call', ['method', 'path', 'params', 'json', 'headers'])


def make_school(code='GHS', name='Green Hill School', **extra):
    return School.objects.create(code=code, name=name, **extra)


def make_admin(school, email=None):
    return User.objects.create_user(
        email=email or f'admin@{school.code.lower()}.test',
        password=PASSWORD,
        first_name='School',
        last_name='Admin',
        school=school,
    )


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.body = body
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.text is not None:
            return json.loads(self.text)
        return self.body


def ok(data=None, **extra):
    return FakeResponse(200, {'success': True, 'data': data, **extra})


def failure(error, status=400):
    return FakeResponse(status, {'success': False, 'error': error})


class FakeSession:
    """
    Records every request and answers from ``routes``:
    (method, path) -> response, exception, or callable(call) returning one.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.cookies = {}

    def get(self, url, params=None, headers=None, timeout=None):
        return self.request('GET', url, params=params, headers=headers, timeout=timeout)

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        call = Call(method, urlsplit(url).path, dict(params or {}), json, dict(headers or {}))
        self.calls.append(call)

        reply = self.routes.get((method, call.path))
        if callable(reply):
            reply = reply(call)
        if reply is None:
            return failure('Not found', status=404)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def requests_to(self, path, method=None):
        return [
            call for call in self.calls
            if call.path == path and (method is None or call.method == method)
        ]


class DjangoResponse:
    def __init__(self, response):
        self.response = response
        self.status_code = response.status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.response.content)


class DjangoSession:
    """
    Sends ``requests``-style calls through the Django test client, so the
    dashboard client can be driven against the real routes.
    """

    def __init__(self, client):
        self.client = client
        self.calls = []
        # (method, path) -> FakeResponse that replaces the real answer
        self.overrides = {}

    @property
    def cookies(self):
        return {name: morsel.value for name, morsel in self.client.cookies.items()}

    def get(self, url, params=None, headers=None, timeout=None):
        return self.request('GET', url, params=params, headers=headers, timeout=timeout)

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        path = urlsplit(url).path
        call = Call(method, path, dict(params or {}), json, dict(headers or {}))
        self.calls.append(call)

        if (method, path) in self.overrides:
            return self.overrides[(method, path)]

        if method == 'GET':
            response = self.client.get(path, {key: str(value) for key, value in call.params.items()})
        else:
            response = self.client.generic(
                method,
                path,
                data=_dumps(json),
                content_type='application/json',
            )
        return DjangoResponse(response)

    def requests_to(self, path, method=None):
        return [
            call for call in self.calls
            if call.path == path and (method is None or call.method == method)
        ]


def _dumps(payload):
    return '' if payload is None else json.dumps(payload)
