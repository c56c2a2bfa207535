from unittest import mock

from django.test import TestCase, override_settings

from core.utils import filter_value, next_sequence_code, snake_case
from library.api import BookResource
from library.models import Book

from .support import make_admin, make_school


class KeyCasingTests(TestCase):
    def test_snake_case(self):
        self.assertEqual(snake_case('startTime'), 'start_time')
        self.assertEqual(snake_case('sectionIds'), 'section_ids')
        self.assertEqual(snake_case('room'), 'room')


class FilterValueTests(TestCase):
    def test_empty_and_all_mean_unset(self):
        self.assertIsNone(filter_value({'status': ''}, 'status'))
        self.assertIsNone(filter_value({'status': 'all'}, 'status'))
        self.assertIsNone(filter_value({}, 'status'))
        self.assertEqual(filter_value({'status': ' active '}, 'status'), 'active')


class SequenceCodeTests(TestCase):
    def test_continues_series(self):
        self.assertEqual(next_sequence_code('20250007', '2025'), '20250008')

    def test_restarts_for_new_prefix(self):
        self.assertEqual(next_sequence_code('20240120', '2025'), '20250001')
        self.assertEqual(next_sequence_code(None, 'GHS-2025-'), 'GHS-2025-0001')


class ApiEndpointTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)

    def setUp(self):
        self.client.force_login(self.user)

    def test_anonymous_request_is_unauthorized(self):
        self.client.logout()
        response = self.client.get('/api/library/books')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'success': False, 'error': 'Unauthorized'})

    def test_user_without_active_school_is_unauthorized(self):
        self.school.is_active = False
        self.school.save()
        response = self.client.get('/api/library/books')
        self.assertEqual(response.status_code, 401)

    def test_unsupported_method(self):
        response = self.client.patch('/api/library/books', data='{}', content_type='application/json')
        self.assertEqual(response.status_code, 405)
        self.assertFalse(response.json()['success'])

    def test_unexpected_error_is_reported_generically(self):
        Book.objects.create(school=self.school, title='Atlas', book_no='B-1')
        with mock.patch.object(BookResource, 'serialize', side_effect=RuntimeError('boom')):
            with self.assertLogs('core.views', level='ERROR'):
                response = self.client.get('/api/library/books')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': 'Failed to fetch books'})

    def test_body_must_be_a_json_object(self):
        response = self.client.post('/api/library/books', data='[1, 2]', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Invalid JSON body')

        response = self.client.post('/api/library/books', data='{not json', content_type='application/json')
        self.assertEqual(response.json()['error'], 'Invalid JSON body')


@override_settings(API_PAGE_SIZE=20, API_MAX_PAGE_SIZE=100)
class PaginationTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)
        Book.objects.bulk_create([
            Book(school=cls.school, title=f'Book {i:02d}', book_no=f'B-{i:02d}')
            for i in range(25)
        ])

    def setUp(self):
        self.client.force_login(self.user)

    def test_page_and_limit(self):
        body = self.client.get('/api/library/books', {'page': 3, 'limit': 10}).json()
        self.assertEqual(len(body['data']), 5)
        self.assertEqual(body['pagination'], {'page': 3, 'limit': 10, 'total': 25, 'totalPages': 3})

    def test_page_past_the_end_is_clamped(self):
        body = self.client.get('/api/library/books', {'page': 99, 'limit': 10}).json()
        self.assertEqual(body['pagination']['page'], 3)

    def test_malformed_and_oversized_limits(self):
        body = self.client.get('/api/library/books', {'limit': 'abc'}).json()
        self.assertEqual(body['pagination']['limit'], 20)
        self.assertEqual(len(body['data']), 20)

        body = self.client.get('/api/library/books', {'limit': 1000}).json()
        self.assertEqual(body['pagination']['limit'], 100)

    def test_empty_result(self):
        body = self.client.get('/api/library/books', {'search': 'nothing matches'}).json()
        self.assertEqual(body['data'], [])
        self.assertEqual(body['pagination']['total'], 0)
        self.assertEqual(body['pagination']['totalPages'], 0)
