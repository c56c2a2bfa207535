import json
from datetime import date

from django.test import TestCase

from front_office.models import Enquiry, Visitor

from .support import make_admin, make_school


class VisitorApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)

    def setUp(self):
        self.client.force_login(self.user)

    def test_in_time_defaults_to_now(self):
        response = self.client.post(
            '/api/front-office/visitors',
            data=json.dumps({'name': 'Mr. Sen', 'purpose': 'Admission', 'inTime': None}),
            content_type='application/json',
        )
        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertIsNotNone(data['inTime'])
        self.assertIsNone(data['outTime'])

    def test_visit_date_from_payload(self):
        response = self.client.post(
            '/api/front-office/visitors',
            data=json.dumps({'name': 'Mr. Sen', 'purpose': 'Meeting', 'date': '2025-03-04', 'inTime': '10:15'}),
            content_type='application/json',
        )
        data = response.json()['data']
        self.assertEqual(data['date'], '2025-03-04')
        self.assertEqual(data['inTime'], '10:15')

    def test_checkout(self):
        visitor = Visitor.objects.create(school=self.school, name='Mr. Sen', purpose='Meeting', in_time='09:00')

        response = self.client.post(f'/api/front-office/visitors/{visitor.pk}/checkout')
        self.assertEqual(response.status_code, 200)
        self.assertIsNotNone(response.json()['data']['outTime'])
        self.assertFalse(response.json()['data']['checkedIn'])

        response = self.client.post(f'/api/front-office/visitors/{visitor.pk}/checkout')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Visitor has already checked out')

    def test_date_filter_and_search(self):
        Visitor.objects.create(school=self.school, name='Mr. Sen', purpose='Meeting', visit_date=date(2025, 3, 4))
        Visitor.objects.create(school=self.school, name='Ms. Das', purpose='Fees', visit_date=date(2025, 3, 5))

        data = self.client.get('/api/front-office/visitors', {'date': '2025-03-05'}).json()['data']
        self.assertEqual([v['name'] for v in data], ['Ms. Das'])

        data = self.client.get('/api/front-office/visitors', {'search': 'meet'}).json()['data']
        self.assertEqual([v['name'] for v in data], ['Mr. Sen'])


class EnquiryApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)

    def setUp(self):
        self.client.force_login(self.user)

    def test_create_and_filter_by_status(self):
        response = self.client.post(
            '/api/front-office/enquiries',
            data=json.dumps({'name': 'Leela', 'phone': '555-0111', 'classInterested': 'Five', 'followUpDate': '2025-04-01'}),
            content_type='application/json',
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['data']['status'], 'active')
        Enquiry.objects.create(school=self.school, name='Omar', status='won')

        data = self.client.get('/api/front-office/enquiries', {'status': 'won'}).json()['data']
        self.assertEqual([e['name'] for e in data], ['Omar'])

    def test_name_is_required(self):
        response = self.client.post(
            '/api/front-office/enquiries',
            data=json.dumps({'phone': '555-0111'}),
            content_type='application/json',
        )
        self.assertEqual(response.json()['error'], 'Name is required')
