import io
import json
from datetime import date

import openpyxl
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.utils import timezone

from academics.models import Section, SchoolClass
from students.models import Student

from .support import make_admin, make_school


def workbook_upload(rows, name='students.xlsx'):
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return SimpleUploadedFile(
        name,
        buffer.getvalue(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    )


class StudentApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)
        cls.section = Section.objects.create(school=cls.school, name='A')
        cls.other_section = Section.objects.create(school=cls.school, name='B')
        cls.school_class = SchoolClass.objects.create(school=cls.school, name='Five')
        cls.school_class.sections.add(cls.section)

    def setUp(self):
        self.client.force_login(self.user)

    def post(self, payload):
        return self.client.post('/api/students', data=json.dumps(payload), content_type='application/json')

    def make_student(self, admission_no, first_name, **extra):
        extra.setdefault('gender', 'Female')
        extra.setdefault('dob', date(2014, 6, 1))
        return Student.objects.create(
            school=self.school, admission_no=admission_no, first_name=first_name, **extra
        )

    def test_create(self):
        response = self.post({
            'admissionNo': '20250001',
            'firstName': 'Asha',
            'lastName': 'Nair',
            'gender': 'Female',
            'dob': '2015-04-02',
            'classId': self.school_class.pk,
            'sectionId': self.section.pk,
            'guardianPhone': '555-0101',
        })

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['message'], 'Student created successfully')
        self.assertEqual(body['data']['class'], {'id': self.school_class.pk, 'name': 'Five'})
        self.assertEqual(body['data']['section'], {'id': self.section.pk, 'name': 'A'})
        self.assertEqual(body['data']['admissionDate'], timezone.localdate().isoformat())
        self.assertTrue(body['data']['isActive'])
        self.assertIsNone(body['data']['email'])

    def test_first_violated_rule_is_reported(self):
        response = self.post({})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Admission number is required')

        response = self.post({'admissionNo': 'X1', 'firstName': 'Asha', 'gender': 'Female'})
        self.assertEqual(response.json()['error'], 'Date of birth is required')

    def test_duplicate_admission_number(self):
        self.make_student('X1', 'Ravi')
        response = self.post({'admissionNo': 'X1', 'firstName': 'Asha', 'gender': 'Female', 'dob': '2015-04-02'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Admission number already exists')

    def test_section_requires_its_class(self):
        response = self.post({
            'admissionNo': 'X1', 'firstName': 'Asha', 'gender': 'Female', 'dob': '2015-04-02',
            'classId': self.school_class.pk, 'sectionId': self.other_section.pk,
        })
        self.assertEqual(response.json()['error'], 'Section does not belong to the selected class.')

    def test_list_filters_and_pagination(self):
        self.make_student('X1', 'Asha', school_class=self.school_class)
        self.make_student('X2', 'Ravi')
        self.make_student('X3', 'Kiran', is_active=False)

        body = self.client.get('/api/students').json()
        self.assertEqual({s['admissionNo'] for s in body['data']}, {'X1', 'X2'})
        self.assertEqual(body['pagination']['total'], 2)

        body = self.client.get('/api/students', {'status': 'all'}).json()
        self.assertEqual(body['pagination']['total'], 3)

        body = self.client.get('/api/students', {'status': 'inactive'}).json()
        self.assertEqual([s['admissionNo'] for s in body['data']], ['X3'])

        body = self.client.get('/api/students', {'classId': self.school_class.pk}).json()
        self.assertEqual([s['admissionNo'] for s in body['data']], ['X1'])

        body = self.client.get('/api/students', {'search': 'rav'}).json()
        self.assertEqual([s['firstName'] for s in body['data']], ['Ravi'])

    def test_unknown_status(self):
        response = self.client.get('/api/students', {'status': 'graduated'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Invalid status')

    def test_update_ignores_identifier_in_body(self):
        student = self.make_student('X1', 'Asha', phone='555-0100')

        response = self.client.put(
            f'/api/students/{student.pk}',
            data=json.dumps({'id': student.pk + 100, 'firstName': 'Asha Rani'}),
            content_type='application/json',
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['id'], student.pk)
        self.assertEqual(data['firstName'], 'Asha Rani')
        self.assertEqual(data['phone'], '555-0100')

    def test_delete_deactivates(self):
        student = self.make_student('X1', 'Asha')

        response = self.client.delete(f'/api/students/{student.pk}')

        self.assertEqual(response.status_code, 200)
        student.refresh_from_db()
        self.assertFalse(student.is_active)
        self.assertEqual(self.client.get('/api/students').json()['data'], [])
        self.assertFalse(self.client.get(f'/api/students/{student.pk}').json()['data']['isActive'])

    def test_generate_admission_number(self):
        year = timezone.localdate().year
        body = self.client.get('/api/students/generate-admission-no').json()
        self.assertEqual(body['data'], f'{year}0001')

        self.make_student(f'{year}0007', 'Asha')
        self.make_student(f'{year - 1}0120', 'Ravi')
        body = self.client.get('/api/students/generate-admission-no').json()
        self.assertEqual(body['data'], f'{year}0008')


class StudentImportTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)
        cls.section = Section.objects.create(school=cls.school, name='A')
        cls.school_class = SchoolClass.objects.create(school=cls.school, name='Five')
        cls.school_class.sections.add(cls.section)
        Student.objects.create(
            school=cls.school, admission_no='A-1', first_name='Old',
            gender='Male', dob=date(2014, 1, 1),
        )

    def setUp(self):
        self.client.force_login(self.user)

    def test_import_creates_updates_and_reports(self):
        upload = workbook_upload([
            ['Admission No', 'First Name', 'Last Name', 'Gender', 'DOB', 'Class', 'Section'],
            ['A-1', 'Arjun', 'Menon', 'Male', date(2014, 1, 1), 'five', 'A'],
            ['A-2', 'Diya', '', 'Female', date(2015, 3, 9), 'Five', ''],
            [None, None, None, None, None, None, None],
            ['A-3', 'Kabir', '', 'Male', date(2015, 5, 5), 'Nine', ''],
            ['A-4', 'Zara', '', 'Female', None, '', ''],
        ])

        response = self.client.post('/api/students/import', {'file': upload})

        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['created'], 1)
        self.assertEqual(data['updated'], 1)
        self.assertEqual(data['errors'], [
            {'row': 5, 'error': 'Unknown class "Nine"'},
            {'row': 6, 'error': 'Date of birth is required'},
        ])

        updated = Student.objects.get(school=self.school, admission_no='A-1')
        self.assertEqual(updated.first_name, 'Arjun')
        self.assertEqual(updated.section, self.section)
        self.assertTrue(Student.objects.filter(admission_no='A-2', school_class=self.school_class).exists())

    def test_reimport_without_class_columns_keeps_assignment(self):
        student = Student.objects.get(school=self.school, admission_no='A-1')
        student.school_class = self.school_class
        student.section = self.section
        student.save()

        upload = workbook_upload([
            ['Admission No', 'First Name', 'Gender', 'DOB', 'Guardian Phone'],
            ['A-1', 'Old', 'Male', date(2014, 1, 1), '555-0199'],
        ])

        response = self.client.post('/api/students/import', {'file': upload})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['updated'], 1)
        student.refresh_from_db()
        self.assertEqual(student.guardian_phone, '555-0199')
        self.assertEqual(student.school_class, self.school_class)
        self.assertEqual(student.section, self.section)

    def test_missing_columns(self):
        upload = workbook_upload([['Name', 'Phone'], ['Asha', '555']])
        response = self.client.post('/api/students/import', {'file': upload})
        self.assertEqual(response.status_code, 400)
        self.assertIn('Missing required columns: admission_no', response.json()['error'])

    def test_only_xlsx_files(self):
        upload = SimpleUploadedFile('students.csv', b'admission_no,first_name\n')
        response = self.client.post('/api/students/import', {'file': upload})
        self.assertEqual(response.status_code, 400)
        self.assertIn('Only Excel files (.xlsx) are allowed.', response.json()['error'])

    def test_file_is_required(self):
        response = self.client.post('/api/students/import', {})
        self.assertEqual(response.status_code, 400)
