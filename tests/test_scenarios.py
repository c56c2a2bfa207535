"""
The dashboard client driven against the real API routes.
"""
from datetime import date

from django.test import TestCase

from academics.models import Section, SchoolClass
from dashboard_client.api import ApiClient
from dashboard_client.attendance import AttendanceSheet
from dashboard_client.listing import Column, render_timetable
from dashboard_client.notify import ToastLog
from dashboard_client.page import PageConfig, ResourcePage
from dashboard_client.pages import book_issues_page, books_page, notices_page, timetable_page
from events.models import Notice
from library.models import Book
from students.models import Student

from .support import DjangoSession, make_admin, make_school


class DashboardScenarioTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)
        cls.section_a = Section.objects.create(school=cls.school, name='A')
        cls.section_b = Section.objects.create(school=cls.school, name='B')
        cls.class_five = SchoolClass.objects.create(school=cls.school, name='Five', sort_order=5)
        cls.class_six = SchoolClass.objects.create(school=cls.school, name='Six', sort_order=6)
        cls.class_five.sections.add(cls.section_a, cls.section_b)
        cls.class_six.sections.add(cls.section_a)

    def setUp(self):
        self.client.force_login(self.user)
        self.session = DjangoSession(self.client)
        self.api = ApiClient('http://testserver', session=self.session)
        self.notifier = ToastLog()

    def open_page(self, config, confirm=None):
        page = ResourcePage(self.api, config, self.notifier, confirm)
        page.mount()
        return page

    def test_empty_timetable_shows_no_classes_every_day(self):
        page = self.open_page(timetable_page())
        page.set_filter('classId', str(self.class_five.pk))
        page.set_filter('sectionId', str(self.section_a.pk))

        self.assertEqual(page.items, [])
        self.assertTrue(page.collection.loaded)
        schedule = render_timetable(page.items)
        self.assertEqual(len(schedule), 6)
        for lines in schedule.values():
            self.assertEqual(lines, ['No classes scheduled'])
        self.assertEqual(page.stats(), {'periods': 0})
        self.assertEqual(self.notifier.toasts, [])

    def test_switching_class_resets_section_without_section_scoped_request(self):
        page = self.open_page(timetable_page())
        self.assertEqual([c['name'] for c in page.options('classes')], ['Five', 'Six'])

        page.set_filter('classId', str(self.class_five.pk))
        self.assertEqual([s['name'] for s in page.options('sections')], ['A', 'B'])
        page.set_filter('classId', str(self.class_six.pk))

        self.assertEqual(page.filters.get('sectionId'), '')
        self.assertEqual([s['name'] for s in page.options('sections')], ['A'])
        self.assertEqual(self.session.requests_to('/api/academics/timetable'), [])

        page.set_filter('sectionId', str(self.section_a.pk))
        request = self.session.requests_to('/api/academics/timetable')[-1]
        self.assertEqual(
            request.params,
            {'classId': str(self.class_six.pk), 'sectionId': str(self.section_a.pk)},
        )

    def test_timetable_entry_round_trip(self):
        page = self.open_page(timetable_page())
        page.set_filter('classId', str(self.class_five.pk))
        page.set_filter('sectionId', str(self.section_b.pk))

        page.open_create()
        page.dialog.update(day='Wednesday', startTime='11:00', endTime='11:45', room='Lab')
        self.assertTrue(page.submit())

        schedule = render_timetable(page.items)
        self.assertEqual(schedule['Wednesday'], ['11:00-11:45 - Room Lab'])

        page.open_create()
        page.dialog.update(day='Wednesday', startTime='12:00', endTime='11:00')
        self.assertFalse(page.submit())
        self.assertEqual(self.notifier.errors, ['End time must be after start time.'])
        self.assertTrue(page.dialog.is_open)

    def test_empty_notice_title(self):
        page = self.open_page(notices_page())

        page.open_create()
        page.dialog.update(title='', content='Sports day on Friday')
        self.assertFalse(page.submit())
        self.assertEqual(self.session.requests_to('/api/events/notices', 'POST'), [])
        self.assertEqual(self.notifier.errors, ['Title is required'])

        # Without the client-side check the server rejects it with the same message
        page.dialog.required = ()
        self.assertFalse(page.submit())
        self.assertEqual(len(self.session.requests_to('/api/events/notices', 'POST')), 1)
        self.assertEqual(self.notifier.errors, ['Title is required', 'Title is required'])
        self.assertFalse(Notice.objects.exists())

    def test_refused_delete_keeps_row(self):
        Student.objects.create(
            school=self.school, admission_no='S1', first_name='Ravi',
            gender='Male', dob=date(2014, 1, 1), school_class=self.class_five,
        )
        config = PageConfig(
            endpoint='api/academics/classes',
            noun='class',
            plural='classes',
            columns=(Column('name', 'Class'),),
        )
        page = self.open_page(config, confirm=lambda message: True)

        self.assertFalse(page.delete(self.class_five.pk))

        self.assertEqual(self.notifier.errors, ['Cannot delete class with assigned students'])
        self.assertIn(['Five'], page.rows())
        self.assertEqual(len(self.session.requests_to('/api/academics/classes', 'GET')), 1)

    def test_book_lifecycle(self):
        page = self.open_page(books_page(), confirm=lambda message: True)
        self.assertEqual(page.items, [])

        page.open_create()
        page.dialog.update(title='Atlas', bookNo='B-1', quantity='4', price='12.50')
        self.assertTrue(page.submit())
        self.assertEqual(self.notifier.last.message, 'Book created successfully')
        self.assertEqual(page.stats()['available'], 4)

        page.open_edit(page.items[0])
        page.dialog.set('quantity', '6')
        self.assertTrue(page.submit())
        self.assertEqual(page.items[0]['availableQuantity'], 6)
        self.assertIsNone(page.items[0]['isbn'])

        book_id = page.items[0]['id']
        self.assertTrue(page.delete(book_id))
        self.assertEqual(page.items, [])
        self.assertFalse(Book.objects.exists())

    def test_session_without_school_is_reported(self):
        self.client.logout()
        page = self.open_page(books_page())
        self.assertEqual(page.items, [])
        self.assertEqual(self.notifier.errors, ['Unauthorized'])

    def test_book_loan_moves_issued_count(self):
        Book.objects.create(school=self.school, title='Atlas', book_no='B-1', quantity=2, available=2)
        student = Student.objects.create(
            school=self.school, admission_no='S1', first_name='Ravi', gender='Male', dob=date(2014, 1, 1),
        )
        books = self.open_page(books_page())
        loans = self.open_page(book_issues_page())
        self.assertEqual(books.stats()['issued'], 0)

        loans.open_create()
        loans.dialog.update(bookId=str(books.items[0]['id']), studentId=str(student.pk))
        self.assertTrue(loans.submit())
        self.assertEqual(len(loans.items), 1)

        books.refresh()
        self.assertEqual(books.stats()['issued'], 1)

        self.assertTrue(loans.perform(loans.items[0]['id'], 'return'))
        self.assertEqual(self.notifier.last.message, 'Book returned successfully')
        self.assertEqual(loans.items, [])

        books.refresh()
        self.assertEqual(books.stats()['issued'], 0)

    def test_attendance_sheet(self):
        for number, name in enumerate(['Asha', 'Ravi'], start=1):
            Student.objects.create(
                school=self.school, admission_no=f'S{number}', first_name=name, roll_no=str(number),
                gender='Female', dob=date(2014, 1, 1), school_class=self.class_five, section=self.section_a,
            )
        sheet = AttendanceSheet(self.api, self.notifier)
        sheet.mount()
        sheet.set_filter('classId', str(self.class_five.pk))
        self.assertEqual(self.session.requests_to('/api/attendance/students'), [])

        sheet.set_filter('sectionId', str(self.section_a.pk))
        self.assertEqual([row['firstName'] for row in sheet.items], ['Asha', 'Ravi'])
        self.assertEqual(sheet.stats()['marked'], 0)

        sheet.mark(sheet.items[1]['studentId'], 'absent', 'Fever')
        self.assertTrue(sheet.save())
        self.assertEqual(self.notifier.last.message, 'Attendance saved for 2 students')
        self.assertEqual(sheet.stats()['byStatus'], {'present': 1, 'absent': 1})
        self.assertEqual(sheet.rows()[1][3:], ['absent', 'Fever'])

        # Another class empties the sheet until a section is picked again
        sheet.set_filter('classId', str(self.class_six.pk))
        self.assertEqual(sheet.items, [])
        self.assertEqual(sheet.filters.get('sectionId'), '')
