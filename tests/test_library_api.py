import json
from datetime import date

from django.test import TestCase

from library.models import Book, BookIssue
from staff.models import Staff
from students.models import Student

from .support import make_admin, make_school


class BookApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.user = make_admin(cls.school)

    def setUp(self):
        self.client.force_login(self.user)

    def send(self, method, path, payload):
        return self.client.generic(method, path, data=json.dumps(payload), content_type='application/json')

    def test_new_book_is_fully_available(self):
        response = self.send('POST', '/api/library/books', {
            'title': 'Atlas', 'bookNo': 'B-1', 'quantity': 5, 'price': 12.5, 'shelfLocation': 'R2',
        })
        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertEqual(data['quantity'], 5)
        self.assertEqual(data['availableQuantity'], 5)
        self.assertEqual(data['price'], 12.5)
        self.assertEqual(data['shelfLocation'], 'R2')

    def test_available_field_cannot_be_posted(self):
        response = self.send('POST', '/api/library/books', {
            'title': 'Atlas', 'bookNo': 'B-1', 'quantity': 2, 'available': 40,
        })
        self.assertEqual(response.json()['data']['availableQuantity'], 2)

    def test_quantity_change_moves_availability(self):
        book = Book.objects.create(school=self.school, title='Atlas', book_no='B-1', quantity=5, available=3)

        data = self.send('PUT', f'/api/library/books/{book.pk}', {'quantity': 7}).json()['data']
        self.assertEqual(data['availableQuantity'], 5)

        data = self.send('PUT', f'/api/library/books/{book.pk}', {'quantity': 4}).json()['data']
        self.assertEqual(data['availableQuantity'], 2)

        data = self.send('PUT', f'/api/library/books/{book.pk}', {'quantity': 0}).json()['data']
        self.assertEqual(data['availableQuantity'], 0)

    def test_duplicate_book_number(self):
        Book.objects.create(school=self.school, title='Atlas', book_no='B-1')
        response = self.send('POST', '/api/library/books', {'title': 'Atlas 2', 'bookNo': 'B-1'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Book number already exists')

    def test_available_only_filter(self):
        Book.objects.create(school=self.school, title='Atlas', book_no='B-1', quantity=1, available=0)
        Book.objects.create(school=self.school, title='Biology', book_no='B-2', quantity=1, available=1)

        data = self.client.get('/api/library/books', {'isAvailable': 'true'}).json()['data']
        self.assertEqual([b['title'] for b in data], ['Biology'])

        data = self.client.get('/api/library/books', {'isAvailable': 'false'}).json()['data']
        self.assertEqual(len(data), 2)

    def test_missing_book(self):
        response = self.client.get('/api/library/books/999')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'success': False, 'error': 'Book not found'})

    def test_book_with_unreturned_issue_cannot_be_deleted(self):
        book = Book.objects.create(school=self.school, title='Atlas', book_no='B-1', quantity=2, available=1)
        student = Student.objects.create(
            school=self.school, admission_no='X1', first_name='Asha', gender='Female', dob=date(2014, 6, 1),
        )
        BookIssue.objects.create(school=self.school, book=book, student=student)

        response = self.client.delete(f'/api/library/books/{book.pk}')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Cannot delete book with 1 unreturned copies')
        self.assertTrue(Book.objects.filter(pk=book.pk).exists())


class BookIssueApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.school = make_school()
        cls.school.library_loan_days = 7
        cls.school.save()
        cls.user = make_admin(cls.school)
        cls.student = Student.objects.create(
            school=cls.school, admission_no='X1', first_name='Asha', last_name='Nair',
            gender='Female', dob=date(2014, 6, 1),
        )
        cls.teacher = Staff.objects.create(school=cls.school, employee_id='GHS-1', first_name='Meera')

    def setUp(self):
        self.client.force_login(self.user)
        self.book = Book.objects.create(school=self.school, title='Atlas', book_no='B-1', quantity=1, available=1)

    def issue(self, **payload):
        payload.setdefault('bookId', self.book.pk)
        return self.client.post('/api/library/issues', data=json.dumps(payload), content_type='application/json')

    def give_back(self, issue_id, **payload):
        return self.client.post(
            f'/api/library/issues/{issue_id}/return', data=json.dumps(payload), content_type='application/json',
        )

    def test_issue_takes_a_copy_and_uses_school_loan_period(self):
        response = self.issue(studentId=self.student.pk, issueDate='2025-03-01')

        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertEqual(data['dueDate'], '2025-03-08')
        self.assertEqual(data['student'], {'id': self.student.pk, 'name': 'Asha Nair', 'admissionNo': 'X1'})
        self.assertEqual(data['book'], {'id': self.book.pk, 'name': 'Atlas', 'bookNo': 'B-1'})
        self.book.refresh_from_db()
        self.assertEqual(self.book.available, 0)

    def test_issue_refused_when_no_copy_is_available(self):
        self.issue(studentId=self.student.pk)

        response = self.issue(staffId=self.teacher.pk)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Book not available')
        self.assertEqual(BookIssue.objects.count(), 1)

    def test_borrower_is_required(self):
        response = self.issue()
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Student or staff member is required')

        self.book.refresh_from_db()
        self.assertEqual(self.book.available, 1)

    def test_return_puts_the_copy_back_once(self):
        issue_id = self.issue(staffId=self.teacher.pk, issueDate='2025-03-01', dueDate='2025-03-10').json()['data']['id']

        response = self.give_back(issue_id, returnDate='2025-03-13')
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['message'], 'Book returned (3 days overdue)')
        self.assertEqual(body['data']['status'], 'returned')
        self.book.refresh_from_db()
        self.assertEqual(self.book.available, 1)

        response = self.give_back(issue_id)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Book already returned')
        self.book.refresh_from_db()
        self.assertEqual(self.book.available, 1)

    def test_status_filter(self):
        open_issue = BookIssue.objects.create(
            school=self.school, book=self.book, student=self.student,
            issue_date=date(2025, 1, 1), due_date=date(2025, 1, 8),
        )
        BookIssue.objects.create(
            school=self.school, book=self.book, staff=self.teacher,
            issue_date=date(2025, 1, 1), return_date=date(2025, 1, 5),
        )

        data = self.client.get('/api/library/issues', {'status': 'issued'}).json()['data']
        self.assertEqual([issue['id'] for issue in data], [open_issue.pk])
        self.assertEqual(data[0]['status'], 'overdue')

        data = self.client.get('/api/library/issues', {'status': 'overdue'}).json()['data']
        self.assertEqual([issue['id'] for issue in data], [open_issue.pk])

        data = self.client.get('/api/library/issues', {'status': 'returned'}).json()['data']
        self.assertEqual(len(data), 1)

    def test_issues_are_not_edited_directly(self):
        issue = BookIssue.objects.create(school=self.school, book=self.book, student=self.student)
        response = self.client.put(f'/api/library/issues/{issue.pk}', data='{}', content_type='application/json')
        self.assertEqual(response.status_code, 405)
