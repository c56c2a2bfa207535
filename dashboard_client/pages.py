"""
Page definitions for the dashboard screens.
"""
from datetime import date

from .listing import Column, count_by, count_where, full_name, sum_of
from .page import PageConfig, Reference


def _relation_id(record, name):
    related = record.get(name)
    return related.get('id') if isinstance(related, dict) else None


def timetable_page():
    """Weekly periods of one class section."""
    return PageConfig(
        endpoint='api/academics/timetable',
        noun='timetable entry',
        plural='timetable',
        filters=('classId', 'sectionId'),
        dependencies={'classId': ('sectionId',)},
        required_filters=('classId', 'sectionId'),
        references={
            'classes': Reference('api/academics/classes'),
            'sections': Reference('api/academics/sections', depends_on=('classId',)),
            'subjects': Reference('api/academics/subjects'),
            'staff': Reference('api/staff', params={'status': 'active', 'limit': 100}),
        },
        defaults={
            'day': 'Monday',
            'startTime': '',
            'endTime': '',
            'subjectId': '',
            'staffId': '',
            'room': '',
        },
        required_fields=('day', 'startTime', 'endTime'),
        numeric_fields=('subjectId', 'staffId'),
        nullable_fields=('subjectId', 'staffId', 'room'),
        labels={'staffId': 'Teacher'},
        seed=lambda record: {
            'subjectId': _relation_id(record, 'subject'),
            'staffId': _relation_id(record, 'staff'),
        },
        body_from_filters={'classId': 'classId', 'sectionId': 'sectionId'},
        columns=(
            Column('day', 'Day'),
            Column('startTime', 'Start'),
            Column('endTime', 'End'),
            Column('subject.name', 'Subject'),
            Column('staff', 'Teacher', value=lambda record: full_name(record.get('staff'))),
            Column('room', 'Room'),
        ),
        stats={'periods': len},
    )


def books_page():
    """Library catalogue; search and category narrowing happen in the browser."""
    return PageConfig(
        endpoint='api/library/books',
        noun='book',
        plural='books',
        page_size=100,
        defaults={
            'title': '',
            'bookNo': '',
            'isbn': '',
            'author': '',
            'publisher': '',
            'category': '',
            'quantity': 1,
            'price': 0,
            'shelfLocation': '',
            'description': '',
        },
        required_fields=('title', 'bookNo'),
        numeric_fields=('quantity', 'price'),
        labels={'bookNo': 'Book number', 'isbn': 'ISBN'},
        columns=(
            Column('bookNo', 'Book No'),
            Column('title', 'Title'),
            Column('author', 'Author'),
            Column('category', 'Category'),
            Column('quantity', 'Qty'),
            Column('availableQuantity', 'Available'),
            Column('shelfLocation', 'Shelf'),
        ),
        search_fields=('title', 'author', 'bookNo', 'isbn'),
        predicates={'category': lambda record, value: record.get('category') == value},
        stats={
            'titles': len,
            'totalCopies': lambda items: sum_of(items, 'quantity'),
            'available': lambda items: sum_of(items, 'availableQuantity'),
            'issued': lambda items: sum_of(items, 'quantity') - sum_of(items, 'availableQuantity'),
        },
    )


def notices_page():
    return PageConfig(
        endpoint='api/events/notices',
        noun='notice',
        plural='notices',
        filters=('audience',),
        defaults={
            'title': '',
            'content': '',
            'publishDate': date.today().isoformat(),
            'targetAudience': 'all',
            'isPublished': True,
        },
        required_fields=('title', 'publishDate'),
        nullable_fields=('content',),
        columns=(
            Column('title', 'Title'),
            Column('publishDate', 'Date'),
            Column('targetAudience', 'Audience'),
            Column('isPublished', 'Published', value=lambda record: 'Yes' if record.get('isPublished') else 'No'),
        ),
        search_fields=('title', 'content'),
        stats={
            'total': len,
            'published': lambda items: count_where(items, lambda record: record.get('isPublished')),
        },
    )


def students_page():
    """Student list, filtered and paginated on the server."""
    return PageConfig(
        endpoint='api/students',
        noun='student',
        plural='students',
        filters=('classId', 'sectionId', 'status', 'search'),
        dependencies={'classId': ('sectionId',)},
        initial_filters={'status': 'active'},
        page_size=20,
        references={
            'classes': Reference('api/academics/classes'),
            'sections': Reference('api/academics/sections', depends_on=('classId',)),
        },
        defaults={
            'admissionNo': '',
            'firstName': '',
            'lastName': '',
            'gender': 'Male',
            'dob': '',
            'email': '',
            'phone': '',
            'classId': '',
            'sectionId': '',
            'rollNo': '',
            'guardianName': '',
            'guardianPhone': '',
        },
        required_fields=('admissionNo', 'firstName', 'gender', 'dob'),
        numeric_fields=('classId', 'sectionId'),
        nullable_fields=('classId', 'sectionId'),
        labels={'dob': 'Date of birth', 'admissionNo': 'Admission number'},
        seed=lambda record: {
            'classId': _relation_id(record, 'class'),
            'sectionId': _relation_id(record, 'section'),
        },
        columns=(
            Column('admissionNo', 'Admission No'),
            Column('name', 'Name', value=full_name),
            Column('class.name', 'Class'),
            Column('section.name', 'Section'),
            Column('rollNo', 'Roll'),
            Column('guardianPhone', 'Guardian Phone'),
        ),
        stats={
            'onPage': len,
            'active': lambda items: count_where(items, lambda record: record.get('isActive')),
        },
    )


def visitors_page():
    """Visitor book of the front office."""
    return PageConfig(
        endpoint='api/front-office/visitors',
        noun='visitor',
        plural='visitors',
        filters=('date', 'search'),
        defaults={
            'name': '',
            'phone': '',
            'purpose': '',
            'toMeet': '',
            'idCard': '',
            'date': date.today().isoformat(),
            'inTime': '',
            'outTime': '',
            'note': '',
        },
        required_fields=('name', 'purpose'),
        nullable_fields=('inTime', 'outTime'),
        columns=(
            Column('name', 'Visitor'),
            Column('phone', 'Phone'),
            Column('purpose', 'Purpose'),
            Column('toMeet', 'To Meet'),
            Column('inTime', 'In'),
            Column('outTime', 'Out'),
        ),
        stats={
            'total': len,
            'checkedIn': lambda items: count_where(items, lambda record: record.get('checkedIn')),
        },
    )


def book_issues_page():
    """Books out on loan; closing an issue is the 'return' action."""
    return PageConfig(
        endpoint='api/library/issues',
        noun='book issue',
        plural='book issues',
        filters=('status', 'bookId', 'search'),
        initial_filters={'status': 'issued'},
        page_size=20,
        references={
            'books': Reference('api/library/books', params={'isAvailable': 'true', 'limit': 100}),
            'students': Reference('api/students', params={'limit': 100}),
            'staff': Reference('api/staff', params={'status': 'active', 'limit': 100}),
        },
        defaults={
            'bookId': '',
            'studentId': '',
            'staffId': '',
            'issueDate': date.today().isoformat(),
            'dueDate': '',
            'note': '',
        },
        required_fields=('bookId', 'issueDate'),
        numeric_fields=('bookId', 'studentId', 'staffId'),
        nullable_fields=('studentId', 'staffId', 'dueDate'),
        labels={'bookId': 'Book', 'staffId': 'Staff member'},
        columns=(
            Column('book.name', 'Book'),
            Column('borrower', 'Borrower', value=lambda record: (record.get('student') or record.get('staff') or {}).get('name')),
            Column('issueDate', 'Issued'),
            Column('dueDate', 'Due'),
            Column('returnDate', 'Returned'),
            Column('status', 'Status'),
        ),
        stats={
            'onPage': len,
            'overdue': lambda items: count_where(items, lambda record: record.get('status') == 'overdue'),
        },
    )


ATTENDANCE_STATUSES = ('present', 'absent', 'late', 'half_day', 'holiday')


def attendance_page():
    """Attendance sheet of one class section on one day."""
    return PageConfig(
        endpoint='api/attendance/students',
        noun='attendance',
        plural='attendance',
        id_field='studentId',
        filters=('classId', 'sectionId', 'date'),
        dependencies={'classId': ('sectionId',)},
        required_filters=('classId', 'sectionId', 'date'),
        initial_filters={'date': date.today().isoformat()},
        references={
            'classes': Reference('api/academics/classes'),
            'sections': Reference('api/academics/sections', depends_on=('classId',)),
        },
        columns=(
            Column('rollNo', 'Roll'),
            Column('admissionNo', 'Admission No'),
            Column('name', 'Name', value=full_name),
            Column('attendance.status', 'Status'),
            Column('attendance.remark', 'Remark'),
        ),
        search_fields=('firstName', 'lastName', 'admissionNo'),
        stats={
            'students': len,
            'marked': lambda items: count_where(items, lambda record: record.get('attendance')),
            'byStatus': lambda items: count_by(
                [record for record in items if record.get('attendance')], 'attendance.status'
            ),
        },
    )
