from datetime import timedelta

from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.errors import Conflict
from core.resources import Resource
from core.serializers import iso, number, relation
from core.utils import parse_bool
from .forms import BookForm, BookIssueForm
from .models import Book, BookIssue


def availability_filter(queryset, value):
    if parse_bool(value):
        return queryset.filter(available__gt=0)
    return queryset


def issue_status_filter(queryset, value):
    """``status`` = issued (not returned) | returned | overdue."""
    if value == 'issued':
        return queryset.filter(return_date__isnull=True)
    if value == 'returned':
        return queryset.filter(return_date__isnull=False)
    if value == 'overdue':
        return queryset.filter(return_date__isnull=True, due_date__lt=timezone.localdate())
    raise ValueError(value)


class BookResource(Resource):
    model = Book
    form_class = BookForm
    name = 'book'
    plural = 'books'
    search_fields = ('title', 'book_no', 'author', 'isbn')
    filters = {
        'category': 'category',
        'isAvailable': availability_filter,
    }
    paginate = True

    def serialize(self, book):
        return {
            'id': book.pk,
            'title': book.title,
            'bookNo': book.book_no,
            'isbn': book.isbn or None,
            'author': book.author or None,
            'publisher': book.publisher or None,
            'category': book.category or None,
            'quantity': book.quantity,
            'availableQuantity': book.available,
            'price': number(book.price),
            'shelfLocation': book.shelf_location or None,
            'description': book.description or None,
        }

    def before_save(self, ctx, book, form, created):
        if created:
            book.available = book.quantity
        else:
            # Copies added or removed change the shelf count by the same amount
            previous = form.initial.get('quantity') or 0
            book.available = max(book.available + book.quantity - previous, 0)

    def check_delete(self, book):
        unreturned = book.issues.filter(return_date__isnull=True).count()
        if unreturned:
            return _('Cannot delete book with %(count)d unreturned copies') % {'count': unreturned}
        return None


class BookIssueResource(Resource):
    model = BookIssue
    form_class = BookIssueForm
    name = 'book issue'
    plural = 'book issues'
    search_fields = ('book__title', 'book__book_no', 'student__first_name', 'staff__first_name')
    filters = {
        'bookId': 'book_id',
        'studentId': 'student_id',
        'staffId': 'staff_id',
        'status': issue_status_filter,
    }
    paginate = True
    select_related = ('book', 'student', 'staff')
    field_aliases = {
        'bookId': 'book',
        'studentId': 'student',
        'staffId': 'staff',
    }
    # Issues are closed through the return route, never edited
    detail_methods = ('GET',)

    def serialize(self, issue):
        return {
            'id': issue.pk,
            'book': relation(issue.book, 'title', bookNo='book_no'),
            'student': relation(issue.student, 'full_name', admissionNo='admission_no'),
            'staff': relation(issue.staff, 'full_name', employeeId='employee_id'),
            'issueDate': iso(issue.issue_date),
            'dueDate': iso(issue.due_date),
            'returnDate': iso(issue.return_date),
            'status': issue.status,
            'note': issue.note or None,
        }

    def before_save(self, ctx, issue, form, created):
        if not created:
            return
        if issue.due_date is None:
            issue.due_date = issue.issue_date + timedelta(days=ctx.school.library_loan_days)

        book = Book.objects.select_for_update().get(pk=issue.book_id)
        if book.available <= 0:
            raise Conflict(_('Book not available'))
        book.available -= 1
        book.save(update_fields=['available', 'updated_at'])


books = BookResource()
book_issues = BookIssueResource()
