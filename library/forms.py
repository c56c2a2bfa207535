from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import SchoolScopedForm
from .models import Book, BookIssue


class BookForm(SchoolScopedForm):
    """Form for adding/editing books."""

    unique_within_school = ('book_no',)

    class Meta:
        model = Book
        fields = [
            'title', 'book_no', 'isbn', 'author', 'publisher', 'category',
            'quantity', 'price', 'shelf_location', 'description',
        ]


class BookIssueForm(SchoolScopedForm):
    """Lending a book; the borrower is either a student or a staff member."""

    class Meta:
        model = BookIssue
        fields = ['book', 'student', 'staff', 'issue_date', 'due_date', 'note']

    def clean(self):
        cleaned_data = super().clean()
        student = cleaned_data.get('student')
        staff = cleaned_data.get('staff')
        issue_date = cleaned_data.get('issue_date')
        due_date = cleaned_data.get('due_date')

        if not student and not staff:
            raise forms.ValidationError(_('Student or staff member is required'))
        if student and staff:
            raise forms.ValidationError(_('A book is issued to a student or a staff member, not both'))
        if issue_date and due_date and due_date < issue_date:
            raise forms.ValidationError(_('Due date cannot be before issue date'))
        return cleaned_data
