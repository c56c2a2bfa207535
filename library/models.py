from decimal import Decimal

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Book(models.Model):
    """
    Library catalogue entry.
    ``available`` counts the copies on the shelf and is maintained by the API,
    never edited directly.
    """

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='books',
        verbose_name=_('School')
    )
    title = models.CharField(max_length=200, verbose_name=_('Title'))
    book_no = models.CharField(max_length=50, verbose_name=_('Book number'))
    isbn = models.CharField(max_length=20, blank=True, verbose_name=_('ISBN'))
    author = models.CharField(max_length=200, blank=True, verbose_name=_('Author'))
    publisher = models.CharField(max_length=200, blank=True, verbose_name=_('Publisher'))
    category = models.CharField(max_length=100, blank=True, verbose_name=_('Category'))
    quantity = models.PositiveIntegerField(default=1, verbose_name=_('Quantity'))
    available = models.PositiveIntegerField(default=1, verbose_name=_('Available'))
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'), verbose_name=_('Price'))
    shelf_location = models.CharField(max_length=50, blank=True, verbose_name=_('Shelf location'))
    description = models.TextField(blank=True, verbose_name=_('Description'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Book')
        verbose_name_plural = _('Books')
        ordering = ['title']

    def __str__(self):
        return self.title


class BookIssue(models.Model):
    """
    One copy of a book lent to a student or a staff member.
    Issuing takes a copy off the shelf (Book.available); returning puts it back.
    """

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='book_issues',
        verbose_name=_('School')
    )
    book = models.ForeignKey(
        Book,
        on_delete=models.CASCADE,
        related_name='issues',
        verbose_name=_('Book')
    )
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='book_issues',
        verbose_name=_('Student')
    )
    staff = models.ForeignKey(
        'staff.Staff',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='book_issues',
        verbose_name=_('Staff member')
    )
    issue_date = models.DateField(default=timezone.localdate, verbose_name=_('Issue date'))
    due_date = models.DateField(null=True, blank=True, verbose_name=_('Due date'))
    return_date = models.DateField(null=True, blank=True, verbose_name=_('Return date'))
    note = models.CharField(max_length=255, blank=True, verbose_name=_('Note'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Book issue')
        verbose_name_plural = _('Book issues')
        ordering = ['-issue_date', '-id']

    def __str__(self):
        return f"{self.book} ({self.issue_date})"

    @property
    def status(self):
        if self.return_date:
            return 'returned'
        if self.due_date and self.due_date < timezone.localdate():
            return 'overdue'
        return 'issued'
