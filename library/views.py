from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_date
from django.utils.translation import gettext_lazy as _, ngettext

from accounts.decorators import school_required
from core.envelope import success_response
from core.errors import Conflict, ValidationFailed
from core.utils import parse_json_body
from core.views import api_endpoint
from .api import book_issues
from .models import Book


def _return_date(payload, issue):
    value = payload.get('returnDate')
    if not value:
        return timezone.localdate()
    try:
        returned = parse_date(str(value))
    except ValueError:
        returned = None
    if returned is None:
        raise ValidationFailed(_('Invalid return date'))
    if returned < issue.issue_date:
        raise ValidationFailed(_('Return date cannot be before issue date'))
    return returned


@api_endpoint(['POST'], failure=lambda method: _('Failed to return book'))
@school_required
def book_return_view(request, ctx, pk):
    """Close an issue and put the copy back on the shelf."""
    issue = book_issues.get_object(ctx, pk)
    if issue.return_date:
        raise Conflict(_('Book already returned'))
    issue.return_date = _return_date(parse_json_body(request), issue)

    with transaction.atomic():
        issue.save(update_fields=['return_date', 'updated_at'])
        book = Book.objects.select_for_update().get(pk=issue.book_id)
        book.available = min(book.available + 1, book.quantity)
        book.save(update_fields=['available', 'updated_at'])

    overdue_days = (issue.return_date - issue.due_date).days if issue.due_date else 0
    if overdue_days > 0:
        message = ngettext(
            'Book returned (%(days)d day overdue)',
            'Book returned (%(days)d days overdue)',
            overdue_days,
        ) % {'days': overdue_days}
    else:
        message = _('Book returned successfully')

    issue.book = book
    return success_response(book_issues.serialize(issue), message=message)
