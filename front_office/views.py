from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.decorators import school_required
from core.envelope import success_response
from core.errors import Conflict
from core.views import api_endpoint
from .api import visitors


@api_endpoint(['POST'], failure=lambda method: _('Failed to check out visitor'))
@school_required
def visitor_checkout_view(request, ctx, pk):
    """Record the visitor's out time as now."""
    visitor = visitors.get_object(ctx, pk)
    if not visitor.is_checked_in:
        raise Conflict(_('Visitor has already checked out'))

    visitor.out_time = timezone.localtime().time().replace(second=0, microsecond=0)
    visitor.save(update_fields=['out_time', 'updated_at'])

    return success_response(visitors.serialize(visitor), message=_('Visitor checked out'))
