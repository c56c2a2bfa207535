from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.decorators import school_required
from core.envelope import success_response
from core.utils import next_sequence_code
from core.views import api_endpoint
from .models import Staff


@api_endpoint(['GET'], failure=lambda method: _('Failed to generate employee ID'))
@school_required
def generate_employee_id_view(request, ctx):
    """Next free employee ID, '<SCHOOL CODE>-<YEAR>-<NNNN>'."""
    prefix = f"{ctx.school.code or 'EMP'}-{timezone.now().year}-"
    latest = (
        Staff.objects.filter(school=ctx.school, employee_id__startswith=prefix)
        .order_by('-employee_id')
        .values_list('employee_id', flat=True)
        .first()
    )
    return success_response(next_sequence_code(latest, prefix))
