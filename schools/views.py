from django.forms.models import model_to_dict
from django.utils.translation import gettext_lazy as _
from django.views.decorators.csrf import ensure_csrf_cookie

from accounts.decorators import school_required
from core.envelope import success_response
from core.errors import ValidationFailed
from core.forms import first_error
from core.utils import parse_json_body, snake_case
from core.views import api_endpoint, failure_message
from .forms import SchoolSettingsForm
from .models import School


def serialize_school(school):
    return {
        'id': school.pk,
        'name': school.name,
        'code': school.code,
        'address': school.address or None,
        'phone': school.phone or None,
        'email': school.email or None,
        'libraryLoanDays': school.library_loan_days,
        'allowFutureAttendance': school.allow_future_attendance,
    }


@ensure_csrf_cookie
@api_endpoint(['GET'], failure=lambda method: failure_message(method, 'schools'))
def public_school_list_view(request):
    """Active schools for the login screen's school picker. No session needed."""
    schools = School.objects.filter(is_active=True).order_by('name')
    return success_response([
        {'id': school.pk, 'name': school.name, 'code': school.code}
        for school in schools
    ])


@ensure_csrf_cookie
@api_endpoint(['GET', 'PUT'], failure=lambda method: failure_message(method, _('school settings')))
@school_required
def school_settings_view(request, ctx):
    """The caller's school profile and settings; PUT changes only the keys sent."""
    school = ctx.school
    if request.method == 'GET':
        return success_response(serialize_school(school))

    data = model_to_dict(school, fields=SchoolSettingsForm._meta.fields)
    for key, value in parse_json_body(request).items():
        name = snake_case(key)
        if name in data:
            data[name] = value

    form = SchoolSettingsForm(data=data, instance=school, school=school)
    if not form.is_valid():
        raise ValidationFailed(first_error(form))
    school = form.save()
    return success_response(serialize_school(school), message=_('School settings updated successfully'))
