import logging

from django.conf import settings
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from accounts.decorators import school_required
from academics.models import SchoolClass, Section
from core.envelope import success_response
from core.errors import ValidationFailed
from core.forms import first_error
from core.utils import next_sequence_code
from core.views import api_endpoint
from .api import students
from .forms import StudentImportForm
from .models import Student
from .utils import parse_student_workbook

logger = logging.getLogger(__name__)


@api_endpoint(['GET'], failure=lambda method: _('Failed to generate admission number'))
@school_required
def generate_admission_no_view(request, ctx):
    """Next admission number of the current year, 'YYYYNNNN'."""
    prefix = str(timezone.localdate().year)
    latest = (
        Student.objects.filter(school=ctx.school, admission_no__startswith=prefix)
        .order_by('-admission_no')
        .values_list('admission_no', flat=True)
        .first()
    )
    return success_response(next_sequence_code(latest, prefix))


@api_endpoint(['POST'], failure=lambda method: _('Failed to import students'))
@school_required
def student_import_view(request, ctx):
    """
    Import students from an uploaded .xlsx file.

    Rows are matched on admission number: existing students are updated,
    others created. Rows that fail validation are reported, not imported.
    """
    form = StudentImportForm(request.POST, request.FILES, max_bytes=settings.STUDENT_IMPORT_MAX_BYTES)
    if not form.is_valid():
        raise ValidationFailed(first_error(form))

    try:
        rows = parse_student_workbook(form.cleaned_data['file'])
    except ValueError as e:
        raise ValidationFailed(str(e))

    if not rows:
        raise ValidationFailed(_('No valid student data found in the file.'))

    classes = {c.name.lower(): c for c in SchoolClass.objects.filter(school=ctx.school)}
    sections = {s.name.lower(): s for s in Section.objects.filter(school=ctx.school)}

    created_count = 0
    updated_count = 0
    errors = []

    for row_number, data in rows:
        has_class = 'class' in data
        has_section = 'section' in data
        class_name = data.pop('class', '')
        section_name = data.pop('section', '')
        if class_name and class_name.lower() not in classes:
            errors.append({'row': row_number, 'error': str(_('Unknown class "%(name)s"') % {'name': class_name})})
            continue
        if section_name and section_name.lower() not in sections:
            errors.append({'row': row_number, 'error': str(_('Unknown section "%(name)s"') % {'name': section_name})})
            continue

        payload = {key: value or None for key, value in data.items()}
        # Columns missing from the sheet leave the stored assignment alone
        if has_class:
            payload['school_class'] = classes[class_name.lower()].pk if class_name else None
        if has_section:
            payload['section'] = sections[section_name.lower()].pk if section_name else None

        existing = Student.objects.filter(school=ctx.school, admission_no=data.get('admission_no')).first()
        student_form = students.build_form(ctx, payload, existing)
        if not student_form.is_valid():
            errors.append({'row': row_number, 'error': first_error(student_form)})
            continue

        students.save(ctx, student_form, created=existing is None)
        if existing is None:
            created_count += 1
        else:
            updated_count += 1

    logger.info(
        'Student import for school %s: %d created, %d updated, %d rejected',
        ctx.school_id, created_count, updated_count, len(errors),
    )
    return success_response(
        {'created': created_count, 'updated': updated_count, 'errors': errors},
        message=_('Import complete: %(created)d students created, %(updated)d updated.') % {
            'created': created_count,
            'updated': updated_count,
        },
    )
