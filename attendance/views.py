import logging

from django.db import transaction
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django.views.decorators.csrf import ensure_csrf_cookie

from accounts.decorators import school_required
from core.envelope import success_response
from core.errors import ValidationFailed
from core.forms import first_error
from core.utils import filter_value, parse_json_body
from core.views import api_endpoint
from students.models import Student
from .api import attendance_records
from .forms import AttendanceEntryForm, AttendanceSheetForm
from .models import StudentAttendance

logger = logging.getLogger(__name__)


def _sheet(ctx, date, class_id, section_id):
    form = AttendanceSheetForm(
        data={'date': date, 'school_class': class_id, 'section': section_id},
        school=ctx.school,
    )
    if not form.is_valid():
        raise ValidationFailed(first_error(form))
    return form.cleaned_data


def _sheet_students(ctx, sheet):
    return Student.objects.filter(
        school=ctx.school,
        school_class=sheet['school_class'],
        section=sheet['section'],
        is_active=True,
    ).order_by('roll_no', 'first_name')


def _sheet_row(student, record):
    return {
        'studentId': student.pk,
        'admissionNo': student.admission_no,
        'rollNo': student.roll_no or None,
        'firstName': student.first_name,
        'lastName': student.last_name or None,
        'attendance': {
            'id': record.pk,
            'status': record.status,
            'remark': record.remark or None,
        } if record else None,
    }


def attendance_sheet(request, ctx):
    """Active students of a class section with their mark for the day, if any."""
    params = request.GET
    values = [filter_value(params, name) for name in ('date', 'classId', 'sectionId')]
    if None in values:
        raise ValidationFailed(_('Date, classId and sectionId are required'))

    sheet = _sheet(ctx, *values)
    students = list(_sheet_students(ctx, sheet))
    records = {
        record.student_id: record
        for record in StudentAttendance.objects.filter(
            school=ctx.school, date=sheet['date'], student__in=students,
        )
    }
    return success_response([_sheet_row(student, records.get(student.pk)) for student in students])


def save_attendance_sheet(request, ctx):
    """
    Mark a whole class section for one day.

    Each entry is {studentId, status, remark?}; a student already marked
    that day is updated. Nothing is saved when any entry is invalid.
    """
    payload = parse_json_body(request)
    sheet = _sheet(ctx, payload.get('date'), payload.get('classId'), payload.get('sectionId'))
    if sheet['date'] > timezone.localdate() and not ctx.school.allow_future_attendance:
        raise ValidationFailed(_('Attendance cannot be marked for a future date'))

    entries = payload.get('attendances')
    if not isinstance(entries, list) or not entries:
        raise ValidationFailed(_('Attendances are required'))

    students = _sheet_students(ctx, sheet)
    marks = []
    for number, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise ValidationFailed(_('Attendance %(number)d: invalid entry') % {'number': number})
        form = AttendanceEntryForm(
            data={
                'student': entry.get('studentId'),
                'status': entry.get('status'),
                'remark': entry.get('remark') or '',
            },
            students=students,
        )
        if not form.is_valid():
            raise ValidationFailed(
                _('Attendance %(number)d: %(error)s') % {'number': number, 'error': first_error(form)}
            )
        marks.append(form.cleaned_data)

    saved = []
    with transaction.atomic():
        for mark in marks:
            record, _created = StudentAttendance.objects.update_or_create(
                school=ctx.school,
                student=mark['student'],
                date=sheet['date'],
                defaults={
                    'status': mark['status'],
                    'remark': mark['remark'],
                    'school_class': sheet['school_class'],
                    'section': sheet['section'],
                    'marked_by': ctx.user,
                },
            )
            saved.append(record)

    logger.info(
        'Attendance for class %s section %s on %s saved in school %s (%d students)',
        sheet['school_class'].pk, sheet['section'].pk, sheet['date'], ctx.school_id, len(saved),
    )
    return success_response(
        [attendance_records.serialize(record) for record in saved],
        message=_('Attendance saved for %(count)d students') % {'count': len(saved)},
    )


@ensure_csrf_cookie
@api_endpoint(
    ['GET', 'POST'],
    failure=lambda method: _('Failed to save attendance') if method == 'POST' else _('Failed to fetch attendance'),
)
@school_required
def student_attendance_view(request, ctx):
    if request.method == 'POST':
        return save_attendance_sheet(request, ctx)
    return attendance_sheet(request, ctx)
