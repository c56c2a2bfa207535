from core.resources import Resource
from core.serializers import iso, relation
from .forms import AttendanceForm
from .models import StudentAttendance


class AttendanceRecordResource(Resource):
    """Saved attendance records, for reports and single corrections."""

    model = StudentAttendance
    form_class = AttendanceForm
    name = 'attendance record'
    plural = 'attendance records'
    search_fields = ('student__first_name', 'student__last_name', 'student__admission_no')
    filters = {
        'studentId': 'student_id',
        'classId': 'school_class_id',
        'sectionId': 'section_id',
        'date': 'date',
        'from': 'date__gte',
        'to': 'date__lte',
        'status': 'status',
    }
    paginate = True
    select_related = ('student', 'school_class', 'section')
    # Records are created by saving a sheet
    collection_methods = ('GET',)

    def serialize(self, record):
        return {
            'id': record.pk,
            'student': relation(record.student, 'full_name', admissionNo='admission_no'),
            'class': relation(record.school_class),
            'section': relation(record.section),
            'date': iso(record.date),
            'status': record.status,
            'remark': record.remark or None,
        }


attendance_records = AttendanceRecordResource()
