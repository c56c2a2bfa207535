from core.resources import Resource, status_filter
from core.serializers import iso, relation
from .forms import StudentForm
from .models import Student


class StudentResource(Resource):
    model = Student
    form_class = StudentForm
    name = 'student'
    plural = 'students'
    search_fields = ('first_name', 'last_name', 'admission_no', 'email', 'phone')
    filters = {
        'classId': 'school_class_id',
        'sectionId': 'section_id',
        'status': status_filter,
    }
    default_params = {'status': 'active'}
    paginate = True
    select_related = ('school_class', 'section')
    field_aliases = {
        'classId': 'school_class',
        'sectionId': 'section',
    }

    def serialize(self, student):
        return {
            'id': student.pk,
            'admissionNo': student.admission_no,
            'admissionDate': iso(student.admission_date),
            'firstName': student.first_name,
            'lastName': student.last_name or None,
            'gender': student.gender,
            'dob': iso(student.dob),
            'email': student.email or None,
            'phone': student.phone or None,
            'category': student.category or None,
            'rollNo': student.roll_no or None,
            'guardianName': student.guardian_name or None,
            'guardianPhone': student.guardian_phone or None,
            'isActive': student.is_active,
            'class': relation(student.school_class),
            'section': relation(student.section),
        }

    def perform_delete(self, student):
        # Admitted students are kept for records; DELETE deactivates
        student.is_active = False
        student.save(update_fields=['is_active', 'updated_at'])


students = StudentResource()
