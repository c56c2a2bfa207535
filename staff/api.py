from django.utils.translation import gettext_lazy as _

from core.resources import Resource, status_filter
from core.serializers import iso, number, relation
from .forms import DepartmentForm, StaffForm
from .models import Department, Staff


class DepartmentResource(Resource):
    model = Department
    form_class = DepartmentForm
    name = 'department'
    plural = 'departments'
    search_fields = ('name',)
    filters = {'status': status_filter}

    def serialize(self, department):
        return {
            'id': department.pk,
            'name': department.name,
            'isActive': department.is_active,
        }

    def check_delete(self, department):
        if department.staff.exists():
            return _('Cannot delete department with assigned staff')
        return None


class StaffResource(Resource):
    model = Staff
    form_class = StaffForm
    name = 'staff member'
    plural = 'staff'
    search_fields = ('first_name', 'last_name', 'employee_id', 'email', 'phone')
    filters = {
        'departmentId': 'department_id',
        'status': status_filter,
    }
    paginate = True
    select_related = ('department',)
    field_aliases = {'departmentId': 'department'}

    def serialize(self, staff):
        return {
            'id': staff.pk,
            'employeeId': staff.employee_id,
            'firstName': staff.first_name,
            'lastName': staff.last_name,
            'email': staff.email or None,
            'phone': staff.phone or None,
            'gender': staff.gender or None,
            'designation': staff.designation or None,
            'joiningDate': iso(staff.joining_date),
            'basicSalary': number(staff.basic_salary),
            'isActive': staff.is_active,
            'department': relation(staff.department),
        }


departments = DepartmentResource()
staff = StaffResource()
