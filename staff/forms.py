from core.forms import SchoolScopedForm
from .models import Department, Staff


class DepartmentForm(SchoolScopedForm):
    unique_within_school = ('name',)

    class Meta:
        model = Department
        fields = ['name', 'is_active']


class StaffForm(SchoolScopedForm):
    """Form for creating/editing staff members."""

    unique_within_school = ('employee_id',)

    class Meta:
        model = Staff
        fields = [
            'employee_id', 'first_name', 'last_name', 'email', 'phone',
            'gender', 'department', 'designation', 'joining_date',
            'basic_salary', 'is_active',
        ]
