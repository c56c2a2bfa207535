from core.forms import SchoolScopedForm
from .models import School


class SchoolSettingsForm(SchoolScopedForm):
    """Profile and settings a school admin may change; the code is fixed."""

    class Meta:
        model = School
        fields = ['name', 'address', 'phone', 'email', 'library_loan_days', 'allow_future_attendance']
