from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import SchoolScopedForm
from .models import Student


class StudentForm(SchoolScopedForm):
    """Form for admitting/editing a student."""

    unique_within_school = ('admission_no',)

    class Meta:
        model = Student
        fields = [
            'admission_no', 'admission_date',
            'first_name', 'last_name', 'gender', 'dob',
            'email', 'phone', 'category',
            'school_class', 'section', 'roll_no',
            'guardian_name', 'guardian_phone',
            'is_active',
        ]

    def clean(self):
        cleaned_data = super().clean()
        school_class = cleaned_data.get('school_class')
        section = cleaned_data.get('section')

        if section and not school_class:
            raise forms.ValidationError(_('Select a class before choosing a section.'))

        if school_class and section and school_class.sections.exists():
            if not school_class.sections.filter(pk=section.pk).exists():
                raise forms.ValidationError(_('Section does not belong to the selected class.'))

        return cleaned_data


class StudentImportForm(forms.Form):
    """Form for uploading a student spreadsheet."""

    file = forms.FileField(label=_('Excel File (.xlsx)'))

    def __init__(self, *args, max_bytes=None, **kwargs):
        self.max_bytes = max_bytes
        super().__init__(*args, **kwargs)

    def clean_file(self):
        file = self.cleaned_data.get('file')
        if file:
            if not file.name.lower().endswith('.xlsx'):
                raise forms.ValidationError(_('Only Excel files (.xlsx) are allowed.'))
            if self.max_bytes and file.size > self.max_bytes:
                raise forms.ValidationError(_('File is too large.'))
        return file
