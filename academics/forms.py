from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import SchoolScopedForm
from .models import Section, SchoolClass, Subject, TimetableEntry


class SectionForm(SchoolScopedForm):
    """Form for creating/editing sections."""

    unique_within_school = ('name',)

    class Meta:
        model = Section
        fields = ['name', 'sort_order', 'is_active']


class SchoolClassForm(SchoolScopedForm):
    """Form for creating/editing classes and the sections they have."""

    unique_within_school = ('name',)

    class Meta:
        model = SchoolClass
        fields = ['name', 'sort_order', 'is_active', 'sections']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['sort_order'].required = False


class SubjectForm(SchoolScopedForm):
    """Form for creating/editing subjects."""

    unique_within_school = ('name',)

    class Meta:
        model = Subject
        fields = ['name', 'code', 'subject_type', 'is_active']


class TimetableEntryForm(SchoolScopedForm):
    """Form for one timetable period."""

    class Meta:
        model = TimetableEntry
        fields = [
            'school_class', 'section', 'subject', 'staff',
            'day', 'start_time', 'end_time', 'room',
        ]

    def clean(self):
        cleaned_data = super().clean()
        start_time = cleaned_data.get('start_time')
        end_time = cleaned_data.get('end_time')
        school_class = cleaned_data.get('school_class')
        section = cleaned_data.get('section')

        if start_time and end_time and start_time >= end_time:
            raise forms.ValidationError(_('End time must be after start time.'))

        if school_class and section and school_class.sections.exists():
            if not school_class.sections.filter(pk=section.pk).exists():
                raise forms.ValidationError(_('Section does not belong to the selected class.'))

        return cleaned_data
