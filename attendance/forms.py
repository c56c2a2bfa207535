from django import forms
from django.utils.translation import gettext_lazy as _

from academics.models import SchoolClass, Section
from core.forms import SchoolScopedForm
from .models import StudentAttendance


class AttendanceSheetForm(forms.Form):
    """The class, section and day an attendance sheet is for."""

    date = forms.DateField(error_messages={'required': _('Date is required')})
    school_class = forms.ModelChoiceField(
        queryset=SchoolClass.objects.none(),
        label=_('Class'),
        error_messages={'required': _('Class is required')},
    )
    section = forms.ModelChoiceField(
        queryset=Section.objects.none(),
        label=_('Section'),
        error_messages={'required': _('Section is required')},
    )

    def __init__(self, *args, school=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['school_class'].queryset = SchoolClass.objects.filter(school=school)
        self.fields['section'].queryset = Section.objects.filter(school=school)

    def clean(self):
        cleaned_data = super().clean()
        school_class = cleaned_data.get('school_class')
        section = cleaned_data.get('section')

        if school_class and section and school_class.sections.exists():
            if not school_class.sections.filter(pk=section.pk).exists():
                raise forms.ValidationError(_('Section does not belong to the selected class.'))

        return cleaned_data


class AttendanceEntryForm(forms.Form):
    """One student's mark on a sheet; ``students`` are the sheet's students."""

    student = forms.ModelChoiceField(
        queryset=None,
        label=_('Student'),
        error_messages={'required': _('Student is required')},
    )
    status = forms.ChoiceField(
        choices=StudentAttendance.STATUS_CHOICES,
        label=_('Status'),
        error_messages={'required': _('Status is required')},
    )
    remark = forms.CharField(max_length=255, required=False, label=_('Remark'))

    def __init__(self, *args, students=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['student'].queryset = students


class AttendanceForm(SchoolScopedForm):
    """Correcting a single attendance record."""

    class Meta:
        model = StudentAttendance
        fields = ['status', 'remark']
