from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import SchoolScopedForm
from .models import Visitor, Enquiry


class VisitorForm(SchoolScopedForm):
    """Form for the visitor book."""

    class Meta:
        model = Visitor
        fields = ['name', 'phone', 'purpose', 'to_meet', 'id_card', 'visit_date', 'in_time', 'out_time', 'note']

    def clean(self):
        cleaned_data = super().clean()
        in_time = cleaned_data.get('in_time')
        out_time = cleaned_data.get('out_time')

        if in_time and out_time and out_time < in_time:
            raise forms.ValidationError(_('Out time cannot be before in time.'))

        return cleaned_data


class EnquiryForm(SchoolScopedForm):
    """Form for admission enquiries."""

    class Meta:
        model = Enquiry
        fields = [
            'name', 'email', 'phone', 'source', 'class_interested',
            'description', 'follow_up_date', 'status', 'note',
        ]
