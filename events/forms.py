from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import SchoolScopedForm
from .models import Event, Notice


class EventForm(SchoolScopedForm):
    """Form for creating/editing events."""

    class Meta:
        model = Event
        fields = ['title', 'description', 'start_date', 'end_date', 'location', 'event_for']

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')

        if start_date and end_date and end_date < start_date:
            raise forms.ValidationError(_('End date cannot be before start date.'))

        return cleaned_data


class NoticeForm(SchoolScopedForm):
    """Form for creating/editing notices."""

    class Meta:
        model = Notice
        fields = ['title', 'content', 'publish_date', 'target_audience', 'is_published']

