from django import forms
from django.core.exceptions import NON_FIELD_ERRORS
from django.utils.text import capfirst
from django.utils.translation import gettext_lazy as _


class SchoolScopedForm(forms.ModelForm):
    """
    Base form for records owned by a school.

    - Related-record choices are narrowed to the same school.
    - Fields named in ``unique_within_school`` must not repeat inside the school.
    - Required-field errors read "<Label> is required".
    """

    unique_within_school = ()

    def __init__(self, *args, school=None, **kwargs):
        self.school = school
        super().__init__(*args, **kwargs)

        for name, field in self.fields.items():
            field.error_messages['required'] = _('%(label)s is required') % {
                'label': capfirst(field.label or name),
            }
            queryset = getattr(field, 'queryset', None)
            if queryset is not None and school is not None and _has_school(queryset.model):
                field.queryset = queryset.filter(school=school)

    def clean(self):
        cleaned_data = super().clean()
        for name in self.unique_within_school:
            value = cleaned_data.get(name)
            if value in (None, '') or self.school is None:
                continue
            duplicates = self._meta.model.objects.filter(school=self.school, **{name: value})
            if self.instance.pk:
                duplicates = duplicates.exclude(pk=self.instance.pk)
            if duplicates.exists():
                self.add_error(name, forms.ValidationError(
                    _('%(label)s already exists') % {'label': capfirst(self.fields[name].label)},
                    code='duplicate',
                ))
        return cleaned_data


def _has_school(model):
    return any(f.name == 'school' for f in model._meta.get_fields())


def first_error(form):
    """Message of the first violated rule, in field order."""
    for name, errors in form.errors.as_data().items():
        if not errors:
            continue
        error = errors[0]
        message = next(iter(error), '')
        if name == NON_FIELD_ERRORS or error.code in ('required', 'duplicate'):
            return str(message)
        field = form.fields.get(name)
        label = capfirst(field.label) if field is not None and field.label else name
        return f"{label}: {message}"
    return str(_('Invalid request'))
