from django.db.models import Max
from django.utils.translation import gettext_lazy as _

from core.envelope import success_response
from core.resources import Resource
from core.serializers import hhmm, relation
from core.utils import parse_bool
from .forms import SectionForm, SchoolClassForm, SubjectForm, TimetableEntryForm
from .models import Section, SchoolClass, Subject, TimetableEntry


class SectionResource(Resource):
    model = Section
    form_class = SectionForm
    name = 'section'
    plural = 'sections'
    search_fields = ('name',)
    filters = {'classId': 'classes__id'}
    field_aliases = {'orderNo': 'sort_order'}

    def serialize(self, section):
        return {
            'id': section.pk,
            'name': section.name,
            'orderNo': section.sort_order,
            'isActive': section.is_active,
        }


class SchoolClassResource(Resource):
    model = SchoolClass
    form_class = SchoolClassForm
    name = 'class'
    plural = 'classes'
    search_fields = ('name',)
    field_aliases = {'orderNo': 'sort_order', 'sectionIds': 'sections'}

    def serialize(self, school_class, with_sections=True):
        data = {
            'id': school_class.pk,
            'name': school_class.name,
            'orderNo': school_class.sort_order,
            'isActive': school_class.is_active,
        }
        if with_sections:
            data['sections'] = [relation(section) for section in school_class.sections.all()]
        return data

    def list(self, request, ctx):
        with_sections = parse_bool(request.GET.get('withSections', ''))
        queryset = self.filter_queryset(self.get_queryset(ctx), request.GET.dict())
        if with_sections:
            queryset = queryset.prefetch_related('sections')
        return success_response([
            self.serialize(school_class, with_sections=with_sections)
            for school_class in queryset
        ])

    def initial_data(self, instance):
        data = super().initial_data(instance)
        if instance.pk is None:
            # New classes go after the last one unless an order is given
            data.pop('sort_order', None)
        return data

    def before_save(self, ctx, obj, form, created):
        if form.data.get('sort_order') in (None, ''):
            current = SchoolClass.objects.filter(school=ctx.school).aggregate(
                highest=Max('sort_order'),
            )['highest']
            obj.sort_order = (current or 0) + 1

    def check_delete(self, school_class):
        if school_class.students.exists():
            return _('Cannot delete class with assigned students')
        return None


class SubjectResource(Resource):
    model = Subject
    form_class = SubjectForm
    name = 'subject'
    plural = 'subjects'
    search_fields = ('name', 'code')
    filters = {'type': 'subject_type'}
    field_aliases = {'type': 'subject_type'}

    def serialize(self, subject):
        return {
            'id': subject.pk,
            'name': subject.name,
            'code': subject.code,
            'type': subject.subject_type,
            'isActive': subject.is_active,
        }


class TimetableResource(Resource):
    model = TimetableEntry
    form_class = TimetableEntryForm
    name = 'timetable entry'
    plural = 'timetable'
    filters = {
        'classId': 'school_class_id',
        'sectionId': 'section_id',
        'day': 'day',
    }
    ordering = ('day', 'start_time')
    select_related = ('school_class', 'section', 'subject', 'staff')
    field_aliases = {
        'classId': 'school_class',
        'sectionId': 'section',
        'subjectId': 'subject',
        'staffId': 'staff',
    }

    def serialize(self, entry):
        staff = entry.staff
        return {
            'id': entry.pk,
            'classId': entry.school_class_id,
            'sectionId': entry.section_id,
            'day': entry.day,
            'startTime': hhmm(entry.start_time),
            'endTime': hhmm(entry.end_time),
            'room': entry.room or None,
            'subject': relation(entry.subject),
            'staff': {
                'id': staff.pk,
                'firstName': staff.first_name,
                'lastName': staff.last_name,
            } if staff else None,
        }


sections = SectionResource()
classes = SchoolClassResource()
subjects = SubjectResource()
timetable = TimetableResource()
