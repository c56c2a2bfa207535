from core.resources import Resource
from core.serializers import iso
from core.utils import parse_bool
from .forms import EventForm, NoticeForm
from .models import Event, Notice


def published_filter(queryset, value):
    return queryset.filter(is_published=parse_bool(value))


class EventResource(Resource):
    model = Event
    form_class = EventForm
    name = 'event'
    plural = 'events'
    search_fields = ('title', 'location')
    filters = {
        'eventFor': 'event_for',
        'from': 'start_date__gte',
        'to': 'start_date__lte',
    }

    def serialize(self, event):
        return {
            'id': event.pk,
            'title': event.title,
            'description': event.description or None,
            'startDate': iso(event.start_date),
            'endDate': iso(event.end_date),
            'location': event.location or None,
            'eventFor': event.event_for,
        }


class NoticeResource(Resource):
    model = Notice
    form_class = NoticeForm
    name = 'notice'
    plural = 'notices'
    search_fields = ('title', 'content')
    filters = {
        'audience': 'target_audience',
        'published': published_filter,
    }

    def serialize(self, notice):
        return {
            'id': notice.pk,
            'title': notice.title,
            'content': notice.content or None,
            'publishDate': iso(notice.publish_date),
            'targetAudience': notice.target_audience,
            'isPublished': notice.is_published,
        }


events = EventResource()
notices = NoticeResource()
