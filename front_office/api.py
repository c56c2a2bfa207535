from django.utils import timezone

from core.resources import Resource
from core.serializers import hhmm, iso
from .forms import VisitorForm, EnquiryForm
from .models import Visitor, Enquiry


class VisitorResource(Resource):
    model = Visitor
    form_class = VisitorForm
    name = 'visitor'
    plural = 'visitors'
    search_fields = ('name', 'phone', 'purpose', 'to_meet')
    filters = {'date': 'visit_date'}
    field_aliases = {'date': 'visit_date'}

    def serialize(self, visitor):
        return {
            'id': visitor.pk,
            'name': visitor.name,
            'phone': visitor.phone or None,
            'purpose': visitor.purpose,
            'toMeet': visitor.to_meet or None,
            'idCard': visitor.id_card or None,
            'date': iso(visitor.visit_date),
            'inTime': hhmm(visitor.in_time),
            'outTime': hhmm(visitor.out_time),
            'checkedIn': visitor.is_checked_in,
            'note': visitor.note or None,
        }

    def before_save(self, ctx, visitor, form, created):
        if created and visitor.in_time is None:
            visitor.in_time = timezone.localtime().time().replace(second=0, microsecond=0)


class EnquiryResource(Resource):
    model = Enquiry
    form_class = EnquiryForm
    name = 'enquiry'
    plural = 'enquiries'
    search_fields = ('name', 'phone', 'email')
    filters = {
        'status': 'status',
        'source': 'source',
    }

    def serialize(self, enquiry):
        return {
            'id': enquiry.pk,
            'name': enquiry.name,
            'email': enquiry.email or None,
            'phone': enquiry.phone or None,
            'source': enquiry.source or None,
            'classInterested': enquiry.class_interested or None,
            'description': enquiry.description or None,
            'followUpDate': iso(enquiry.follow_up_date),
            'status': enquiry.status,
            'note': enquiry.note or None,
        }


visitors = VisitorResource()
enquiries = EnquiryResource()
