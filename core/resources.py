"""
Generic JSON CRUD routes.

A ``Resource`` describes one record type (model, form, filters, serializer);
``collection_view`` and ``detail_view`` turn it into Django views:

    GET    /<resource>        list (optionally filtered and paginated)
    POST   /<resource>        create
    GET    /<resource>/<pk>   one record
    PUT    /<resource>/<pk>   update
    DELETE /<resource>/<pk>   delete

Every handler runs inside the caller's school; records of other schools are
reported as not found.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.forms.models import model_to_dict
from django.utils.text import capfirst
from django.utils.translation import gettext_lazy as _
from django.views.decorators.csrf import ensure_csrf_cookie

from accounts.decorators import school_required

from .envelope import paginate, success_response
from .errors import Conflict, NotFound, ValidationFailed
from .forms import first_error
from .utils import filter_value, parse_json_body, snake_case
from .views import api_endpoint, failure_message

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = ('id', 'school')


def status_filter(queryset, value):
    """``status`` query parameter over an ``is_active`` flag."""
    if value == 'active':
        return queryset.filter(is_active=True)
    if value == 'inactive':
        return queryset.filter(is_active=False)
    raise ValueError(value)


class Resource:
    model = None
    form_class = None
    name = ''
    plural = ''

    # Query string handling
    search_fields = ()
    filters = {}
    default_params = {}
    ordering = None
    paginate = False

    # One level of related records for display
    select_related = ()
    prefetch_related = ()

    # Wire key -> form field, for keys that are not plain camelCase
    field_aliases = {}

    collection_methods = ('GET', 'POST')
    detail_methods = ('GET', 'PUT', 'DELETE')

    def serialize(self, obj):
        raise NotImplementedError

    @property
    def label(self):
        return capfirst(self.name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_queryset(self, ctx):
        queryset = self.model.objects.filter(school=ctx.school)
        if self.select_related:
            queryset = queryset.select_related(*self.select_related)
        if self.prefetch_related:
            queryset = queryset.prefetch_related(*self.prefetch_related)
        if self.ordering:
            queryset = queryset.order_by(*self.ordering)
        return queryset

    def filter_queryset(self, queryset, params):
        """Apply ``search`` and the declared filters; all conditions are ANDed."""
        search = filter_value(params, 'search')
        if search and self.search_fields:
            query = Q()
            for field in self.search_fields:
                query |= Q(**{f'{field}__icontains': search})
            queryset = queryset.filter(query)

        for param, lookup in self.filters.items():
            value = filter_value(params, param)
            if value is None:
                continue
            try:
                if callable(lookup):
                    queryset = lookup(queryset, value)
                else:
                    queryset = queryset.filter(**{lookup: value})
            except (ValueError, TypeError, ValidationError):
                raise ValidationFailed(_('Invalid %(param)s') % {'param': param})
        return queryset

    def get_object(self, ctx, pk):
        obj = self.get_queryset(ctx).filter(pk=pk).first()
        if obj is None:
            raise NotFound(_('%(label)s not found') % {'label': self.label})
        return obj

    # ------------------------------------------------------------------
    # Payload -> form
    # ------------------------------------------------------------------

    def form_fields(self):
        return list(self.form_class.base_fields)

    def initial_data(self, instance):
        """Current values of the form's fields, as the form expects them."""
        if instance.pk is None:
            return {
                f.name: f.get_default()
                for f in self.model._meta.concrete_fields
                if f.name in self.form_fields() and f.has_default()
            }
        data = model_to_dict(instance, fields=self.form_fields())
        for key, value in data.items():
            if isinstance(value, (list, tuple)):
                data[key] = [getattr(item, 'pk', item) for item in value]
        return data

    def form_data(self, payload, instance):
        data = self.initial_data(instance)
        for key, value in payload.items():
            name = self.field_aliases.get(key, snake_case(key))
            if name in PROTECTED_FIELDS:
                continue
            data[name] = value
        return data

    def build_form(self, ctx, payload, instance=None):
        if instance is None:
            instance = self.model(school=ctx.school)
        return self.form_class(
            data=self.form_data(payload, instance),
            instance=instance,
            school=ctx.school,
        )

    def validated_form(self, ctx, payload, instance=None):
        form = self.build_form(ctx, payload, instance)
        if not form.is_valid():
            raise ValidationFailed(first_error(form))
        return form

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def before_save(self, ctx, obj, form, created):
        """Adjust the instance before it is written."""

    def check_delete(self, obj):
        """Return a message to refuse the delete, or None."""
        return None

    def perform_delete(self, obj):
        obj.delete()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list(self, request, ctx):
        params = {**self.default_params, **request.GET.dict()}
        queryset = self.filter_queryset(self.get_queryset(ctx), params)
        if self.paginate:
            items, meta = paginate(queryset, params)
            return success_response([self.serialize(obj) for obj in items], pagination=meta)
        return success_response([self.serialize(obj) for obj in queryset])

    def retrieve(self, request, ctx, pk):
        return success_response(self.serialize(self.get_object(ctx, pk)))

    def save(self, ctx, form, created):
        with transaction.atomic():
            obj = form.save(commit=False)
            obj.school = ctx.school
            self.before_save(ctx, obj, form, created)
            obj.save()
            form.save_m2m()
        return obj

    def create(self, request, ctx):
        form = self.validated_form(ctx, parse_json_body(request))
        obj = self.save(ctx, form, created=True)
        logger.info('%s %s created in school %s', self.name, obj.pk, ctx.school_id)
        return success_response(
            self.serialize(obj),
            message=_('%(label)s created successfully') % {'label': self.label},
            status=201,
        )

    def update(self, request, ctx, pk):
        instance = self.get_object(ctx, pk)
        form = self.validated_form(ctx, parse_json_body(request), instance)
        obj = self.save(ctx, form, created=False)
        return success_response(
            self.serialize(obj),
            message=_('%(label)s updated successfully') % {'label': self.label},
        )

    def destroy(self, request, ctx, pk):
        obj = self.get_object(ctx, pk)
        refusal = self.check_delete(obj)
        if refusal:
            raise Conflict(refusal)
        self.perform_delete(obj)
        logger.info('%s %s deleted in school %s', self.name, pk, ctx.school_id)
        return success_response(
            message=_('%(label)s deleted successfully') % {'label': self.label},
        )


def collection_view(resource):
    """List + create view for a resource."""
    def failure(method):
        return failure_message(method, resource.plural if method == 'GET' else resource.name)

    @ensure_csrf_cookie
    @api_endpoint(resource.collection_methods, failure=failure)
    @school_required
    def view(request, ctx):
        if request.method == 'POST':
            return resource.create(request, ctx)
        return resource.list(request, ctx)

    return view


def detail_view(resource):
    """Retrieve + update + delete view for a resource."""
    def failure(method):
        return failure_message(method, resource.name)

    @ensure_csrf_cookie
    @api_endpoint(resource.detail_methods, failure=failure)
    @school_required
    def view(request, ctx, pk):
        if request.method == 'PUT':
            return resource.update(request, ctx, pk)
        if request.method == 'DELETE':
            return resource.destroy(request, ctx, pk)
        return resource.retrieve(request, ctx, pk)

    return view
