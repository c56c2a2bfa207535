"""
The JSON envelope every API route answers with.

    {"success": true, "data": ..., "message": ..., "pagination": {...}}
    {"success": false, "error": "..."}
"""
from django.conf import settings
from django.core.paginator import Paginator
from django.http import JsonResponse


def success_response(data=None, message=None, pagination=None, status=200):
    body = {'success': True, 'data': data}
    if message:
        body['message'] = str(message)
    if pagination is not None:
        body['pagination'] = pagination
    return JsonResponse(body, status=status)


def error_response(error, status=400):
    return JsonResponse({'success': False, 'error': str(error)}, status=status)


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate(queryset, params):
    """
    Slice a queryset according to the ``page`` and ``limit`` query parameters.

    Returns (items, meta) where meta is the ``pagination`` block of the
    envelope. Pages past the end are clamped to the last page.
    """
    limit = min(
        _positive_int(params.get('limit'), settings.API_PAGE_SIZE),
        settings.API_MAX_PAGE_SIZE,
    )
    paginator = Paginator(queryset, limit)
    page = paginator.get_page(_positive_int(params.get('page'), 1))

    meta = {
        'page': page.number,
        'limit': limit,
        'total': paginator.count,
        'totalPages': paginator.num_pages if paginator.count else 0,
    }
    return list(page.object_list), meta
