from dataclasses import dataclass
from functools import wraps

from core.errors import Unauthorized


@dataclass(frozen=True)
class SchoolContext:
    """The authenticated caller and the school every query is scoped to."""

    user: object
    school: object

    @property
    def school_id(self):
        return self.school.pk


def resolve_school_context(request):
    """Build the caller's context from the session, or None when there is none."""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    school = user.school
    if school is None or not school.is_active:
        return None
    return SchoolContext(user=user, school=school)


def school_required(view_func):
    """
    Decorator that resolves the caller's SchoolContext and passes it to the
    view as the argument after ``request``.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        ctx = resolve_school_context(request)
        if ctx is None:
            raise Unauthorized()
        return view_func(request, ctx, *args, **kwargs)
    return wrapper
