from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class School(models.Model):
    """
    Tenant of the dashboard; staff, students and every other record belong
    to one school. Closed schools are deactivated (is_active), not deleted.

    The settings fields are read by the routes: ``library_loan_days`` sets
    the default due date of a book issue, ``allow_future_attendance`` lets
    attendance be marked ahead of the day.
    """

    name = models.CharField(max_length=200, verbose_name=_('Name'))
    code = models.CharField(max_length=20, unique=True, verbose_name=_('Code'))
    address = models.TextField(blank=True, verbose_name=_('Address'))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_('Phone'))
    email = models.EmailField(blank=True, verbose_name=_('Email'))

    # Settings
    library_loan_days = models.PositiveSmallIntegerField(
        default=14,
        validators=[MinValueValidator(1), MaxValueValidator(365)],
        verbose_name=_('Library loan days')
    )
    allow_future_attendance = models.BooleanField(default=False, verbose_name=_('Allow future attendance'))

    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('School')
        verbose_name_plural = _('Schools')
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.code})"
