from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class Department(models.Model):
    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='departments',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=100, verbose_name=_('Department name'))
    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Department')
        verbose_name_plural = _('Departments')
        ordering = ['name']

    def __str__(self):
        return self.name


class Staff(models.Model):
    """A teacher or other employee of a school."""

    GENDER_CHOICES = [
        ('Male', _('Male')),
        ('Female', _('Female')),
        ('Other', _('Other')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='staff',
        verbose_name=_('School')
    )
    employee_id = models.CharField(max_length=30, verbose_name=_('Employee ID'))
    first_name = models.CharField(max_length=100, verbose_name=_('First name'))
    last_name = models.CharField(max_length=100, blank=True, verbose_name=_('Last name'))
    email = models.EmailField(blank=True, verbose_name=_('Email'))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_('Phone'))
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True, verbose_name=_('Gender'))
    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='staff',
        verbose_name=_('Department')
    )
    designation = models.CharField(max_length=100, blank=True, verbose_name=_('Designation'))
    joining_date = models.DateField(null=True, blank=True, verbose_name=_('Joining date'))
    basic_salary = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name=_('Basic salary')
    )
    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Staff')
        verbose_name_plural = _('Staff')
        ordering = ['-created_at']

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()
