from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Student(models.Model):
    """
    A student admitted to a school, with the class/section they study in.
    Deactivated rather than deleted once admitted (is_active).
    """

    GENDER_CHOICES = [
        ('Male', _('Male')),
        ('Female', _('Female')),
        ('Other', _('Other')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='students',
        verbose_name=_('School')
    )

    admission_no = models.CharField(max_length=30, verbose_name=_('Admission number'))
    admission_date = models.DateField(default=timezone.localdate, verbose_name=_('Admission date'))

    # Student info
    first_name = models.CharField(max_length=100, verbose_name=_('First name'))
    last_name = models.CharField(max_length=100, blank=True, verbose_name=_('Last name'))
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, verbose_name=_('Gender'))
    dob = models.DateField(verbose_name=_('Date of birth'))
    email = models.EmailField(blank=True, verbose_name=_('Email'))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_('Phone'))
    category = models.CharField(max_length=50, blank=True, verbose_name=_('Category'))

    # Class assignment
    school_class = models.ForeignKey(
        'academics.SchoolClass',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='students',
        verbose_name=_('Class')
    )
    section = models.ForeignKey(
        'academics.Section',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='students',
        verbose_name=_('Section')
    )
    roll_no = models.CharField(max_length=20, blank=True, verbose_name=_('Roll number'))

    # Guardian
    guardian_name = models.CharField(max_length=100, blank=True, verbose_name=_('Guardian name'))
    guardian_phone = models.CharField(max_length=20, blank=True, verbose_name=_('Guardian phone'))

    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Student')
        verbose_name_plural = _('Students')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name} ({self.admission_no})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()
