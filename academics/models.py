from django.db import models
from django.utils.translation import gettext_lazy as _


class Section(models.Model):
    """Section (A, B, C...) shared by the classes of a school."""

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='sections',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=50, verbose_name=_('Section name'))
    sort_order = models.PositiveIntegerField(default=0, verbose_name=_('Sort order'))
    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Section')
        verbose_name_plural = _('Sections')
        ordering = ['sort_order', 'name']

    def __str__(self):
        return self.name


class SchoolClass(models.Model):
    """A class/grade of a school, with the sections it is split into."""

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='classes',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=50, verbose_name=_('Class name'))
    sort_order = models.PositiveIntegerField(default=0, verbose_name=_('Sort order'))
    is_active = models.BooleanField(default=True, verbose_name=_('Active'))
    sections = models.ManyToManyField(
        Section,
        blank=True,
        related_name='classes',
        verbose_name=_('Sections')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Class')
        verbose_name_plural = _('Classes')
        ordering = ['sort_order', 'name']

    def __str__(self):
        return self.name


class Subject(models.Model):
    TYPE_CHOICES = [
        ('theory', _('Theory')),
        ('practical', _('Practical')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='subjects',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=100, verbose_name=_('Subject name'))
    code = models.CharField(max_length=20, blank=True, verbose_name=_('Subject code'))
    subject_type = models.CharField(
        max_length=20,
        choices=TYPE_CHOICES,
        default='theory',
        verbose_name=_('Type')
    )
    is_active = models.BooleanField(default=True, verbose_name=_('Active'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Subject')
        verbose_name_plural = _('Subjects')
        ordering = ['name']

    def __str__(self):
        return self.name


class TimetableEntry(models.Model):
    """One period of a class section's weekly timetable."""

    DAY_CHOICES = [
        ('Monday', _('Monday')),
        ('Tuesday', _('Tuesday')),
        ('Wednesday', _('Wednesday')),
        ('Thursday', _('Thursday')),
        ('Friday', _('Friday')),
        ('Saturday', _('Saturday')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='timetable_entries',
        verbose_name=_('School')
    )
    school_class = models.ForeignKey(
        SchoolClass,
        on_delete=models.CASCADE,
        related_name='timetable_entries',
        verbose_name=_('Class')
    )
    section = models.ForeignKey(
        Section,
        on_delete=models.CASCADE,
        related_name='timetable_entries',
        verbose_name=_('Section')
    )
    subject = models.ForeignKey(
        Subject,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='timetable_entries',
        verbose_name=_('Subject')
    )
    staff = models.ForeignKey(
        'staff.Staff',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='timetable_entries',
        verbose_name=_('Teacher')
    )
    day = models.CharField(max_length=10, choices=DAY_CHOICES, verbose_name=_('Day'))
    start_time = models.TimeField(verbose_name=_('Start time'))
    end_time = models.TimeField(verbose_name=_('End time'))
    room = models.CharField(max_length=50, blank=True, verbose_name=_('Room'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Timetable Entry')
        verbose_name_plural = _('Timetable Entries')
        ordering = ['school_class', 'section', 'day', 'start_time']

    def __str__(self):
        return f"{self.school_class} {self.section} {self.day} {self.start_time:%H:%M}"
