from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class StudentAttendance(models.Model):
    """
    A student's attendance on one day. Class and section are copied from the
    sheet it was marked on, so later transfers do not rewrite history.
    """

    STATUS_CHOICES = [
        ('present', _('Present')),
        ('absent', _('Absent')),
        ('late', _('Late')),
        ('half_day', _('Half day')),
        ('holiday', _('Holiday')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='student_attendance',
        verbose_name=_('School')
    )
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='attendance',
        verbose_name=_('Student')
    )
    school_class = models.ForeignKey(
        'academics.SchoolClass',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='attendance',
        verbose_name=_('Class')
    )
    section = models.ForeignKey(
        'academics.Section',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='attendance',
        verbose_name=_('Section')
    )
    date = models.DateField(verbose_name=_('Date'))
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, verbose_name=_('Status'))
    remark = models.CharField(max_length=255, blank=True, verbose_name=_('Remark'))
    marked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='marked_attendance',
        verbose_name=_('Marked by')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Student attendance')
        verbose_name_plural = _('Student attendance')
        ordering = ['-date', 'student__roll_no', 'student__first_name']
        unique_together = ['student', 'date']

    def __str__(self):
        return f"{self.student} {self.date}: {self.status}"
