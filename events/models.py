from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


AUDIENCE_CHOICES = [
    ('all', _('Everyone')),
    ('students', _('Students')),
    ('staff', _('Staff')),
    ('parents', _('Parents')),
]


class Event(models.Model):
    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='events',
        verbose_name=_('School')
    )
    title = models.CharField(max_length=200, verbose_name=_('Title'))
    description = models.TextField(blank=True, verbose_name=_('Description'))
    start_date = models.DateField(verbose_name=_('Start date'))
    end_date = models.DateField(null=True, blank=True, verbose_name=_('End date'))
    location = models.CharField(max_length=200, blank=True, verbose_name=_('Location'))
    event_for = models.CharField(
        max_length=20,
        choices=AUDIENCE_CHOICES,
        default='all',
        verbose_name=_('Event for')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Event')
        verbose_name_plural = _('Events')
        ordering = ['-start_date']

    def __str__(self):
        return self.title


class Notice(models.Model):
    """Notice board entry."""

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='notices',
        verbose_name=_('School')
    )
    title = models.CharField(max_length=200, verbose_name=_('Title'))
    content = models.TextField(blank=True, verbose_name=_('Content'))
    publish_date = models.DateField(default=timezone.localdate, verbose_name=_('Publish date'))
    target_audience = models.CharField(
        max_length=20,
        choices=AUDIENCE_CHOICES,
        default='all',
        verbose_name=_('Target audience')
    )
    is_published = models.BooleanField(default=True, verbose_name=_('Published'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Notice')
        verbose_name_plural = _('Notices')
        ordering = ['-publish_date', '-created_at']

    def __str__(self):
        return self.title
