from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Visitor(models.Model):
    """Visitor book entry; out_time stays empty until the visitor checks out."""

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='visitors',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=100, verbose_name=_('Visitor name'))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_('Phone'))
    purpose = models.CharField(max_length=200, verbose_name=_('Purpose'))
    to_meet = models.CharField(max_length=100, blank=True, verbose_name=_('Person to meet'))
    id_card = models.CharField(max_length=100, blank=True, verbose_name=_('ID card'))
    visit_date = models.DateField(default=timezone.localdate, verbose_name=_('Date'))
    in_time = models.TimeField(null=True, blank=True, verbose_name=_('In time'))
    out_time = models.TimeField(null=True, blank=True, verbose_name=_('Out time'))
    note = models.TextField(blank=True, verbose_name=_('Note'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Visitor')
        verbose_name_plural = _('Visitors')
        ordering = ['-visit_date', '-in_time']

    def __str__(self):
        return f"{self.name} ({self.visit_date})"

    @property
    def is_checked_in(self):
        return self.out_time is None


class Enquiry(models.Model):
    """Admission enquiry and its follow-up state."""

    STATUS_CHOICES = [
        ('active', _('Active')),
        ('passive', _('Passive')),
        ('won', _('Won')),
        ('lost', _('Lost')),
        ('dead', _('Dead')),
    ]

    school = models.ForeignKey(
        'schools.School',
        on_delete=models.CASCADE,
        related_name='enquiries',
        verbose_name=_('School')
    )
    name = models.CharField(max_length=100, verbose_name=_('Name'))
    email = models.EmailField(blank=True, verbose_name=_('Email'))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_('Phone'))
    source = models.CharField(max_length=100, blank=True, verbose_name=_('Source'))
    class_interested = models.CharField(max_length=50, blank=True, verbose_name=_('Class interested'))
    description = models.TextField(blank=True, verbose_name=_('Description'))
    follow_up_date = models.DateField(null=True, blank=True, verbose_name=_('Follow-up date'))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active', verbose_name=_('Status'))
    note = models.TextField(blank=True, verbose_name=_('Note'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Enquiry')
        verbose_name_plural = _('Enquiries')
        ordering = ['-created_at']

    def __str__(self):
        return self.name
