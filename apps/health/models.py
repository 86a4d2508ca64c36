from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class HealthRecord(CoreBaseModel):
    """
    A dated health entry for a student (checkup, illness, injury, vaccination...).
    """
    class RecordType(models.TextChoices):
        CHECKUP = 'checkup', _('Checkup')
        ILLNESS = 'illness', _('Illness')
        INJURY = 'injury', _('Injury')
        VACCINATION = 'vaccination', _('Vaccination')
        ALLERGY = 'allergy', _('Allergy')
        MEDICATION = 'medication', _('Medication')
        OTHER = 'other', _('Other')

    student = models.ForeignKey(
        'academics.Student',
        on_delete=models.CASCADE,
        related_name='health_records',
        verbose_name=_('student')
    )
    record_type = models.CharField(
        _('record type'),
        max_length=20,
        choices=RecordType.choices,
        default=RecordType.CHECKUP
    )
    description = models.TextField(_('description'))
    record_date = models.DateField(_('record date'), default=timezone.localdate)
    provider = models.CharField(_('provider'), max_length=200, blank=True)
    treatment = models.TextField(_('treatment'), blank=True)
    notes = models.TextField(_('notes'), blank=True)
    emergency_contact = models.BooleanField(
        _('emergency contact notified'),
        default=False
    )

    class Meta:
        verbose_name = _('Health Record')
        verbose_name_plural = _('Health Records')
        ordering = ['-record_date', '-created_at']
        indexes = [
            models.Index(fields=['student', 'record_date']),
        ]

    def __str__(self):
        return f"{self.get_record_type_display()} - {self.student} ({self.record_date})"
