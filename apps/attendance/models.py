# apps/attendance/models.py

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class Attendance(CoreBaseModel):
    """
    A student's attendance mark for one course on one day.
    """
    class AttendanceStatus(models.TextChoices):
        PRESENT = 'present', _('Present')
        ABSENT = 'absent', _('Absent')
        LATE = 'late', _('Late')
        EXCUSED = 'excused', _('Excused Absence')

    student = models.ForeignKey(
        'academics.Student',
        on_delete=models.CASCADE,
        related_name='attendances',
        verbose_name=_('student')
    )
    course = models.ForeignKey(
        'academics.Course',
        on_delete=models.CASCADE,
        related_name='attendances',
        verbose_name=_('course')
    )
    date = models.DateField(_('date'), default=timezone.localdate, db_index=True)
    status = models.CharField(
        _('attendance status'),
        max_length=20,
        choices=AttendanceStatus.choices,
        default=AttendanceStatus.PRESENT
    )
    remarks = models.TextField(_('remarks'), blank=True)

    class Meta:
        verbose_name = _('Attendance')
        verbose_name_plural = _('Attendance Records')
        ordering = ['-date', 'course']
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'course', 'date'],
                name='unique_attendance_per_day'
            )
        ]
        indexes = [
            models.Index(fields=['student', 'date']),
            models.Index(fields=['course', 'date', 'status']),
        ]

    def __str__(self):
        return f"{self.student} - {self.course.code} - {self.date} ({self.get_status_display()})"
