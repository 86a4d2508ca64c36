from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class Notification(CoreBaseModel):
    """
    A message addressed to a user account.

    Notifications belong to users, not students; a student's notifications
    are those of the student's own user account.
    """
    class NotificationType(models.TextChoices):
        GENERAL = 'general', _('General')
        GRADE = 'grade', _('Grade Posted')
        FEE = 'fee', _('Fee Reminder')
        ATTENDANCE = 'attendance', _('Attendance')
        ANNOUNCEMENT = 'announcement', _('Announcement')
        ALERT = 'alert', _('System Alert')

    user = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='notifications',
        verbose_name=_('recipient')
    )
    title = models.CharField(_('title'), max_length=200)
    message = models.TextField(_('message'))
    notification_type = models.CharField(
        _('notification type'),
        max_length=20,
        choices=NotificationType.choices,
        default=NotificationType.GENERAL
    )
    is_read = models.BooleanField(_('is read'), default=False)
    read_at = models.DateTimeField(_('read at'), null=True, blank=True)

    class Meta:
        verbose_name = _('Notification')
        verbose_name_plural = _('Notifications')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_read', 'created_at']),
        ]

    def __str__(self):
        return f"{self.notification_type}: {self.title} -> {self.user}"

    def mark_as_read(self):
        """Mark notification as read."""
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()
            self.save(update_fields=['is_read', 'read_at', 'updated_at'])
