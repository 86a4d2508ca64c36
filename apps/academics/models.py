from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class Course(CoreBaseModel):
    """
    A course students are graded and marked present in.
    """
    code = models.CharField(_('course code'), max_length=20, unique=True, db_index=True)
    name = models.CharField(_('course name'), max_length=200)
    description = models.TextField(_('description'), blank=True)
    credits = models.PositiveIntegerField(
        _('credits'),
        default=3,
        validators=[MinValueValidator(0), MaxValueValidator(30)]
    )

    class Meta:
        verbose_name = _('Course')
        verbose_name_plural = _('Courses')
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"


class Student(CoreBaseModel):
    """
    Student profile extending the core User model.

    Every person-centric record (grades, attendance, fees, payments, health
    records, behavior logs) belongs to exactly one Student.
    """
    class Status(models.TextChoices):
        ACTIVE = 'active', _('Active')
        INACTIVE = 'inactive', _('Inactive')
        GRADUATED = 'graduated', _('Graduated')
        SUSPENDED = 'suspended', _('Suspended')
        WITHDRAWN = 'withdrawn', _('Withdrawn')

    user = models.OneToOneField(
        'users.User',
        on_delete=models.CASCADE,
        related_name='student_profile',
        verbose_name=_('user account')
    )
    student_id = models.CharField(
        _('student ID'),
        max_length=20,
        unique=True,
        db_index=True
    )
    first_name = models.CharField(_('first name'), max_length=50)
    last_name = models.CharField(_('last name'), max_length=50)
    date_of_birth = models.DateField(_('date of birth'))
    gender = models.CharField(
        _('gender'),
        max_length=10,
        choices=[
            ('male', _('Male')),
            ('female', _('Female')),
            ('other', _('Other'))
        ],
        blank=True
    )
    phone = models.CharField(_('phone number'), max_length=20, blank=True)
    address = models.TextField(_('address'), blank=True)
    enrollment_date = models.DateField(_('enrollment date'), default=timezone.localdate)
    department = models.CharField(_('department'), max_length=100, blank=True)
    year = models.PositiveIntegerField(_('year of study'), null=True, blank=True)
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True
    )

    class Meta:
        verbose_name = _('Student')
        verbose_name_plural = _('Students')
        ordering = ['student_id']
        indexes = [
            models.Index(fields=['student_id', 'status']),
            models.Index(fields=['user', 'status']),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.student_id})"

    def save(self, *args, **kwargs):
        """Auto-generate student ID if not provided."""
        if not self.student_id:
            self.student_id = self.generate_student_id()
        super().save(*args, **kwargs)

    def generate_student_id(self):
        """Generate unique student ID in format: STU{year}{sequential_number}."""
        year = timezone.now().strftime('%Y')

        last_student = Student.objects.filter(
            student_id__startswith=f'STU{year}'
        ).order_by('-student_id').first()

        if last_student:
            try:
                new_num = int(last_student.student_id[-4:]) + 1
            except (ValueError, IndexError):
                new_num = 1
        else:
            new_num = 1

        return f'STU{year}{new_num:04d}'

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


class Guardian(CoreBaseModel):
    """
    Parent or guardian, linked to their children through StudentGuardian.
    """
    class Relationship(models.TextChoices):
        FATHER = 'father', _('Father')
        MOTHER = 'mother', _('Mother')
        GUARDIAN = 'guardian', _('Guardian')
        GRANDPARENT = 'grandparent', _('Grandparent')
        OTHER = 'other', _('Other')

    user = models.OneToOneField(
        'users.User',
        on_delete=models.CASCADE,
        related_name='guardian_profile',
        verbose_name=_('user account')
    )
    first_name = models.CharField(_('first name'), max_length=50)
    last_name = models.CharField(_('last name'), max_length=50)
    email = models.EmailField(_('email address'), blank=True)
    phone = models.CharField(_('phone number'), max_length=20, blank=True)
    relationship = models.CharField(
        _('relationship'),
        max_length=20,
        choices=Relationship.choices,
        default=Relationship.GUARDIAN
    )
    address = models.TextField(_('address'), blank=True)
    children = models.ManyToManyField(
        Student,
        through='StudentGuardian',
        related_name='guardians',
        verbose_name=_('children'),
        blank=True
    )

    class Meta:
        verbose_name = _('Parent/Guardian')
        verbose_name_plural = _('Parents/Guardians')
        ordering = ['last_name', 'first_name']
        indexes = [
            models.Index(fields=['last_name', 'first_name']),
        ]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


class StudentGuardian(CoreBaseModel):
    """
    Link between a student and one of their parents/guardians.
    """
    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name='guardian_links',
        verbose_name=_('student')
    )
    guardian = models.ForeignKey(
        Guardian,
        on_delete=models.CASCADE,
        related_name='student_links',
        verbose_name=_('parent/guardian')
    )

    class Meta:
        verbose_name = _('Student-Guardian Link')
        verbose_name_plural = _('Student-Guardian Links')
        ordering = ['student', 'guardian']
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'guardian'],
                name='unique_student_guardian'
            )
        ]

    def __str__(self):
        return f"{self.guardian} - {self.student}"


class BehaviorLog(CoreBaseModel):
    class IncidentType(models.TextChoices):
        POSITIVE = 'positive', _('Positive')
        NEGATIVE = 'negative', _('Negative')
        DISCIPLINARY = 'disciplinary', _('Disciplinary')

    class Severity(models.TextChoices):
        LOW = 'low', _('Low')
        MEDIUM = 'medium', _('Medium')
        HIGH = 'high', _('High')

    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name='behavior_logs',
        verbose_name=_('student')
    )
    reported_by = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reported_behavior_logs',
        verbose_name=_('reported by')
    )
    incident_type = models.CharField(
        _('incident type'),
        max_length=20,
        choices=IncidentType.choices,
        default=IncidentType.NEGATIVE
    )
    description = models.TextField(_('description'))
    incident_date = models.DateField(_('incident date'))
    severity = models.CharField(
        _('severity'),
        max_length=10,
        choices=Severity.choices,
        blank=True
    )
    action_taken = models.TextField(_('action taken'), blank=True)
    follow_up = models.TextField(_('follow up'), blank=True)

    class Meta:
        verbose_name = _('Behavior Log')
        verbose_name_plural = _('Behavior Logs')
        ordering = ['-incident_date', '-created_at']
        indexes = [
            models.Index(fields=['student', 'incident_date']),
        ]

    def __str__(self):
        return f"{self.student} - {self.get_incident_type_display()} ({self.incident_date})"
