# apps/assessment/models.py

from decimal import Decimal

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class AssessmentType(models.TextChoices):
    QUIZ = 'quiz', _('Quiz')
    ASSIGNMENT = 'assignment', _('Assignment')
    MIDTERM = 'midterm', _('Midterm Exam')
    FINAL = 'final', _('Final Exam')
    PROJECT = 'project', _('Project')
    PRACTICAL = 'practical', _('Practical')
    OTHER = 'other', _('Other')


class Assessment(CoreBaseModel):
    """
    A graded piece of work in a course (exam, quiz, project...).
    """
    course = models.ForeignKey(
        'academics.Course',
        on_delete=models.CASCADE,
        related_name='assessments',
        verbose_name=_('course')
    )
    name = models.CharField(_('assessment name'), max_length=200)
    assessment_type = models.CharField(
        _('assessment type'),
        max_length=20,
        choices=AssessmentType.choices,
        default=AssessmentType.OTHER
    )
    total_marks = models.DecimalField(
        _('total marks'),
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    weightage = models.DecimalField(
        _('weightage'),
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        help_text=_('Weightage in percentage for final grade calculation')
    )
    due_date = models.DateField(_('due date'), null=True, blank=True)
    description = models.TextField(_('description'), blank=True)

    class Meta:
        verbose_name = _('Assessment')
        verbose_name_plural = _('Assessments')
        ordering = ['course', 'due_date', 'name']

    def __str__(self):
        return f"{self.name} ({self.course.code})"


class Grade(CoreBaseModel):
    """
    A student's raw score in a course, with its derived percentage and letter.

    ``percentage`` and ``grade_letter`` are stored columns written by
    ``apps.assessment.services.GradeService`` on every create and update.
    """
    class Letter(models.TextChoices):
        A = 'A', 'A'
        B = 'B', 'B'
        C = 'C', 'C'
        D = 'D', 'D'
        F = 'F', 'F'

    student = models.ForeignKey(
        'academics.Student',
        on_delete=models.CASCADE,
        related_name='grades',
        verbose_name=_('student')
    )
    course = models.ForeignKey(
        'academics.Course',
        on_delete=models.CASCADE,
        related_name='grades',
        verbose_name=_('course')
    )
    assessment = models.ForeignKey(
        Assessment,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='grades',
        verbose_name=_('assessment')
    )
    assessment_type = models.CharField(
        _('assessment type'),
        max_length=20,
        choices=AssessmentType.choices,
        default=AssessmentType.OTHER
    )
    assessment_name = models.CharField(_('assessment name'), max_length=200, blank=True)
    score = models.DecimalField(
        _('score'),
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    max_score = models.DecimalField(
        _('maximum score'),
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    percentage = models.DecimalField(
        _('percentage'),
        max_digits=7,
        decimal_places=4,
        null=True,
        blank=True,
        editable=False
    )
    grade_letter = models.CharField(
        _('grade letter'),
        max_length=2,
        choices=Letter.choices,
        null=True,
        blank=True,
        editable=False,
        db_index=True
    )
    date = models.DateField(_('date'), default=timezone.localdate)
    remarks = models.TextField(_('remarks'), blank=True)

    class Meta:
        verbose_name = _('Grade')
        verbose_name_plural = _('Grades')
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['student', 'course']),
            models.Index(fields=['course', 'date']),
        ]

    def __str__(self):
        return f"{self.student} - {self.course.code} - {self.score}/{self.max_score}"
