# apps/assessment/services.py
"""
Grade derivation.

``derive`` is the pure percentage/letter computation; ``GradeService`` is the
only write path for grades and always stores derived values that match the
score and max score being saved.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_DOWN

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils.translation import gettext_lazy as _

from .models import Grade

logger = logging.getLogger(__name__)

# Inclusive lower bounds, highest first.
LETTER_THRESHOLDS = (
    (Decimal('90'), Grade.Letter.A),
    (Decimal('80'), Grade.Letter.B),
    (Decimal('70'), Grade.Letter.C),
    (Decimal('60'), Grade.Letter.D),
)

# Matches Grade.percentage (4 decimal places).
PERCENTAGE_QUANTUM = Decimal('0.0001')


def _as_decimal(value):
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def letter_for(percentage):
    for lower_bound, letter in LETTER_THRESHOLDS:
        if percentage >= lower_bound:
            return letter
    return Grade.Letter.F


def derive(score, max_score):
    """
    Return ``(percentage, letter)`` for a raw score, or ``(None, None)`` when
    ``max_score`` is not positive.

    The percentage is truncated to the stored precision before the letter is
    picked, so the stored pair always agrees and a value just under a
    threshold never rounds up into the next band.
    """
    score = _as_decimal(score)
    max_score = _as_decimal(max_score)

    if max_score <= 0:
        return None, None

    percentage = (score * 100 / max_score).quantize(PERCENTAGE_QUANTUM, rounding=ROUND_DOWN)
    return percentage, letter_for(percentage)


class GradeService:
    """
    Create and update grades. Invalid scores are rejected outright rather
    than stored without a percentage.
    """
    DERIVED_FIELDS = ('percentage', 'grade_letter')

    @staticmethod
    def _clean_score(value, field):
        if value is None or value == '':
            raise ValidationError({field: _('This field is required.')})
        try:
            return _as_decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError({field: _('A valid number is required.')})

    @staticmethod
    def _validate(grade):
        grade.max_score = GradeService._clean_score(grade.max_score, 'max_score')
        grade.score = GradeService._clean_score(grade.score, 'score')

        if grade.max_score <= 0:
            raise ValidationError({'max_score': _('Maximum score must be greater than zero.')})
        if grade.score < 0:
            raise ValidationError({'score': _('Score cannot be negative.')})
        if grade.score > grade.max_score:
            raise ValidationError({'score': _('Score cannot exceed the maximum score.')})

    @staticmethod
    def _derive_and_save(grade):
        GradeService._validate(grade)
        grade.percentage, grade.grade_letter = derive(grade.score, grade.max_score)
        grade.full_clean()
        grade.save()
        return grade

    @staticmethod
    def create_grade(**fields):
        """
        Create a grade with its percentage and letter.

        ``max_score`` defaults to the linked assessment's total marks.
        """
        for name in GradeService.DERIVED_FIELDS:
            fields.pop(name, None)

        assessment = fields.get('assessment')
        if assessment is not None and fields.get('max_score') is None:
            fields['max_score'] = assessment.total_marks

        with transaction.atomic():
            grade = GradeService._derive_and_save(Grade(**fields))

        logger.info(
            f"Grade {grade.pk} recorded for student {grade.student_id}: "
            f"{grade.percentage}% ({grade.grade_letter})"
        )
        return grade

    @staticmethod
    def update_grade(grade, **changes):
        """
        Apply ``changes`` and re-derive from the values being stored, even when
        only one of score or max score changed.

        Linking a different assessment without a ``max_score`` takes the new
        assessment's total marks, as on create.
        """
        for name in GradeService.DERIVED_FIELDS:
            changes.pop(name, None)

        assessment = changes.get('assessment')
        if (assessment is not None and assessment.pk != grade.assessment_id
                and changes.get('max_score') is None):
            changes['max_score'] = assessment.total_marks

        with transaction.atomic():
            for field, value in changes.items():
                setattr(grade, field, value)
            GradeService._derive_and_save(grade)

        return grade
