# apps/finance/services.py
"""
Fee/payment ledger services.

A fee's ``paid_amount`` and ``status`` are always restored from its payments
by ``reconcile``. Every payment write goes through ``PaymentService`` so the
payment row and the fee recomputation commit (or roll back) together.
"""

import logging
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Sum
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.exceptions import ConsistencyFailure
from .models import Fee, Payment

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def fee_status_for(paid, owed):
    """
    Status of a fee given what was paid against what is owed.

    Never returns ``overdue``; that value belongs to the overdue sweep.
    """
    if paid >= owed:
        return Fee.Status.PAID
    if paid > ZERO:
        return Fee.Status.PARTIAL
    return Fee.Status.PENDING


def reconcile(fee_id):
    """
    Recompute ``paid_amount`` and ``status`` of a fee from its payments.

    Locks the fee row for the duration, so concurrent reconciliations of the
    same fee run one after the other. Raises ``Fee.DoesNotExist`` if the fee
    is gone. Payment rows are not modified.
    """
    with transaction.atomic():
        fee = Fee.objects.select_for_update().get(pk=fee_id)
        paid = fee.payments.aggregate(total=Sum('amount'))['total'] or ZERO

        fee.paid_amount = paid
        fee.status = fee_status_for(paid, fee.amount)
        fee.save(update_fields=['paid_amount', 'status', 'updated_at'])

    logger.info(f"Reconciled fee {fee.pk}: paid {fee.paid_amount} of {fee.amount} ({fee.status})")
    return fee


def _to_decimal(value, field):
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: _('A valid number is required.')})


def _reconcile_after_write(fee_id):
    """Reconcile inside a payment write; a vanished fee aborts the whole write."""
    try:
        return reconcile(fee_id)
    except Fee.DoesNotExist as exc:
        logger.error(f"Fee {fee_id} disappeared while reconciling a payment write")
        raise ConsistencyFailure(
            f"Fee {fee_id} no longer exists; payment write rolled back."
        ) from exc


class PaymentService:
    """
    Create, update and delete payments, keeping their fees reconciled.
    """

    @staticmethod
    def _validate(payment):
        if payment.amount is None or payment.amount <= ZERO:
            raise ValidationError({'amount': _('Payment amount must be greater than zero.')})

        if payment.student_id != payment.fee.student_id:
            raise ValidationError({
                'student': _("A payment's student must be the student who owes the fee.")
            })

        payment.full_clean()

    @staticmethod
    def create_payment(fee, amount, payment_method=Payment.PaymentMethod.CASH, payment_date=None,
                       student=None, transaction_id='', notes=''):
        """
        Record a payment against ``fee`` and reconcile the fee.

        ``student`` defaults to the fee's student and must match it.
        """
        with transaction.atomic():
            # The fee must exist before anything is written.
            fee = Fee.objects.select_for_update().get(pk=fee.pk)

            payment = Payment(
                fee=fee,
                student=student if student is not None else fee.student,
                amount=_to_decimal(amount, 'amount'),
                payment_method=payment_method,
                payment_date=payment_date or timezone.localdate(),
                transaction_id=transaction_id or '',
                notes=notes or '',
            )
            PaymentService._validate(payment)
            payment.save()

            payment.fee = _reconcile_after_write(fee.pk)

        logger.info(f"Payment {payment.pk} of {payment.amount} recorded against fee {fee.pk}")
        return payment

    @staticmethod
    def update_payment(payment, **changes):
        """
        Apply ``changes`` to ``payment`` and reconcile every fee affected.

        Moving a payment to another fee reconciles both the old and new fee.
        """
        with transaction.atomic():
            old_fee_id = payment.fee_id
            old_amount = payment.amount

            if 'amount' in changes:
                changes['amount'] = _to_decimal(changes['amount'], 'amount')
            for field, value in changes.items():
                setattr(payment, field, value)

            if 'fee' in changes and 'student' not in changes:
                payment.student = payment.fee.student

            PaymentService._validate(payment)
            payment.save()

            fee_changed = payment.fee_id != old_fee_id
            if fee_changed:
                _reconcile_after_write(old_fee_id)
            if fee_changed or payment.amount != old_amount:
                payment.fee = _reconcile_after_write(payment.fee_id)

        return payment

    @staticmethod
    def delete_payment(payment):
        """
        Delete ``payment`` and reconcile the fee it belonged to.

        Returns the reconciled fee.
        """
        with transaction.atomic():
            fee_id = payment.fee_id
            payment_id = payment.pk
            payment.delete()
            fee = _reconcile_after_write(fee_id)

        logger.info(f"Payment {payment_id} deleted from fee {fee_id}")
        return fee


class FeeService:
    """
    Fee lifecycle. Derived fields are never taken from the caller.
    """
    DERIVED_FIELDS = ('paid_amount', 'status')

    @staticmethod
    def create_fee(**fields):
        for name in FeeService.DERIVED_FIELDS:
            fields.pop(name, None)

        fee = Fee(**fields)
        fee.paid_amount = ZERO
        fee.status = Fee.Status.PENDING
        fee.full_clean()
        fee.save()

        logger.info(f"Fee {fee.pk} of {fee.amount} created for student {fee.student_id}")
        return fee

    @staticmethod
    def update_fee(fee, **changes):
        """
        Update the editable fields of ``fee``. A changed owed amount is
        reconciled immediately so the status never lags behind. Reassigning
        the fee to another student moves its payments along with it.
        """
        for name in FeeService.DERIVED_FIELDS:
            changes.pop(name, None)

        with transaction.atomic():
            old_amount = fee.amount
            old_student_id = fee.student_id
            for field, value in changes.items():
                setattr(fee, field, value)
            fee.full_clean()
            fee.save()

            if fee.student_id != old_student_id:
                moved = fee.payments.update(student=fee.student, updated_at=timezone.now())
                logger.info(
                    f"Fee {fee.pk} reassigned from student {old_student_id} to {fee.student_id}; "
                    f"{moved} payments moved"
                )

            if fee.amount != old_amount:
                fee = reconcile(fee.pk)

        return fee

    @staticmethod
    def mark_overdue(today=None, dry_run=False):
        """
        Flag unpaid fees whose due date has passed.

        Only pending and partial fees are touched. The next reconciliation of a
        flagged fee puts it back on pending/partial/paid. Returns the number of
        fees flagged (or that would be, with ``dry_run``).
        """
        today = today or timezone.localdate()
        candidates = Fee.objects.filter(
            due_date__lt=today,
            status__in=[Fee.Status.PENDING, Fee.Status.PARTIAL],
        )

        if dry_run:
            return candidates.count()

        with transaction.atomic():
            count = candidates.update(status=Fee.Status.OVERDUE, updated_at=timezone.now())

        logger.info(f"Marked {count} fees overdue (due before {today})")
        return count
