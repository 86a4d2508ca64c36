# apps/finance/models.py

from django.db import models
from django.core.validators import MinValueValidator
from django.utils.translation import gettext_lazy as _
from decimal import Decimal

from apps.core.models import CoreBaseModel


class Fee(CoreBaseModel):
    """
    An amount a student owes.

    ``paid_amount`` and ``status`` are derived from the fee's payments and
    written only by ``apps.finance.services.reconcile`` (and ``status`` by the
    overdue sweep). Nothing else assigns them.
    """
    class Status(models.TextChoices):
        PENDING = 'pending', _('Pending')
        PARTIAL = 'partial', _('Partially Paid')
        PAID = 'paid', _('Paid')
        OVERDUE = 'overdue', _('Overdue')

    student = models.ForeignKey(
        'academics.Student',
        on_delete=models.CASCADE,
        related_name='fees',
        verbose_name=_('student')
    )
    fee_type = models.CharField(_('fee type'), max_length=100)
    amount = models.DecimalField(
        _('amount'),
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    paid_amount = models.DecimalField(
        _('paid amount'),
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False
    )
    due_date = models.DateField(_('due date'))
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True
    )
    description = models.TextField(_('description'), blank=True)

    class Meta:
        verbose_name = _('Fee')
        verbose_name_plural = _('Fees')
        ordering = ['due_date', 'created_at']
        indexes = [
            models.Index(fields=['student', 'status']),
            models.Index(fields=['status', 'due_date']),
        ]

    def __str__(self):
        return f"{self.fee_type} - {self.student} ({self.amount})"

    @property
    def balance_due(self):
        return self.amount - self.paid_amount


class Payment(CoreBaseModel):
    """
    Money received against a single fee.

    ``student`` duplicates ``fee.student`` so payments can be listed per
    student directly; the services keep the two equal.
    """
    class PaymentMethod(models.TextChoices):
        CASH = 'cash', _('Cash')
        CHEQUE = 'cheque', _('Cheque')
        BANK_TRANSFER = 'bank_transfer', _('Bank Transfer')
        CREDIT_CARD = 'credit_card', _('Credit Card')
        DEBIT_CARD = 'debit_card', _('Debit Card')
        ONLINE = 'online', _('Online Payment')
        MOBILE = 'mobile', _('Mobile Payment')
        OTHER = 'other', _('Other')

    fee = models.ForeignKey(
        Fee,
        on_delete=models.CASCADE,
        related_name='payments',
        verbose_name=_('fee')
    )
    student = models.ForeignKey(
        'academics.Student',
        on_delete=models.CASCADE,
        related_name='payments',
        verbose_name=_('student')
    )
    amount = models.DecimalField(
        _('amount'),
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    payment_method = models.CharField(
        _('payment method'),
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH
    )
    transaction_id = models.CharField(_('transaction ID'), max_length=100, blank=True)
    payment_date = models.DateField(_('payment date'))
    notes = models.TextField(_('notes'), blank=True)

    class Meta:
        verbose_name = _('Payment')
        verbose_name_plural = _('Payments')
        ordering = ['-payment_date', '-created_at']
        indexes = [
            models.Index(fields=['student', 'payment_date']),
            models.Index(fields=['fee', 'payment_date']),
        ]

    def __str__(self):
        return f"Payment {self.amount} on {self.payment_date} ({self.get_payment_method_display()})"
