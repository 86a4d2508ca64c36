# apps/finance/tests.py

from datetime import date
from decimal import Decimal
from io import StringIO
from unittest import mock

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.exceptions import ConsistencyFailure
from apps.core.testing import make_admin, make_guardian, make_student
from .models import Fee, Payment
from .services import FeeService, PaymentService, fee_status_for, reconcile


class FeeStatusTestCase(TestCase):

    def test_three_way_rule(self):
        owed = Decimal('500.00')
        self.assertEqual(fee_status_for(Decimal('0.00'), owed), Fee.Status.PENDING)
        self.assertEqual(fee_status_for(Decimal('0.01'), owed), Fee.Status.PARTIAL)
        self.assertEqual(fee_status_for(Decimal('499.99'), owed), Fee.Status.PARTIAL)
        self.assertEqual(fee_status_for(Decimal('500.00'), owed), Fee.Status.PAID)
        self.assertEqual(fee_status_for(Decimal('650.00'), owed), Fee.Status.PAID)


class ReconciliationTestCase(TestCase):

    def setUp(self):
        self.student = make_student()
        self.fee = FeeService.create_fee(
            student=self.student,
            fee_type='Tuition',
            amount=Decimal('500.00'),
            due_date=date(2026, 9, 1),
        )

    def pay(self, amount, fee=None):
        return PaymentService.create_payment(
            fee=fee or self.fee,
            amount=amount,
            payment_method=Payment.PaymentMethod.CASH,
            payment_date=date(2026, 8, 1),
        )

    def assertFee(self, paid, status, fee=None):
        fee = Fee.objects.get(pk=(fee or self.fee).pk)
        self.assertEqual(fee.paid_amount, Decimal(paid))
        self.assertEqual(fee.status, status)

    def test_new_fee_starts_pending(self):
        self.assertFee('0.00', Fee.Status.PENDING)

    def test_create_payments_then_delete(self):
        first = self.pay(Decimal('200.00'))
        self.assertFee('200.00', Fee.Status.PARTIAL)
        self.assertEqual(first.fee.paid_amount, Decimal('200.00'))

        self.pay(Decimal('300.00'))
        self.assertFee('500.00', Fee.Status.PAID)

        fee = PaymentService.delete_payment(first)
        self.assertEqual(fee.paid_amount, Decimal('300.00'))
        self.assertFee('300.00', Fee.Status.PARTIAL)

    def test_delete_last_payment_returns_to_pending(self):
        payment = self.pay(Decimal('500.00'))
        PaymentService.delete_payment(payment)
        self.assertFee('0.00', Fee.Status.PENDING)

    def test_operation_order_converges(self):
        other = FeeService.create_fee(
            student=self.student, fee_type='Tuition', amount=Decimal('500.00'), due_date=date(2026, 9, 1)
        )

        # create then delete
        kept = self.pay(Decimal('120.00'))
        dropped = self.pay(Decimal('80.00'))
        PaymentService.delete_payment(dropped)

        # delete then create
        dropped = self.pay(Decimal('80.00'), fee=other)
        PaymentService.delete_payment(dropped)
        self.pay(Decimal('120.00'), fee=other)

        first = Fee.objects.get(pk=self.fee.pk)
        second = Fee.objects.get(pk=other.pk)
        self.assertEqual(kept.amount, Decimal('120.00'))
        self.assertEqual((first.paid_amount, first.status), (second.paid_amount, second.status))
        self.assertEqual(first.status, Fee.Status.PARTIAL)

    def test_reconcile_is_idempotent(self):
        self.pay(Decimal('150.00'))
        once = reconcile(self.fee.pk)
        twice = reconcile(self.fee.pk)
        self.assertEqual((once.paid_amount, once.status), (twice.paid_amount, twice.status))
        self.assertEqual(twice.paid_amount, Decimal('150.00'))

    def test_reconcile_does_not_touch_payments(self):
        payment = self.pay(Decimal('150.00'))
        before = Payment.objects.get(pk=payment.pk).updated_at
        reconcile(self.fee.pk)
        self.assertEqual(Payment.objects.get(pk=payment.pk).updated_at, before)

    def test_reconcile_missing_fee(self):
        fee_id = self.fee.pk
        self.fee.delete()
        with self.assertRaises(Fee.DoesNotExist):
            reconcile(fee_id)

    def test_update_amount_reconciles(self):
        payment = self.pay(Decimal('200.00'))
        PaymentService.update_payment(payment, amount=Decimal('500.00'))
        self.assertFee('500.00', Fee.Status.PAID)

    def test_update_without_amount_change_keeps_totals(self):
        payment = self.pay(Decimal('200.00'))
        PaymentService.update_payment(payment, notes='Receipt 42')
        self.assertFee('200.00', Fee.Status.PARTIAL)

    def test_moving_payment_reconciles_both_fees(self):
        other = FeeService.create_fee(
            student=self.student, fee_type='Library', amount=Decimal('50.00'), due_date=date(2026, 9, 1)
        )
        payment = self.pay(Decimal('50.00'))

        PaymentService.update_payment(payment, fee=other)

        self.assertFee('0.00', Fee.Status.PENDING)
        self.assertFee('50.00', Fee.Status.PAID, fee=other)

    def test_overpayment_is_paid(self):
        self.pay(Decimal('650.00'))
        self.assertFee('650.00', Fee.Status.PAID)

    def test_non_positive_amount_is_rejected(self):
        for amount in (Decimal('0.00'), Decimal('-5.00')):
            with self.subTest(amount=amount), self.assertRaises(ValidationError):
                self.pay(amount)
        self.assertFalse(Payment.objects.exists())
        self.assertFee('0.00', Fee.Status.PENDING)

    def test_payment_student_must_match_fee_student(self):
        with self.assertRaises(ValidationError):
            PaymentService.create_payment(
                fee=self.fee,
                amount=Decimal('10.00'),
                payment_method=Payment.PaymentMethod.CASH,
                student=make_student(),
            )
        self.assertFalse(Payment.objects.exists())

    def test_payment_student_defaults_to_fee_student(self):
        payment = self.pay(Decimal('10.00'))
        self.assertEqual(payment.student, self.student)

    def test_vanished_fee_rolls_back_payment(self):
        with mock.patch('apps.finance.services.reconcile', side_effect=Fee.DoesNotExist):
            with self.assertRaises(ConsistencyFailure):
                self.pay(Decimal('100.00'))

        self.assertFalse(Payment.objects.exists())
        self.assertFee('0.00', Fee.Status.PENDING)

    def test_reconcile_locks_the_fee_row(self):
        self.pay(Decimal('100.00'))
        with mock.patch.object(
            Fee.objects, 'select_for_update', wraps=Fee.objects.select_for_update
        ) as locked:
            reconcile(self.fee.pk)

        locked.assert_called_once_with()
        self.assertFee('100.00', Fee.Status.PARTIAL)

    def test_payment_writes_lock_the_fee_row(self):
        with mock.patch.object(
            Fee.objects, 'select_for_update', wraps=Fee.objects.select_for_update
        ) as locked:
            payment = self.pay(Decimal('100.00'))
            self.assertGreaterEqual(locked.call_count, 1)

            locked.reset_mock()
            PaymentService.update_payment(payment, amount=Decimal('150.00'))
            self.assertGreaterEqual(locked.call_count, 1)

            locked.reset_mock()
            PaymentService.delete_payment(payment)
            self.assertGreaterEqual(locked.call_count, 1)

        self.assertFee('0.00', Fee.Status.PENDING)

    def test_reassigning_fee_keeps_payments_with_it(self):
        payment = self.pay(Decimal('100.00'))
        other = make_student()

        FeeService.update_fee(Fee.objects.get(pk=self.fee.pk), student=other)

        payment = Payment.objects.get(pk=payment.pk)
        self.assertEqual(payment.student_id, other.pk)
        self.assertFee('100.00', Fee.Status.PARTIAL)

    def test_fee_amount_change_reconciles(self):
        self.pay(Decimal('300.00'))
        FeeService.update_fee(Fee.objects.get(pk=self.fee.pk), amount=Decimal('300.00'))
        self.assertFee('300.00', Fee.Status.PAID)

    def test_fee_derived_fields_cannot_be_set(self):
        fee = FeeService.create_fee(
            student=self.student,
            fee_type='Exam',
            amount=Decimal('40.00'),
            due_date=date(2026, 9, 1),
            paid_amount=Decimal('40.00'),
            status=Fee.Status.PAID,
        )
        self.assertFee('0.00', Fee.Status.PENDING, fee=fee)

        FeeService.update_fee(fee, paid_amount=Decimal('40.00'), status=Fee.Status.PAID)
        self.assertFee('0.00', Fee.Status.PENDING, fee=fee)


class OverdueSweepTestCase(TestCase):

    def setUp(self):
        student = make_student()
        self.late = FeeService.create_fee(
            student=student, fee_type='Tuition', amount=Decimal('100.00'), due_date=date(2026, 1, 1)
        )
        self.partial = FeeService.create_fee(
            student=student, fee_type='Books', amount=Decimal('100.00'), due_date=date(2026, 1, 1)
        )
        PaymentService.create_payment(
            fee=self.partial, amount=Decimal('40.00'), payment_method='cash', payment_date=date(2026, 1, 1)
        )
        self.settled = FeeService.create_fee(
            student=student, fee_type='Trip', amount=Decimal('20.00'), due_date=date(2026, 1, 1)
        )
        PaymentService.create_payment(
            fee=self.settled, amount=Decimal('20.00'), payment_method='cash', payment_date=date(2026, 1, 1)
        )
        self.upcoming = FeeService.create_fee(
            student=student, fee_type='Sports', amount=Decimal('30.00'), due_date=date(2026, 6, 1)
        )

    def status_of(self, fee):
        return Fee.objects.get(pk=fee.pk).status

    def test_mark_overdue(self):
        count = FeeService.mark_overdue(today=date(2026, 3, 1))

        self.assertEqual(count, 2)
        self.assertEqual(self.status_of(self.late), Fee.Status.OVERDUE)
        self.assertEqual(self.status_of(self.partial), Fee.Status.OVERDUE)
        self.assertEqual(self.status_of(self.settled), Fee.Status.PAID)
        self.assertEqual(self.status_of(self.upcoming), Fee.Status.PENDING)

    def test_reconciliation_clears_overdue(self):
        FeeService.mark_overdue(today=date(2026, 3, 1))
        reconcile(self.partial.pk)
        self.assertEqual(self.status_of(self.partial), Fee.Status.PARTIAL)

    def test_command_dry_run(self):
        out = StringIO()
        call_command('mark_overdue_fees', '--date', '2026-03-01', '--dry-run', stdout=out)

        self.assertIn('2 fees would be marked overdue', out.getvalue())
        self.assertEqual(self.status_of(self.late), Fee.Status.PENDING)

    def test_command(self):
        out = StringIO()
        call_command('mark_overdue_fees', '--date', '2026-03-01', stdout=out)

        self.assertIn('Marked 2 fees overdue', out.getvalue())
        self.assertEqual(self.status_of(self.late), Fee.Status.OVERDUE)


class LedgerAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_student()
        self.guardian = make_guardian(self.student)
        self.client.force_authenticate(self.admin)

    def create_fee(self, amount='500.00'):
        response = self.client.post(reverse('finance:fee-list'), {
            'student': str(self.student.pk),
            'fee_type': 'Tuition',
            'amount': amount,
            'due_date': '2026-09-01',
        })
        self.assertEqual(response.status_code, 201)
        return response.data

    def create_payment(self, fee_id, amount):
        return self.client.post(reverse('finance:payment-list'), {
            'fee': fee_id,
            'amount': amount,
            'payment_method': 'bank_transfer',
            'payment_date': '2026-08-15',
        })

    def test_payment_lifecycle(self):
        fee = self.create_fee()
        self.assertEqual(fee['status'], 'pending')
        self.assertEqual(fee['paid_amount'], '0.00')

        response = self.create_payment(fee['id'], '200.00')
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['fee_detail']['paid_amount'], '200.00')
        self.assertEqual(response.data['fee_detail']['status'], 'partial')
        first_payment = response.data['id']

        response = self.create_payment(fee['id'], '300.00')
        self.assertEqual(response.data['fee_detail']['paid_amount'], '500.00')
        self.assertEqual(response.data['fee_detail']['status'], 'paid')

        response = self.client.delete(reverse('finance:payment-detail', kwargs={'pk': first_payment}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['fee']['paid_amount'], '300.00')
        self.assertEqual(response.data['fee']['status'], 'partial')

    def test_payment_update_embeds_reconciled_fee(self):
        fee = self.create_fee()
        payment = self.create_payment(fee['id'], '200.00').data

        response = self.client.patch(
            reverse('finance:payment-detail', kwargs={'pk': payment['id']}),
            {'amount': '500.00'}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['fee_detail']['status'], 'paid')

    def test_zero_payment_is_rejected(self):
        fee = self.create_fee()
        response = self.create_payment(fee['id'], '0.00')
        self.assertEqual(response.status_code, 400)
        self.assertIn('amount', response.data)

    def test_payment_student_mismatch_is_rejected(self):
        fee = self.create_fee()
        response = self.client.post(reverse('finance:payment-list'), {
            'fee': fee['id'],
            'student': str(make_student().pk),
            'amount': '10.00',
            'payment_method': 'cash',
            'payment_date': '2026-08-15',
        })
        self.assertEqual(response.status_code, 400)
        self.assertIn('student', response.data)

    def test_derived_fields_are_read_only(self):
        fee = self.create_fee()
        response = self.client.patch(
            reverse('finance:fee-detail', kwargs={'pk': fee['id']}),
            {'paid_amount': '500.00', 'status': 'paid'}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['paid_amount'], '0.00')
        self.assertEqual(response.data['status'], 'pending')

    def test_filter_fees_by_status(self):
        paid = self.create_fee('50.00')
        self.create_fee('80.00')
        self.create_payment(paid['id'], '50.00')

        response = self.client.get(reverse('finance:fee-list'), {'status': 'pending'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row['amount'] for row in response.data], ['80.00'])

    def test_ledger_collections_are_admin_only(self):
        self.client.force_authenticate(self.student.user)
        self.assertEqual(self.client.get(reverse('finance:fee-list')).status_code, 403)
        self.assertEqual(self.client.get(reverse('finance:payment-list')).status_code, 403)

        self.client.force_authenticate(None)
        self.assertEqual(self.client.get(reverse('finance:fee-list')).status_code, 401)

    def test_student_fee_endpoints(self):
        fee = self.create_fee()
        self.create_payment(fee['id'], '100.00')
        fees_url = reverse('finance:student-fees-list', kwargs={'student_pk': self.student.pk})
        payments_url = reverse('finance:student-payments-list', kwargs={'student_pk': self.student.pk})

        for user in (self.student.user, self.guardian.user):
            self.client.force_authenticate(user)
            response = self.client.get(fees_url)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.data[0]['status'], 'partial')
            self.assertEqual(self.client.get(payments_url).status_code, 200)

        self.client.force_authenticate(self.student.user)
        response = self.client.post(payments_url, {
            'fee': fee['id'], 'amount': '400.00', 'payment_method': 'cash', 'payment_date': '2026-08-20'
        })
        self.assertEqual(response.status_code, 403)
        self.assertEqual(Fee.objects.get(pk=fee['id']).paid_amount, Decimal('100.00'))

    def test_admin_nested_payment_write_reconciles(self):
        fee = self.create_fee()
        payments_url = reverse('finance:student-payments-list', kwargs={'student_pk': self.student.pk})

        response = self.client.post(payments_url, {
            'fee': fee['id'], 'amount': '500.00', 'payment_method': 'cash', 'payment_date': '2026-08-20'
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['fee_detail']['status'], 'paid')

    def test_nested_payment_against_another_students_fee(self):
        other = make_student()
        fee = FeeService.create_fee(
            student=other, fee_type='Tuition', amount=Decimal('100.00'), due_date=date(2026, 9, 1)
        )
        payments_url = reverse('finance:student-payments-list', kwargs={'student_pk': self.student.pk})

        response = self.client.post(payments_url, {
            'fee': str(fee.pk), 'amount': '10.00', 'payment_method': 'cash', 'payment_date': '2026-08-20'
        })
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Payment.objects.exists())

    def test_reassigning_fee_moves_its_payments(self):
        fee = self.create_fee()
        self.create_payment(fee['id'], '40.00')
        other = make_student()

        response = self.client.patch(
            reverse('finance:fee-detail', kwargs={'pk': fee['id']}), {'student': str(other.pk)}
        )
        self.assertEqual(response.status_code, 200)

        payment = Payment.objects.select_related('fee').get()
        self.assertEqual(payment.student_id, other.pk)
        self.assertEqual(payment.student_id, payment.fee.student_id)

        self.client.force_authenticate(self.student.user)
        response = self.client.get(
            reverse('finance:student-payments-list', kwargs={'student_pk': self.student.pk})
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 0)

        self.client.force_authenticate(other.user)
        response = self.client.get(
            reverse('finance:student-payments-list', kwargs={'student_pk': other.pk})
        )
        self.assertEqual(len(response.data), 1)

    def test_vanished_fee_is_a_server_error(self):
        fee = self.create_fee()
        with mock.patch('apps.finance.services.reconcile', side_effect=Fee.DoesNotExist):
            response = self.create_payment(fee['id'], '100.00')

        self.assertEqual(response.status_code, 500)
        self.assertFalse(Payment.objects.exists())
