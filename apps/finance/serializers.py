from rest_framework import serializers
from apps.academics.models import Student
from .models import Fee, Payment


class FeeSerializer(serializers.ModelSerializer):
    balance_due = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Fee
        fields = [
            'id', 'student', 'fee_type', 'amount', 'paid_amount', 'balance_due',
            'due_date', 'status', 'description', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'student', 'paid_amount', 'status', 'created_at', 'updated_at']


class AdminFeeSerializer(FeeSerializer):
    """Top-level fee collection; the student is chosen by the caller."""
    student = serializers.PrimaryKeyRelatedField(queryset=Student.objects.all())


class PaymentSerializer(serializers.ModelSerializer):
    """
    A payment with its fee embedded as it stands after reconciliation.
    """
    fee = serializers.PrimaryKeyRelatedField(queryset=Fee.objects.all())
    student = serializers.PrimaryKeyRelatedField(queryset=Student.objects.all(), required=False)
    fee_detail = FeeSerializer(source='fee', read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id', 'fee', 'fee_detail', 'student', 'amount', 'payment_method',
            'transaction_id', 'payment_date', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class StudentPaymentSerializer(PaymentSerializer):
    """Nested under a student; the student comes from the URL."""
    student = serializers.PrimaryKeyRelatedField(read_only=True)
