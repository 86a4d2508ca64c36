# apps/finance/views.py

from django.utils.translation import gettext_lazy as _
from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.academics.access import ResourceKind
from apps.academics.permissions import IsAdminRole
from apps.academics.views import StudentRecordViewSet
from .models import Fee, Payment
from .serializers import AdminFeeSerializer, FeeSerializer, PaymentSerializer, StudentPaymentSerializer
from .services import FeeService, PaymentService


# =============================================================================
# MIXINS
# =============================================================================

class FeeWriteMixin:
    """Route fee writes through FeeService; derived fields stay server-side."""

    def perform_create(self, serializer):
        fields = dict(serializer.validated_data)
        fields.update(self.get_owner_fields())
        serializer.instance = FeeService.create_fee(**fields)

    def perform_update(self, serializer):
        serializer.instance = FeeService.update_fee(serializer.instance, **serializer.validated_data)

    def get_owner_fields(self):
        return {}

    def filter_fees(self, queryset):
        fee_status = self.request.query_params.get('status')
        if fee_status:
            queryset = queryset.filter(status=fee_status)
        return queryset


class PaymentWriteMixin:
    """
    Route payment writes through PaymentService so every write reconciles
    its fee in the same transaction.
    """

    def perform_create(self, serializer):
        fields = dict(serializer.validated_data)
        fields.update(self.get_owner_fields())
        serializer.instance = PaymentService.create_payment(**fields)

    def perform_update(self, serializer):
        changes = dict(serializer.validated_data)
        changes.update(self.get_owner_fields())
        serializer.instance = PaymentService.update_payment(serializer.instance, **changes)

    def destroy(self, request, *args, **kwargs):
        fee = PaymentService.delete_payment(self.get_object())
        return Response(
            {
                'message': _('Payment deleted.'),
                'fee': FeeSerializer(fee, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_200_OK,
        )

    def get_owner_fields(self):
        return {}


# =============================================================================
# ADMIN COLLECTIONS
# =============================================================================

class FeeViewSet(FeeWriteMixin, viewsets.ModelViewSet):
    """
    All fees. ``?status=`` and ``?student=`` filter on the stored columns.
    """
    permission_classes = [IsAdminRole]
    serializer_class = AdminFeeSerializer
    queryset = Fee.objects.select_related('student')

    def get_queryset(self):
        queryset = self.filter_fees(super().get_queryset())
        student = self.request.query_params.get('student')
        if student:
            queryset = queryset.filter(student_id=student)
        return queryset


class PaymentViewSet(PaymentWriteMixin, viewsets.ModelViewSet):
    permission_classes = [IsAdminRole]
    serializer_class = PaymentSerializer
    queryset = Payment.objects.select_related('fee', 'student')

    def get_queryset(self):
        queryset = super().get_queryset()
        fee = self.request.query_params.get('fee')
        if fee:
            queryset = queryset.filter(fee_id=fee)
        return queryset


# =============================================================================
# PER-STUDENT COLLECTIONS
# =============================================================================

class StudentFeeViewSet(FeeWriteMixin, StudentRecordViewSet):
    resource_kind = ResourceKind.FEES
    serializer_class = FeeSerializer
    queryset = Fee.objects.all()

    def get_queryset(self):
        return self.filter_fees(super().get_queryset())

    def get_owner_fields(self):
        return {'student': self.student}


class StudentPaymentViewSet(PaymentWriteMixin, StudentRecordViewSet):
    resource_kind = ResourceKind.PAYMENTS
    serializer_class = StudentPaymentSerializer
    queryset = Payment.objects.select_related('fee')

    def get_owner_fields(self):
        return {'student': self.student}
