# apps/finance/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Fee, Payment
from .services import FeeService, PaymentService


def _changed_fields(form):
    return {name: form.cleaned_data[name] for name in form.changed_data}


class PaymentInline(admin.TabularInline):
    """
    Read-only list of a fee's payments. Payments are added from the
    Payment admin so each one is reconciled.
    """
    model = Payment
    extra = 0
    fields = ('amount', 'payment_method', 'payment_date', 'transaction_id')
    readonly_fields = ('amount', 'payment_method', 'payment_date', 'transaction_id')
    can_delete = False
    max_num = 0
    verbose_name_plural = _('Payments')

    def has_add_permission(self, request, obj):
        return False


@admin.register(Fee)
class FeeAdmin(admin.ModelAdmin):
    """
    Admin interface for Fee model. Paid amount and status are reconciled,
    never edited.
    """
    list_display = ('fee_type', 'student', 'amount', 'paid_amount', 'status', 'due_date')
    list_filter = ('status', 'due_date', 'created_at')
    search_fields = ('fee_type', 'student__student_id', 'student__first_name', 'student__last_name')
    readonly_fields = ('paid_amount', 'status', 'created_at', 'updated_at')
    raw_id_fields = ('student',)
    date_hierarchy = 'due_date'

    fieldsets = (
        (_('Fee Information'), {
            'fields': ('student', 'fee_type', 'amount', 'due_date', 'description')
        }),
        (_('Reconciled'), {
            'fields': ('paid_amount', 'status')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    inlines = [PaymentInline]

    def save_model(self, request, obj, form, change):
        if change:
            FeeService.update_fee(Fee.objects.get(pk=obj.pk), **_changed_fields(form))
        else:
            fee = FeeService.create_fee(**form.cleaned_data)
            obj.pk = fee.pk


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """
    Admin interface for Payment model. Every save and delete reconciles the
    affected fee.
    """
    list_display = ('fee', 'student', 'amount', 'payment_method', 'payment_date', 'transaction_id')
    list_filter = ('payment_method', 'payment_date')
    search_fields = ('transaction_id', 'student__student_id', 'fee__fee_type')
    readonly_fields = ('student', 'created_at', 'updated_at')
    raw_id_fields = ('fee',)
    date_hierarchy = 'payment_date'

    fieldsets = (
        (_('Payment Information'), {
            'fields': ('fee', 'student', 'amount', 'payment_method', 'payment_date')
        }),
        (_('Reference'), {
            'fields': ('transaction_id', 'notes')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def save_model(self, request, obj, form, change):
        if change:
            PaymentService.update_payment(Payment.objects.get(pk=obj.pk), **_changed_fields(form))
        else:
            payment = PaymentService.create_payment(**form.cleaned_data)
            obj.pk = payment.pk

    def delete_model(self, request, obj):
        PaymentService.delete_payment(obj)

    def delete_queryset(self, request, queryset):
        for payment in queryset:
            PaymentService.delete_payment(payment)
