from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from .models import HealthRecord


@admin.register(HealthRecord)
class HealthRecordAdmin(admin.ModelAdmin):
    list_display = ('student', 'record_type', 'record_date', 'provider', 'emergency_contact')
    list_filter = ('record_type', 'emergency_contact', 'record_date')
    search_fields = ('student__student_id', 'student__first_name', 'student__last_name', 'description', 'provider')
    raw_id_fields = ('student',)
    date_hierarchy = 'record_date'

    fieldsets = (
        (_('Record'), {
            'fields': ('student', 'record_type', 'record_date', 'description')
        }),
        (_('Care'), {
            'fields': ('provider', 'treatment', 'notes', 'emergency_contact')
        }),
    )
