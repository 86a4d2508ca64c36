# apps/academics/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from .models import Course, Student, Guardian, StudentGuardian, BehaviorLog


class StudentGuardianInline(admin.TabularInline):
    """
    Inline admin for the guardians linked to a student.
    """
    model = StudentGuardian
    extra = 0
    raw_id_fields = ('guardian',)
    verbose_name_plural = _('Parents/Guardians')


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'credits')
    search_fields = ('code', 'name')


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """
    Admin interface for Student model.
    """
    list_display = ('student_id', 'full_name', 'user', 'department', 'year', 'status')
    list_filter = ('status', 'department', 'year', 'enrollment_date')
    search_fields = ('student_id', 'first_name', 'last_name', 'user__email')
    readonly_fields = ('student_id', 'created_at', 'updated_at')
    raw_id_fields = ('user',)

    fieldsets = (
        (_('Student Information'), {
            'fields': ('user', 'student_id', 'first_name', 'last_name', 'date_of_birth', 'gender')
        }),
        (_('Contact'), {
            'fields': ('phone', 'address')
        }),
        (_('Academic'), {
            'fields': ('enrollment_date', 'department', 'year', 'status')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    inlines = [StudentGuardianInline]


@admin.register(Guardian)
class GuardianAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'user', 'relationship', 'phone')
    list_filter = ('relationship',)
    search_fields = ('first_name', 'last_name', 'email', 'user__email')
    raw_id_fields = ('user',)
    inlines = [StudentGuardianInline]


@admin.register(BehaviorLog)
class BehaviorLogAdmin(admin.ModelAdmin):
    list_display = ('student', 'incident_type', 'severity', 'incident_date', 'reported_by')
    list_filter = ('incident_type', 'severity', 'incident_date')
    search_fields = ('student__student_id', 'student__first_name', 'student__last_name', 'description')
    raw_id_fields = ('student', 'reported_by')
    date_hierarchy = 'incident_date'

    def save_model(self, request, obj, form, change):
        if not change and obj.reported_by_id is None:
            obj.reported_by = request.user
        super().save_model(request, obj, form, change)
