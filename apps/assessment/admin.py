# apps/assessment/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Assessment, Grade
from .services import GradeService


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    list_display = ('name', 'course', 'assessment_type', 'total_marks', 'weightage', 'due_date')
    list_filter = ('assessment_type', 'course')
    search_fields = ('name', 'course__code', 'course__name')
    raw_id_fields = ('course',)


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    """
    Admin interface for Grade model. Saves go through GradeService so the
    percentage and letter are derived from the values being stored.
    """
    list_display = ('student', 'course', 'assessment_name', 'score', 'max_score', 'percentage', 'grade_letter', 'date')
    list_filter = ('grade_letter', 'assessment_type', 'course', 'date')
    search_fields = ('student__student_id', 'student__first_name', 'student__last_name', 'assessment_name')
    readonly_fields = ('percentage', 'grade_letter', 'created_at', 'updated_at')
    raw_id_fields = ('student', 'course', 'assessment')

    fieldsets = (
        (_('Grade Information'), {
            'fields': ('student', 'course', 'assessment', 'assessment_type', 'assessment_name', 'date')
        }),
        (_('Score'), {
            'fields': ('score', 'max_score', 'percentage', 'grade_letter')
        }),
        (_('Additional Information'), {
            'fields': ('remarks',)
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def save_model(self, request, obj, form, change):
        if change:
            changes = {name: form.cleaned_data[name] for name in form.changed_data}
            GradeService.update_grade(Grade.objects.get(pk=obj.pk), **changes)
        else:
            grade = GradeService.create_grade(**form.cleaned_data)
            obj.pk = grade.pk
