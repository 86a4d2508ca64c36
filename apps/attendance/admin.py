# apps/attendance/admin.py

from django.contrib import admin
from .models import Attendance


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ('student', 'course', 'date', 'status')
    list_filter = ('status', 'date', 'course')
    search_fields = ('student__student_id', 'student__first_name', 'student__last_name', 'course__code')
    raw_id_fields = ('student', 'course')
    date_hierarchy = 'date'
