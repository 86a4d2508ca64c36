# apps/attendance/views.py

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from apps.academics.access import ResourceKind
from apps.academics.views import StudentRecordViewSet
from .models import Attendance
from .serializers import AttendanceSerializer


class StudentAttendanceViewSet(StudentRecordViewSet):
    resource_kind = ResourceKind.ATTENDANCE
    serializer_class = AttendanceSerializer
    queryset = Attendance.objects.select_related('course')

    def get_queryset(self):
        queryset = super().get_queryset()
        params = self.request.query_params
        if params.get('course'):
            queryset = queryset.filter(course_id=params['course'])
        if params.get('date'):
            queryset = queryset.filter(date=params['date'])
        return queryset

    def _check_unique(self, serializer, exclude_pk=None):
        data = serializer.validated_data
        instance = serializer.instance
        course = data.get('course', instance.course if instance else None)
        day = data.get('date', instance.date if instance else None)

        duplicates = Attendance.objects.filter(student=self.student, course=course, date=day)
        if exclude_pk is not None:
            duplicates = duplicates.exclude(pk=exclude_pk)
        if duplicates.exists():
            raise serializers.ValidationError(
                {'date': _('Attendance for this course and date is already recorded.')}
            )

    def perform_create(self, serializer):
        self._check_unique(serializer)
        super().perform_create(serializer)

    def perform_update(self, serializer):
        self._check_unique(serializer, exclude_pk=serializer.instance.pk)
        super().perform_update(serializer)
