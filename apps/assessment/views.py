# apps/assessment/views.py

from rest_framework import viewsets

from apps.academics.access import ResourceKind
from apps.academics.permissions import IsAdminRole
from apps.academics.views import StudentRecordViewSet
from .models import Grade
from .serializers import AdminGradeSerializer, StudentGradeSerializer
from .services import GradeService


class GradeWriteMixin:
    """Every grade write derives percentage and letter before it is stored."""

    def perform_create(self, serializer):
        fields = dict(serializer.validated_data)
        fields.update(self.get_owner_fields())
        serializer.instance = GradeService.create_grade(**fields)

    def perform_update(self, serializer):
        serializer.instance = GradeService.update_grade(
            serializer.instance, **serializer.validated_data
        )

    def get_owner_fields(self):
        return {}

    def filter_grades(self, queryset):
        params = self.request.query_params
        if params.get('course'):
            queryset = queryset.filter(course_id=params['course'])
        if params.get('grade_letter'):
            queryset = queryset.filter(grade_letter=params['grade_letter'])
        return queryset


class GradeViewSet(GradeWriteMixin, viewsets.ModelViewSet):
    permission_classes = [IsAdminRole]
    serializer_class = AdminGradeSerializer
    queryset = Grade.objects.select_related('student', 'course', 'assessment')

    def get_queryset(self):
        queryset = self.filter_grades(super().get_queryset())
        student = self.request.query_params.get('student')
        if student:
            queryset = queryset.filter(student_id=student)
        return queryset


class StudentGradeViewSet(GradeWriteMixin, StudentRecordViewSet):
    resource_kind = ResourceKind.GRADES
    serializer_class = StudentGradeSerializer
    queryset = Grade.objects.select_related('course', 'assessment')

    def get_queryset(self):
        return self.filter_grades(super().get_queryset())

    def get_owner_fields(self):
        return {'student': self.student}
