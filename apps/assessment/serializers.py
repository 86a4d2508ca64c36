from rest_framework import serializers
from apps.academics.models import Student
from .models import Grade


class GradeSerializer(serializers.ModelSerializer):
    """
    Grade with its stored percentage and letter. ``max_score`` may be left
    out when an assessment is given.
    """
    course_code = serializers.CharField(source='course.code', read_only=True)
    max_score = serializers.DecimalField(max_digits=8, decimal_places=2, required=False)

    class Meta:
        model = Grade
        fields = [
            'id', 'student', 'course', 'course_code', 'assessment', 'assessment_type',
            'assessment_name', 'score', 'max_score', 'percentage', 'grade_letter',
            'date', 'remarks', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'percentage', 'grade_letter', 'created_at', 'updated_at']


class AdminGradeSerializer(GradeSerializer):
    student = serializers.PrimaryKeyRelatedField(queryset=Student.objects.all())


class StudentGradeSerializer(GradeSerializer):
    """Nested under a student; the student comes from the URL."""
    student = serializers.PrimaryKeyRelatedField(read_only=True)
