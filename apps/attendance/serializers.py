from rest_framework import serializers
from .models import Attendance


class AttendanceSerializer(serializers.ModelSerializer):
    course_code = serializers.CharField(source='course.code', read_only=True)

    class Meta:
        model = Attendance
        fields = ['id', 'student', 'course', 'course_code', 'date', 'status', 'remarks', 'created_at', 'updated_at']
        read_only_fields = ['id', 'student', 'created_at', 'updated_at']
