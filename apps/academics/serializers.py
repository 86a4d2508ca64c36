# apps/academics/serializers.py

from rest_framework import serializers
from .models import Student, Guardian, BehaviorLog


class StudentSerializer(serializers.ModelSerializer):
    """
    Read-only view of a student, used by guardian and nested listings.
    """
    full_name = serializers.CharField(read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Student
        fields = [
            'id', 'student_id', 'first_name', 'last_name', 'full_name', 'email',
            'date_of_birth', 'gender', 'department', 'year', 'enrollment_date', 'status'
        ]
        read_only_fields = fields


class GuardianSerializer(serializers.ModelSerializer):
    class Meta:
        model = Guardian
        fields = ['id', 'first_name', 'last_name', 'email', 'phone', 'relationship']
        read_only_fields = fields


class BehaviorLogSerializer(serializers.ModelSerializer):
    """
    Serializer for BehaviorLog. The owning student comes from the URL.
    """
    reported_by_name = serializers.CharField(source='reported_by.full_name', read_only=True)

    class Meta:
        model = BehaviorLog
        fields = [
            'id', 'student', 'reported_by', 'reported_by_name', 'incident_type',
            'description', 'incident_date', 'severity', 'action_taken', 'follow_up',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'student', 'reported_by', 'created_at', 'updated_at']
