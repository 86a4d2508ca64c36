# apps/academics/views.py

from django.shortcuts import get_object_or_404
from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, generics, viewsets

from .access import ResourceKind
from .models import Guardian, Student, BehaviorLog
from .permissions import StudentRecordPermission
from .serializers import BehaviorLogSerializer, StudentSerializer


# =============================================================================
# BASE CLASSES
# =============================================================================

class StudentRecordViewSet(viewsets.ModelViewSet):
    """
    Base for every ``students/<student_pk>/<kind>/`` collection.

    Subclasses set ``resource_kind``, ``queryset`` and ``serializer_class``.
    ``StudentRecordPermission`` runs first; only a permitted request reaches
    the student lookup and the nested queryset. An admin addressing a missing
    student gets a 404; everybody else was already refused with a 403.
    """
    permission_classes = [StudentRecordPermission]
    resource_kind = None
    student_lookup = 'student'

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.student = get_object_or_404(Student, pk=kwargs['student_pk'])

    def get_queryset(self):
        return super().get_queryset().filter(**{self.student_lookup: self.student})

    def perform_create(self, serializer):
        serializer.save(student=self.student)


# =============================================================================
# BEHAVIOR LOGS
# =============================================================================

class StudentBehaviorLogViewSet(StudentRecordViewSet):
    resource_kind = ResourceKind.BEHAVIOR_LOGS
    queryset = BehaviorLog.objects.select_related('reported_by')
    serializer_class = BehaviorLogSerializer

    def perform_create(self, serializer):
        serializer.save(student=self.student, reported_by=self.request.user)


# =============================================================================
# GUARDIANS
# =============================================================================

class GuardianChildrenView(generics.ListAPIView):
    """
    Children linked to a guardian. Visible to admins and to that guardian.
    """
    serializer_class = StudentSerializer

    def get_queryset(self):
        user = self.request.user
        guardian_pk = self.kwargs['pk']

        if user.is_admin_user():
            guardian = get_object_or_404(Guardian, pk=guardian_pk)
        else:
            guardian = Guardian.objects.filter(pk=guardian_pk, user=user).first()
            if guardian is None:
                raise exceptions.PermissionDenied(_('You can only view your own children.'))

        return guardian.children.select_related('user').order_by('student_id')
