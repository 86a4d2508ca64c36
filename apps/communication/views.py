from django.utils import timezone

from apps.academics.access import ResourceKind
from apps.academics.views import StudentRecordViewSet
from .models import Notification
from .serializers import NotificationSerializer


class StudentNotificationViewSet(StudentRecordViewSet):
    """
    Notifications of the student's user account.
    """
    resource_kind = ResourceKind.NOTIFICATIONS
    serializer_class = NotificationSerializer
    queryset = Notification.objects.all()
    student_lookup = 'user__student_profile'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.query_params.get('unread') in ('1', 'true'):
            queryset = queryset.filter(is_read=False)
        return queryset

    def perform_create(self, serializer):
        serializer.save(user=self.student.user)

    def perform_update(self, serializer):
        is_read = serializer.validated_data.get('is_read')
        if is_read and not serializer.instance.is_read:
            serializer.save(read_at=timezone.now())
        elif is_read is False:
            serializer.save(read_at=None)
        else:
            serializer.save()
