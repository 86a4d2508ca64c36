from apps.academics.access import ResourceKind
from apps.academics.views import StudentRecordViewSet
from .models import HealthRecord
from .serializers import HealthRecordSerializer


class StudentHealthRecordViewSet(StudentRecordViewSet):
    resource_kind = ResourceKind.HEALTH_RECORDS
    serializer_class = HealthRecordSerializer
    queryset = HealthRecord.objects.all()

    def get_queryset(self):
        queryset = super().get_queryset()
        record_type = self.request.query_params.get('record_type')
        if record_type:
            queryset = queryset.filter(record_type=record_type)
        return queryset
