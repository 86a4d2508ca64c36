from apps.academics.routes import student_record_urls
from . import views

app_name = 'health'

urlpatterns = [
    *student_record_urls('health-records', views.StudentHealthRecordViewSet, 'student-health-records'),
]
