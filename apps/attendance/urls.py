from apps.academics.routes import student_record_urls
from . import views

app_name = 'attendance'

urlpatterns = [
    *student_record_urls('attendance', views.StudentAttendanceViewSet, 'student-attendance'),
]
