from apps.academics.routes import student_record_urls
from . import views

app_name = 'communication'

urlpatterns = [
    *student_record_urls('notifications', views.StudentNotificationViewSet, 'student-notifications'),
]
