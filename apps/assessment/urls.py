# apps/assessment/urls.py

from rest_framework.routers import SimpleRouter

from apps.academics.routes import student_record_urls
from . import views

app_name = 'assessment'

router = SimpleRouter()
router.register('grades', views.GradeViewSet, basename='grade')

urlpatterns = [
    *router.urls,
    *student_record_urls('grades', views.StudentGradeViewSet, 'student-grades'),
]
