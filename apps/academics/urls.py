from django.urls import path
from . import views
from .routes import student_record_urls

app_name = 'academics'

urlpatterns = [
    # Guardians
    path('guardians/<uuid:pk>/children/', views.GuardianChildrenView.as_view(), name='guardian_children'),

    # Per-student behavior logs
    *student_record_urls('behavior-logs', views.StudentBehaviorLogViewSet, 'student-behavior-logs'),
]
