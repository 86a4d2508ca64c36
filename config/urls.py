from django.contrib import admin
from django.urls import path, include
from rest_framework.authtoken.views import obtain_auth_token


urlpatterns = [
    # Admin site
    path('admin/', admin.site.urls),

    # Token issuance for the browser client
    path('api/auth/token/', obtain_auth_token, name='api_token'),

    # Students and guardians, plus the per-student behavior logs
    path('api/', include('apps.academics.urls', namespace='academics')),

    # Fees and payments (ledger reconciliation)
    path('api/', include('apps.finance.urls', namespace='finance')),

    # Grades (percentage and letter derivation)
    path('api/', include('apps.assessment.urls', namespace='assessment')),

    # Remaining per-student records
    path('api/', include('apps.attendance.urls', namespace='attendance')),
    path('api/', include('apps.health.urls', namespace='health')),
    path('api/', include('apps.communication.urls', namespace='communication')),
]
