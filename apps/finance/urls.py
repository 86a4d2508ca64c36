# apps/finance/urls.py

from rest_framework.routers import SimpleRouter

from apps.academics.routes import student_record_urls
from . import views

app_name = 'finance'

router = SimpleRouter()
router.register('fees', views.FeeViewSet, basename='fee')
router.register('payments', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # ── ADMIN LEDGER ─────────────────────────────────────────────────────────
    *router.urls,

    # ── PER-STUDENT LEDGER ───────────────────────────────────────────────────
    *student_record_urls('fees', views.StudentFeeViewSet, 'student-fees'),
    *student_record_urls('payments', views.StudentPaymentViewSet, 'student-payments'),
]
