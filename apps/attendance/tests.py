# apps/attendance/tests.py

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.testing import make_admin, make_course, make_guardian, make_student
from .models import Attendance


class StudentAttendanceTestCase(TestCase):
    """Test cases for the per-student attendance endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_student()
        self.guardian = make_guardian(self.student)
        self.course = make_course()
        self.record = Attendance.objects.create(
            student=self.student, course=self.course, date='2026-03-02', status=Attendance.AttendanceStatus.LATE
        )
        self.url = reverse('attendance:student-attendance-list', kwargs={'student_pk': self.student.pk})

    def test_guardian_reads_attendance(self):
        self.client.force_authenticate(self.guardian.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data[0]['status'], 'late')

    def test_other_student_is_forbidden(self):
        self.client.force_authenticate(make_student().user)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_admin_records_attendance(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.url, {
            'course': str(self.course.pk), 'date': '2026-03-03', 'status': 'present'
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(Attendance.objects.filter(student=self.student).count(), 2)

    def test_duplicate_day_is_rejected(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.url, {
            'course': str(self.course.pk), 'date': '2026-03-02', 'status': 'present'
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Attendance.objects.count(), 1)

    def test_student_cannot_record_attendance(self):
        self.client.force_authenticate(self.student.user)
        response = self.client.post(self.url, {
            'course': str(self.course.pk), 'date': '2026-03-03', 'status': 'present'
        })
        self.assertEqual(response.status_code, 403)
