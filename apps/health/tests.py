from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.testing import make_admin, make_guardian, make_student
from .models import HealthRecord


class StudentHealthRecordTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_student()
        HealthRecord.objects.create(
            student=self.student,
            record_type=HealthRecord.RecordType.ALLERGY,
            description='Peanut allergy',
        )
        self.url = reverse('health:student-health-records-list', kwargs={'student_pk': self.student.pk})

    def test_self_and_guardian_read(self):
        for user in (self.student.user, make_guardian(self.student).user):
            self.client.force_authenticate(user)
            response = self.client.get(self.url)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(len(response.data), 1)

    def test_cross_family_guardian_is_forbidden(self):
        self.client.force_authenticate(make_guardian(make_student()).user)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_admin_adds_record(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.url, {
            'record_type': 'injury',
            'description': 'Sprained ankle',
            'record_date': '2026-04-01',
            'emergency_contact': True,
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.student.health_records.count(), 2)
