from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.testing import make_admin, make_guardian, make_student, make_user
from .models import Notification


class StudentNotificationTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_student()
        self.notification = Notification.objects.create(
            user=self.student.user, title='Fee reminder', message='Tuition is due'
        )
        Notification.objects.create(user=make_user(), title='Someone else', message='Not for this student')
        self.url = reverse('communication:student-notifications-list', kwargs={'student_pk': self.student.pk})

    def test_notifications_resolve_through_student_account(self):
        self.client.force_authenticate(self.student.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row['id'] for row in response.data], [str(self.notification.pk)])

    def test_guardian_reads_child_notifications(self):
        self.client.force_authenticate(make_guardian(self.student).user)
        self.assertEqual(self.client.get(self.url).status_code, 200)

    def test_student_cannot_write(self):
        self.client.force_authenticate(self.student.user)
        detail = reverse(
            'communication:student-notifications-detail',
            kwargs={'student_pk': self.student.pk, 'pk': self.notification.pk}
        )
        self.assertEqual(self.client.patch(detail, {'is_read': True}).status_code, 403)

    def test_admin_sends_and_marks_read(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.url, {'title': 'Grades posted', 'message': 'Check your grades'})
        self.assertEqual(response.status_code, 201)
        created = Notification.objects.get(pk=response.data['id'])
        self.assertEqual(created.user, self.student.user)

        detail = reverse(
            'communication:student-notifications-detail',
            kwargs={'student_pk': self.student.pk, 'pk': created.pk}
        )
        response = self.client.patch(detail, {'is_read': True})
        self.assertEqual(response.status_code, 200)
        self.assertIsNotNone(response.data['read_at'])

    def test_mark_as_read(self):
        self.notification.mark_as_read()
        self.notification.refresh_from_db()
        self.assertTrue(self.notification.is_read)
        self.assertIsNotNone(self.notification.read_at)
