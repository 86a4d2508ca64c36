# apps/academics/tests.py

import uuid

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.testing import make_admin, make_guardian, make_student, make_user
from .access import DenyReason, Operation, Relation, ResourceKind, authorize, relation_of
from .models import BehaviorLog


class FamilyMixin:
    """Two families: guardian_a looks after student_a, guardian_b after student_b."""

    def setUp(self):
        self.admin = make_admin()
        self.student_a = make_student()
        self.student_b = make_student()
        self.guardian_a = make_guardian(self.student_a)
        self.guardian_b = make_guardian(self.student_b)


class RelationOfTestCase(FamilyMixin, TestCase):

    def test_admin_resolves_to_admin(self):
        self.assertEqual(relation_of(self.admin, self.student_a.pk), Relation.ADMIN)

    def test_admin_wins_for_missing_student(self):
        self.assertEqual(relation_of(self.admin, uuid.uuid4()), Relation.ADMIN)

    def test_superuser_is_admin_whatever_the_role(self):
        superuser = make_user(is_superuser=True)
        self.assertEqual(relation_of(superuser, self.student_a.pk), Relation.ADMIN)

    def test_student_is_self_on_own_record(self):
        self.assertEqual(relation_of(self.student_a.user, self.student_a.pk), Relation.SELF)

    def test_student_is_none_on_other_student(self):
        self.assertEqual(relation_of(self.student_a.user, self.student_b.pk), Relation.NONE)

    def test_guardian_of_linked_child(self):
        self.assertEqual(relation_of(self.guardian_a.user, self.student_a.pk), Relation.GUARDIAN)

    def test_guardian_of_another_family_is_none(self):
        self.assertEqual(relation_of(self.guardian_a.user, self.student_b.pk), Relation.NONE)

    def test_guardian_record_without_parent_role_is_none(self):
        not_a_parent = make_user()
        make_guardian(self.student_a, user=not_a_parent)
        self.assertEqual(relation_of(not_a_parent, self.student_a.pk), Relation.NONE)

    def test_parent_without_guardian_record_is_none(self):
        parent = make_user(role='parent')
        self.assertEqual(relation_of(parent, self.student_a.pk), Relation.NONE)

    def test_missing_student_is_none_for_non_admin(self):
        self.assertEqual(relation_of(self.student_a.user, uuid.uuid4()), Relation.NONE)

    def test_no_actor_is_none(self):
        self.assertEqual(relation_of(None, self.student_a.pk), Relation.NONE)
        self.assertEqual(relation_of(AnonymousUser(), self.student_a.pk), Relation.NONE)


class AuthorizeTestCase(FamilyMixin, TestCase):

    def assertVerdict(self, actor, student, read, write):
        for kind in ResourceKind:
            with self.subTest(kind=kind):
                self.assertEqual(bool(authorize(actor, student.pk, kind, Operation.READ)), read)
                self.assertEqual(bool(authorize(actor, student.pk, kind, Operation.WRITE)), write)

    def test_admin_reads_and_writes(self):
        self.assertVerdict(self.admin, self.student_a, read=True, write=True)

    def test_self_reads_only(self):
        self.assertVerdict(self.student_a.user, self.student_a, read=True, write=False)

    def test_guardian_reads_only(self):
        self.assertVerdict(self.guardian_a.user, self.student_a, read=True, write=False)

    def test_unrelated_actor_is_denied(self):
        self.assertVerdict(self.student_b.user, self.student_a, read=False, write=False)
        self.assertVerdict(self.guardian_b.user, self.student_a, read=False, write=False)

    def test_denial_reasons(self):
        decision = authorize(None, self.student_a.pk, ResourceKind.GRADES, Operation.READ)
        self.assertFalse(decision)
        self.assertEqual(decision.reason, DenyReason.UNAUTHENTICATED)

        decision = authorize(AnonymousUser(), self.student_a.pk, 'grades', 'read')
        self.assertEqual(decision.reason, DenyReason.UNAUTHENTICATED)

        decision = authorize(self.guardian_b.user, self.student_a.pk, 'fees', 'read')
        self.assertEqual(decision.reason, DenyReason.UNAUTHORIZED)
        self.assertEqual(decision.relation, Relation.NONE)

        decision = authorize(self.student_a.user, self.student_a.pk, 'fees', 'write')
        self.assertEqual(decision.reason, DenyReason.UNAUTHORIZED)
        self.assertEqual(decision.relation, Relation.SELF)

    def test_permit_carries_relation(self):
        decision = authorize(self.guardian_a.user, self.student_a.pk, 'health-records', 'read')
        self.assertTrue(decision)
        self.assertIsNone(decision.reason)
        self.assertEqual(decision.relation, Relation.GUARDIAN)

    def test_unknown_resource_kind_is_rejected(self):
        with self.assertRaises(ValueError):
            authorize(self.admin, self.student_a.pk, 'library-books', Operation.READ)


class BehaviorLogEndpointTestCase(FamilyMixin, TestCase):
    """Per-student endpoints gate every request before touching the records."""

    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.log = BehaviorLog.objects.create(
            student=self.student_a,
            reported_by=self.admin,
            incident_type=BehaviorLog.IncidentType.POSITIVE,
            description='Helped a classmate',
            incident_date='2026-02-02',
        )
        self.list_url = reverse('academics:student-behavior-logs-list', kwargs={'student_pk': self.student_a.pk})
        self.detail_url = reverse(
            'academics:student-behavior-logs-detail',
            kwargs={'student_pk': self.student_a.pk, 'pk': self.log.pk}
        )
        self.payload = {
            'incident_type': 'disciplinary',
            'description': 'Late to class',
            'incident_date': '2026-02-03',
            'severity': 'low',
        }

    def test_anonymous_request_is_unauthenticated(self):
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 401)

    def test_student_reads_own_logs(self):
        self.client.force_authenticate(self.student_a.user)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row['id'] for row in response.data], [str(self.log.pk)])

    def test_student_cannot_write_own_logs(self):
        self.client.force_authenticate(self.student_a.user)
        self.assertEqual(self.client.post(self.list_url, self.payload).status_code, 403)
        self.assertEqual(self.client.patch(self.detail_url, {'severity': 'high'}).status_code, 403)
        self.assertEqual(self.client.delete(self.detail_url).status_code, 403)
        self.assertEqual(BehaviorLog.objects.count(), 1)

    def test_guardian_reads_child_logs(self):
        self.client.force_authenticate(self.guardian_a.user)
        self.assertEqual(self.client.get(self.list_url).status_code, 200)
        self.assertEqual(self.client.get(self.detail_url).status_code, 200)

    def test_other_family_is_forbidden(self):
        self.client.force_authenticate(self.guardian_b.user)
        self.assertEqual(self.client.get(self.list_url).status_code, 403)
        self.assertEqual(self.client.get(self.detail_url).status_code, 403)

        self.client.force_authenticate(self.student_b.user)
        self.assertEqual(self.client.get(self.list_url).status_code, 403)

    def test_admin_creates_log(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.list_url, self.payload)

        self.assertEqual(response.status_code, 201)
        log = BehaviorLog.objects.get(pk=response.data['id'])
        self.assertEqual(log.student, self.student_a)
        self.assertEqual(log.reported_by, self.admin)

    def test_admin_updates_and_deletes_log(self):
        self.client.force_authenticate(self.admin)
        response = self.client.patch(self.detail_url, {'severity': 'high'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['severity'], 'high')

        self.assertEqual(self.client.delete(self.detail_url).status_code, 204)
        self.assertFalse(BehaviorLog.objects.exists())

    def test_missing_student_is_not_found_for_admin_only(self):
        url = reverse('academics:student-behavior-logs-list', kwargs={'student_pk': uuid.uuid4()})

        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.get(url).status_code, 404)

        self.client.force_authenticate(self.guardian_a.user)
        self.assertEqual(self.client.get(url).status_code, 403)

    def test_record_of_another_student_is_not_reachable(self):
        url = reverse(
            'academics:student-behavior-logs-detail',
            kwargs={'student_pk': self.student_b.pk, 'pk': self.log.pk}
        )
        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.get(url).status_code, 404)


class GuardianChildrenTestCase(FamilyMixin, TestCase):

    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.url = reverse('academics:guardian_children', kwargs={'pk': self.guardian_a.pk})

    def test_guardian_lists_own_children(self):
        self.client.force_authenticate(self.guardian_a.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row['id'] for row in response.data], [str(self.student_a.pk)])

    def test_admin_lists_any_guardian_children(self):
        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.get(self.url).status_code, 200)

    def test_other_guardian_is_forbidden(self):
        self.client.force_authenticate(self.guardian_b.user)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_missing_guardian(self):
        url = reverse('academics:guardian_children', kwargs={'pk': uuid.uuid4()})

        self.client.force_authenticate(self.admin)
        self.assertEqual(self.client.get(url).status_code, 404)

        self.client.force_authenticate(self.guardian_a.user)
        self.assertEqual(self.client.get(url).status_code, 403)

    def test_anonymous_request_is_unauthenticated(self):
        self.assertEqual(self.client.get(self.url).status_code, 401)
