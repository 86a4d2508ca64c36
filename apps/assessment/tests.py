# apps/assessment/tests.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.testing import make_admin, make_course, make_guardian, make_student
from .models import Assessment, Grade
from .services import GradeService, derive


class DeriveTestCase(SimpleTestCase):

    def test_letters(self):
        self.assertEqual(derive(85, 100), (Decimal('85'), 'B'))
        self.assertEqual(derive(92, 100), (Decimal('92'), 'A'))
        self.assertEqual(derive(59.9, 100), (Decimal('59.9'), 'F'))
        self.assertEqual(derive(Decimal('35'), Decimal('50')), (Decimal('70'), 'C'))
        self.assertEqual(derive(Decimal('12'), Decimal('20')), (Decimal('60'), 'D'))

    def test_non_positive_max_score_skips_derivation(self):
        self.assertEqual(derive(100, 0), (None, None))
        self.assertEqual(derive(10, -5), (None, None))

    def test_threshold_boundaries(self):
        self.assertEqual(derive(90, 100)[1], 'A')
        self.assertEqual(derive(89.999, 100)[1], 'B')
        self.assertEqual(derive(80, 100)[1], 'B')
        self.assertEqual(derive(Decimal('79.99'), 100)[1], 'C')

    def test_percentage_is_truncated_not_rounded(self):
        percentage, letter = derive(Decimal('89.99999'), 100)
        self.assertEqual(percentage, Decimal('89.9999'))
        self.assertEqual(letter, 'B')

        percentage, _ = derive(2, 3)
        self.assertEqual(percentage, Decimal('66.6666'))


class GradeServiceTestCase(TestCase):

    def setUp(self):
        self.student = make_student()
        self.course = make_course()

    def create(self, **fields):
        fields.setdefault('student', self.student)
        fields.setdefault('course', self.course)
        fields.setdefault('assessment_name', 'Quiz 1')
        return GradeService.create_grade(**fields)

    def test_create_stores_derived_fields(self):
        grade = self.create(score=Decimal('45'), max_score=Decimal('50'))

        stored = Grade.objects.get(pk=grade.pk)
        self.assertEqual(stored.percentage, Decimal('90.0000'))
        self.assertEqual(stored.grade_letter, 'A')

    def test_update_score_only_rederives(self):
        grade = self.create(score=Decimal('45'), max_score=Decimal('50'))
        GradeService.update_grade(grade, score=Decimal('30'))

        stored = Grade.objects.get(pk=grade.pk)
        self.assertEqual(stored.percentage, Decimal('60.0000'))
        self.assertEqual(stored.grade_letter, 'D')

    def test_update_max_score_only_rederives(self):
        grade = self.create(score=Decimal('45'), max_score=Decimal('50'))
        GradeService.update_grade(grade, max_score=Decimal('100'))

        stored = Grade.objects.get(pk=grade.pk)
        self.assertEqual(stored.percentage, Decimal('45.0000'))
        self.assertEqual(stored.grade_letter, 'F')

    def test_max_score_defaults_to_assessment_total(self):
        assessment = Assessment.objects.create(
            course=self.course, name='Midterm', total_marks=Decimal('40')
        )
        grade = self.create(assessment=assessment, score=Decimal('34'))

        self.assertEqual(grade.max_score, Decimal('40'))
        self.assertEqual(grade.grade_letter, 'B')

    def test_changing_assessment_takes_its_total_marks(self):
        grade = self.create(score=Decimal('30'), max_score=Decimal('50'))
        assessment = Assessment.objects.create(
            course=self.course, name='Unit test', total_marks=Decimal('40')
        )

        GradeService.update_grade(grade, assessment=assessment)

        stored = Grade.objects.get(pk=grade.pk)
        self.assertEqual(stored.max_score, Decimal('40'))
        self.assertEqual(stored.percentage, Decimal('75.0000'))
        self.assertEqual(stored.grade_letter, 'C')

    def test_explicit_max_score_wins_over_new_assessment(self):
        grade = self.create(score=Decimal('30'), max_score=Decimal('50'))
        assessment = Assessment.objects.create(
            course=self.course, name='Unit test', total_marks=Decimal('40')
        )

        GradeService.update_grade(grade, assessment=assessment, max_score=Decimal('60'))

        self.assertEqual(Grade.objects.get(pk=grade.pk).max_score, Decimal('60'))

    def test_client_supplied_derived_fields_are_ignored(self):
        grade = self.create(
            score=Decimal('10'), max_score=Decimal('100'),
            percentage=Decimal('99'), grade_letter='A',
        )
        self.assertEqual(grade.grade_letter, 'F')

    def test_strict_validation(self):
        invalid = (
            {'score': Decimal('10'), 'max_score': Decimal('0')},
            {'score': Decimal('10'), 'max_score': Decimal('-10')},
            {'score': Decimal('-1'), 'max_score': Decimal('10')},
            {'score': Decimal('11'), 'max_score': Decimal('10')},
            {'score': Decimal('5')},
        )
        for fields in invalid:
            with self.subTest(**fields), self.assertRaises(ValidationError):
                self.create(**fields)
        self.assertFalse(Grade.objects.exists())

    def test_invalid_update_leaves_stored_grade_alone(self):
        grade = self.create(score=Decimal('45'), max_score=Decimal('50'))
        with self.assertRaises(ValidationError):
            GradeService.update_grade(grade, max_score=Decimal('0'))

        stored = Grade.objects.get(pk=grade.pk)
        self.assertEqual(stored.max_score, Decimal('50'))
        self.assertEqual(stored.grade_letter, 'A')


class GradeAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.student = make_student()
        self.course = make_course()
        self.grade = GradeService.create_grade(
            student=self.student, course=self.course, score=Decimal('88'), max_score=Decimal('100')
        )
        self.student_grades_url = reverse('assessment:student-grades-list', kwargs={'student_pk': self.student.pk})

    def test_student_reads_own_grades(self):
        self.client.force_authenticate(self.student.user)
        response = self.client.get(self.student_grades_url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data[0]['grade_letter'], 'B')
        self.assertEqual(response.data[0]['percentage'], '88.0000')

    def test_unlinked_guardian_is_forbidden(self):
        make_guardian(make_student())
        stranger = make_guardian()
        self.client.force_authenticate(stranger.user)
        self.assertEqual(self.client.get(self.student_grades_url).status_code, 403)

    def test_anonymous_request_is_unauthenticated(self):
        self.assertEqual(self.client.get(self.student_grades_url).status_code, 401)

    def test_admin_creates_grade(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse('assessment:grade-list'), {
            'student': str(self.student.pk),
            'course': str(self.course.pk),
            'assessment_type': 'final',
            'score': '72.50',
            'max_score': '100.00',
        })

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['percentage'], '72.5000')
        self.assertEqual(response.data['grade_letter'], 'C')

    def test_admin_update_rederives(self):
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse('assessment:grade-detail', kwargs={'pk': self.grade.pk}),
            {'score': '95'}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['grade_letter'], 'A')
        self.assertEqual(Grade.objects.get(pk=self.grade.pk).grade_letter, 'A')

    def test_zero_max_score_is_rejected(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(self.student_grades_url, {
            'course': str(self.course.pk), 'score': '5', 'max_score': '0',
        })

        self.assertEqual(response.status_code, 400)
        self.assertIn('max_score', response.data)
        self.assertEqual(Grade.objects.count(), 1)

    def test_student_cannot_write_grades(self):
        self.client.force_authenticate(self.student.user)
        response = self.client.patch(
            reverse('assessment:student-grades-detail', kwargs={'student_pk': self.student.pk, 'pk': self.grade.pk}),
            {'score': '100'}
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(Grade.objects.get(pk=self.grade.pk).score, Decimal('88'))

    def test_filter_by_letter(self):
        GradeService.create_grade(student=self.student, course=self.course, score=Decimal('40'), max_score=Decimal('100'))
        self.client.force_authenticate(self.admin)

        response = self.client.get(reverse('assessment:grade-list'), {'grade_letter': 'F'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 1)
