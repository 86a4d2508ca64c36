from django.contrib.auth import get_user_model
from django.test import TestCase

User = get_user_model()


class UserManagerTestCase(TestCase):

    def test_create_user_uses_email(self):
        user = User.objects.create_user(email='Student@Example.COM', password='testpass123')
        self.assertEqual(user.email, 'Student@example.com')
        self.assertEqual(user.role, User.Role.STUDENT)
        self.assertTrue(user.check_password('testpass123'))
        self.assertFalse(user.is_admin_user())

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', password='testpass123')

    def test_superuser_is_admin(self):
        user = User.objects.create_superuser(email='root@example.com', password='testpass123')
        self.assertEqual(user.role, User.Role.ADMIN)
        self.assertTrue(user.is_admin_user())

    def test_get_admin_users(self):
        admin = User.objects.create_user(email='admin@example.com', role=User.Role.ADMIN)
        superuser = User.objects.create_superuser(email='root@example.com', password='x')
        User.objects.create_user(email='parent@example.com', role=User.Role.PARENT)

        self.assertEqual(set(User.objects.get_admin_users()), {admin, superuser})


class TokenLoginTestCase(TestCase):

    def test_obtain_token_with_email(self):
        User.objects.create_user(email='student@example.com', password='testpass123')
        response = self.client.post(
            '/api/auth/token/',
            {'username': 'student@example.com', 'password': 'testpass123'},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn('token', response.json())
