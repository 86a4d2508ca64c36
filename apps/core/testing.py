# apps/core/testing.py
"""
Helpers for building the people that records hang off in tests.
"""

from datetime import date
from itertools import count

from django.contrib.auth import get_user_model

from apps.academics.models import Course, Guardian, Student

User = get_user_model()

_sequence = count(1)


def make_user(role=None, email=None, **extra):
    n = next(_sequence)
    return User.objects.create_user(
        email=email or f'user{n}@example.com',
        password='testpass123',
        role=role or User.Role.STUDENT,
        **extra
    )


def make_admin(**extra):
    return make_user(role=User.Role.ADMIN, **extra)


def make_student(user=None, **fields):
    user = user or make_user(role=User.Role.STUDENT)
    fields.setdefault('first_name', 'Test')
    fields.setdefault('last_name', f'Student{next(_sequence)}')
    fields.setdefault('date_of_birth', date(2005, 1, 1))
    return Student.objects.create(user=user, **fields)


def make_guardian(*children, user=None, **fields):
    user = user or make_user(role=User.Role.PARENT)
    fields.setdefault('first_name', 'Test')
    fields.setdefault('last_name', f'Parent{next(_sequence)}')
    guardian = Guardian.objects.create(user=user, **fields)
    if children:
        guardian.children.add(*children)
    return guardian


def make_course(**fields):
    n = next(_sequence)
    fields.setdefault('code', f'CRS{n:03d}')
    fields.setdefault('name', f'Course {n}')
    return Course.objects.create(**fields)
