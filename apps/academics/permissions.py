# apps/academics/permissions.py

from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, permissions

from .access import DenyReason, Operation, authorize


class IsAdminRole(permissions.BasePermission):
    """
    Admin role (or superuser) only. Used by the top-level write surfaces.
    """
    message = _('Administrator access is required.')

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            raise exceptions.NotAuthenticated()
        return user.is_admin_user()


class StudentRecordPermission(permissions.BasePermission):
    """
    Gate for ``/students/<student_pk>/<kind>/`` collections.

    The view declares ``resource_kind``; the student comes from the URL. The
    check runs in ``initial()``, before any queryset for the nested records is
    built.
    """

    def has_permission(self, request, view):
        operation = Operation.READ if request.method in permissions.SAFE_METHODS else Operation.WRITE
        actor = request.user if request.user and request.user.is_authenticated else None

        decision = authorize(actor, view.kwargs['student_pk'], view.resource_kind, operation)
        if decision:
            return True

        if decision.reason == DenyReason.UNAUTHENTICATED:
            raise exceptions.NotAuthenticated()
        raise exceptions.PermissionDenied(
            _('You do not have permission to access these records.')
        )
