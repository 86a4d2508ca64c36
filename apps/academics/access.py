# apps/academics/access.py
"""
Ownership resolution and the access policy for person-centric records.

Every grade, attendance mark, fee, payment, notification, health record and
behavior log belongs to one student. Who may read or write it depends only on
how the caller relates to that student:

    relation   read    write
    ADMIN      allow   allow
    SELF       allow   deny
    GUARDIAN   allow   deny
    NONE       deny    deny

``authorize`` is the single place this table is consulted. API views reach it
through ``StudentRecordPermission`` before touching the nested queryset.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .models import Guardian, Student

logger = logging.getLogger(__name__)


class Relation(str, enum.Enum):
    ADMIN = 'admin'
    SELF = 'self'
    GUARDIAN = 'guardian'
    NONE = 'none'


class Operation(str, enum.Enum):
    READ = 'read'
    WRITE = 'write'


class ResourceKind(str, enum.Enum):
    GRADES = 'grades'
    ATTENDANCE = 'attendance'
    FEES = 'fees'
    PAYMENTS = 'payments'
    NOTIFICATIONS = 'notifications'
    HEALTH_RECORDS = 'health-records'
    BEHAVIOR_LOGS = 'behavior-logs'


class DenyReason(str, enum.Enum):
    UNAUTHENTICATED = 'unauthenticated'
    UNAUTHORIZED = 'unauthorized'


@dataclass(frozen=True)
class Decision:
    permitted: bool
    reason: Optional[DenyReason] = None
    relation: Optional[Relation] = None

    def __bool__(self):
        return self.permitted


POLICY = {
    Relation.ADMIN: frozenset({Operation.READ, Operation.WRITE}),
    Relation.SELF: frozenset({Operation.READ}),
    Relation.GUARDIAN: frozenset({Operation.READ}),
    Relation.NONE: frozenset(),
}

# One table for all kinds. Kept per kind so a category can diverge later
# without touching callers.
RESOURCE_POLICIES = {kind: POLICY for kind in ResourceKind}


def relation_of(actor, student_id):
    """
    Resolve how ``actor`` relates to the student ``student_id``.

    Admin wins over everything else. A missing student resolves to NONE for
    non-admins, so the caller cannot tell "absent" from "not yours".
    """
    if actor is None or not actor.is_authenticated:
        return Relation.NONE

    if actor.is_admin_user():
        return Relation.ADMIN

    owner_user_id = (
        Student.objects.filter(pk=student_id).values_list('user_id', flat=True).first()
    )
    if owner_user_id is None:
        return Relation.NONE

    if owner_user_id == actor.pk:
        return Relation.SELF

    if actor.is_parent_user() and Guardian.objects.filter(
        user=actor, children__pk=student_id
    ).exists():
        return Relation.GUARDIAN

    return Relation.NONE


def authorize(actor, student_id, resource_kind, operation):
    """
    Decide whether ``actor`` may perform ``operation`` on the ``resource_kind``
    records of student ``student_id``.

    Returns a permitted ``Decision`` or a denied one carrying
    ``UNAUTHENTICATED`` (no actor at all) or ``UNAUTHORIZED``.
    """
    resource_kind = ResourceKind(resource_kind)
    operation = Operation(operation)

    if actor is None or not actor.is_authenticated:
        return Decision(False, DenyReason.UNAUTHENTICATED)

    relation = relation_of(actor, student_id)
    if operation in RESOURCE_POLICIES[resource_kind][relation]:
        return Decision(True, relation=relation)

    logger.info(
        f"Denied {operation.value} on {resource_kind.value} of student {student_id} "
        f"for user {actor.pk} (relation: {relation.value})"
    )
    return Decision(False, DenyReason.UNAUTHORIZED, relation=relation)
