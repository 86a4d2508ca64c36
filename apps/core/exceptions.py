# apps/core/exceptions.py
"""
Error taxonomy shared by the services and the API layer.

Services raise Django's own exceptions where one fits (``ValidationError``
for bad input, ``Model.DoesNotExist`` for missing rows). The only
domain-specific failure is ``ConsistencyFailure``: a derived value could not
be restored atomically, so the write was rolled back.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class ConsistencyFailure(Exception):
    """
    A reconciliation or derivation could not complete inside its transaction.

    Always fatal for the request: the surrounding atomic block has been rolled
    back and the caller gets a 500-class error.
    """

    def __init__(self, message, *, record=None):
        super().__init__(message)
        self.record = record


def _validation_payload(exc):
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return {'detail': exc.messages}


def api_exception_handler(exc, context):
    """
    DRF exception handler that also understands the service-layer errors.

    - Django ``ValidationError`` -> 400
    - ``ObjectDoesNotExist`` on the request's primary resource -> 404
    - ``ConsistencyFailure`` -> 500, logged
    Everything else falls through to DRF's default handling.
    """
    if isinstance(exc, DjangoValidationError):
        set_rollback()
        return Response(_validation_payload(exc), status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, ConsistencyFailure):
        view = context.get('view')
        logger.error(
            f"Consistency failure in {view.__class__.__name__ if view else 'unknown view'}: {exc}"
        )
        set_rollback()
        return Response(
            {'detail': _('The record could not be updated consistently. No changes were saved.')},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ObjectDoesNotExist):
        set_rollback()
        return Response({'detail': _('Not found.')}, status=status.HTTP_404_NOT_FOUND)

    return exception_handler(exc, context)
