"""Domain error kinds and their REST API mapping.

Every error raised by the scheduling, registration and report services derives
from ``PlanningError``. Each kind carries a stable ``code`` and a ``retryable``
flag so callers can tell a transient storage conflict (safe to retry, since
duplicate registrations are guarded) from a permanent refusal.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class PlanningError(Exception):
    """Base class for all domain errors."""
    code = 'error'
    retryable = False
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message='', **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self):
        data = {
            'code': self.code,
            'detail': self.message,
            'retryable': self.retryable,
        }
        if self.context:
            data['context'] = self.context
        return data


class ValidationError(PlanningError):
    """Malformed input: bad dates, inverted bounds, missing fields."""
    code = 'validation_error'


class RuleViolationError(PlanningError):
    """One or more eligibility rules are violated.

    ``violations`` always lists every violated rule, never just the first.
    """
    code = 'rule_violation'
    http_status = status.HTTP_409_CONFLICT

    def __init__(self, violations, message='', **context):
        self.violations = list(violations)
        super().__init__(message or ', '.join(self.violations), **context)

    def to_dict(self):
        data = super().to_dict()
        data['violations'] = self.violations
        return data


class ConflictError(PlanningError):
    """Storage-level uniqueness conflict or inconsistent time window."""
    code = 'conflict'
    retryable = True
    http_status = status.HTTP_409_CONFLICT


class NotFoundError(PlanningError):
    """Referenced slot, volunteer, registration or report is absent."""
    code = 'not_found'
    http_status = status.HTTP_404_NOT_FOUND


class ForbiddenError(PlanningError):
    """Actor lacks rights over the resource."""
    code = 'forbidden'
    http_status = status.HTTP_403_FORBIDDEN


class InvalidTransitionError(PlanningError):
    """Registration status change not allowed by the approval workflow."""
    code = 'invalid_transition'
    http_status = status.HTTP_409_CONFLICT


class DatastoreError(PlanningError):
    """Transient datastore failure; the caller may retry."""
    code = 'datastore_unavailable'
    retryable = True
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE


class DispatchError(PlanningError):
    """Notification could not be dispatched. Never fails a state change."""
    code = 'dispatch_error'
    retryable = True
    http_status = status.HTTP_502_BAD_GATEWAY


def api_exception_handler(exc, context):
    """DRF exception handler that renders domain errors as JSON."""
    if isinstance(exc, PlanningError):
        if exc.http_status >= 500:
            logger.error('%s in %s: %s', exc.code, context.get('view'), exc.message)
        return Response(exc.to_dict(), status=exc.http_status)
    return exception_handler(exc, context)
