"""Centralized constants and choices for the application."""
from django.db import models
from django.utils.translation import gettext_lazy as _


class Roles:
    """Profile role definitions."""
    ADMIN = 'admin'
    SUPERVISOR = 'supervisor'
    VOLUNTEER = 'volunteer'

    CHOICES = [
        (ADMIN, _('Administrateur')),
        (SUPERVISOR, _('Responsable')),
        (VOLUNTEER, _('Proclamateur')),
    ]

    # Roles allowed to review registrations and reports
    STAFF_ROLES = [ADMIN, SUPERVISOR]


class ProfileStatus:
    """Profile lifecycle states."""
    ACTIVE = 'active'
    INACTIVE = 'inactive'
    TEMPORARY = 'temporary'

    CHOICES = [
        (ACTIVE, _('Actif')),
        (INACTIVE, _('Inactif')),
        (TEMPORARY, _('Temporaire')),
    ]


class RegistrationStatus(models.TextChoices):
    """Lifecycle states of a registration on a slot."""
    PENDING = 'pending', _('En attente')
    PROVISIONAL = 'provisional', _('Provisoire')
    CONFIRMED = 'confirmed', _('Confirmée')
    REJECTED = 'rejected', _('Refusée')


# Statuses that hold a place and count toward the monthly quota
COUNTED_REGISTRATION_STATUSES = [
    RegistrationStatus.PENDING,
    RegistrationStatus.PROVISIONAL,
    RegistrationStatus.CONFIRMED,
]

# Statuses still waiting on an approver decision
REVIEWABLE_REGISTRATION_STATUSES = [
    RegistrationStatus.PENDING,
    RegistrationStatus.PROVISIONAL,
]


class PriorityTier(models.TextChoices):
    """Ordering hint for the pending-approval queue."""
    HIGH = 'high', _('Haute')
    MEDIUM = 'medium', _('Moyenne')
    LOW = 'low', _('Basse')


# Queue order: HIGH first
PRIORITY_RANK = {
    PriorityTier.HIGH: 0,
    PriorityTier.MEDIUM: 1,
    PriorityTier.LOW: 2,
}


class RuleViolation:
    """Names of the eligibility rules reported to callers."""
    MONTHLY_LIMIT_REACHED = 'monthly-limit-reached'
    ALREADY_REGISTERED = 'already-registered-this-slot'
    REPORT_SLOT_NOT_CONFIRMED = 'report-slot-not-confirmed'

    # Rules an administrator may override with a provisional registration
    OVERRIDABLE = [MONTHLY_LIMIT_REACHED]


class RecurrenceFrequency:
    """Slot recurrence frequency."""
    WEEKLY = 'weekly'
    BIWEEKLY = 'biweekly'
    MONTHLY = 'monthly'

    CHOICES = [
        (WEEKLY, _('Hebdomadaire')),
        (BIWEEKLY, _('Aux deux semaines')),
        (MONTHLY, _('Toutes les quatre semaines')),
    ]

    # "monthly" is a fixed 4-week cadence so the weekday never drifts
    STEP_DAYS = {
        WEEKLY: 7,
        BIWEEKLY: 14,
        MONTHLY: 28,
    }


class DayOfWeek:
    """Days of the week."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    CHOICES = [
        (MONDAY, _('Lundi')),
        (TUESDAY, _('Mardi')),
        (WEDNESDAY, _('Mercredi')),
        (THURSDAY, _('Jeudi')),
        (FRIDAY, _('Vendredi')),
        (SATURDAY, _('Samedi')),
        (SUNDAY, _('Dimanche')),
    ]


class WeekOfMonth:
    """Week-of-month numbers usable in an activity recurrence rule."""
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4

    CHOICES = [
        (FIRST, _('1ère semaine')),
        (SECOND, _('2ème semaine')),
        (THIRD, _('3ème semaine')),
        (FOURTH, _('4ème semaine')),
    ]


class NotificationKind:
    """Notification kinds sent when a registration changes state."""
    INSCRIPTION_CONFIRMED = 'inscription_confirmed'
    INSCRIPTION_PROVISIONAL = 'inscription_provisional'
    INSCRIPTION_REJECTED = 'inscription_rejected'

    CHOICES = [
        (INSCRIPTION_CONFIRMED, _('Inscription confirmée')),
        (INSCRIPTION_PROVISIONAL, _('Inscription provisoire')),
        (INSCRIPTION_REJECTED, _('Inscription refusée')),
    ]
