"""
Scheduling models - activity types and the bookable slots generated from them.

Models:
- ActivityType: Kind of activity (présentoir, témoignage public...) with an optional recurrence rule
- Slot: Time window for one activity type on one date, with participant bounds
"""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel


# ──────────────────────────────────────────────────────────────────────────────
# ActivityType
# ──────────────────────────────────────────────────────────────────────────────

class ActivityType(BaseModel):
    """
    Kind of activity volunteers register for.

    The recurrence rule is a set of weekdays (Monday=0) combined with a set of
    week-of-month numbers (1-4). Types are disabled through `is_active`,
    never deleted.
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_('Nom')
    )

    description = models.TextField(
        blank=True,
        verbose_name=_('Description')
    )

    default_start_time = models.TimeField(
        null=True,
        blank=True,
        verbose_name=_('Heure de début par défaut')
    )

    default_end_time = models.TimeField(
        null=True,
        blank=True,
        verbose_name=_('Heure de fin par défaut')
    )

    recurrence_enabled = models.BooleanField(
        default=False,
        verbose_name=_('Récurrence activée')
    )

    recurrence_days = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_('Jours de récurrence'),
        help_text=_('Numéros de jour: 0 = lundi ... 6 = dimanche')
    )

    recurrence_weeks = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_('Semaines du mois'),
        help_text=_('Numéros de semaine dans le mois: 1 à 4')
    )

    auto_create_slots = models.BooleanField(
        default=False,
        verbose_name=_('Création automatique des créneaux')
    )

    approver = models.ForeignKey(
        'members.Profile',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='approved_activity_types',
        verbose_name=_('Valideur')
    )

    class Meta:
        verbose_name = _("Type d'activité")
        verbose_name_plural = _("Types d'activité")
        ordering = ['name']

    def __str__(self):
        return self.name


# ──────────────────────────────────────────────────────────────────────────────
# Slot
# ──────────────────────────────────────────────────────────────────────────────

class Slot(BaseModel):
    """
    Bookable time window (créneau).

    `max_participants` is the capacity ceiling: once that many registrations
    are confirmed, new sign-ups become provisional replacements.
    """

    activity_type = models.ForeignKey(
        ActivityType,
        on_delete=models.PROTECT,
        related_name='slots',
        verbose_name=_("Type d'activité")
    )

    date = models.DateField(
        verbose_name=_('Date')
    )

    start_time = models.TimeField(
        verbose_name=_('Heure de début')
    )

    end_time = models.TimeField(
        verbose_name=_('Heure de fin')
    )

    min_participants = models.PositiveIntegerField(
        default=1,
        verbose_name=_('Participants minimum')
    )

    max_participants = models.PositiveIntegerField(
        default=3,
        verbose_name=_('Participants maximum')
    )

    notes = models.TextField(
        blank=True,
        verbose_name=_('Notes')
    )

    supervisor = models.ForeignKey(
        'members.Profile',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='supervised_slots',
        verbose_name=_('Responsable')
    )

    class Meta:
        verbose_name = _('Créneau')
        verbose_name_plural = _('Créneaux')
        ordering = ['date', 'start_time']
        indexes = [
            models.Index(fields=['date', 'start_time'], name='slot_date_start_idx'),
            models.Index(fields=['activity_type', 'date'], name='slot_type_date_idx'),
        ]

    def __str__(self):
        return f'{self.activity_type} - {self.date} {self.start_time:%H:%M}-{self.end_time:%H:%M}'
