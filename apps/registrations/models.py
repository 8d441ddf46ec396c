"""
Registrations models - a volunteer's claim on a slot.

Models:
- Registration: One volunteer on one slot, carrying an approval status
"""
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import RegistrationStatus


class Registration(BaseModel):
    """
    Inscription of a volunteer on a slot.

    Status moves pending -> provisional/confirmed/rejected through
    ApprovalService. Rejected rows are kept; at most one active, non-rejected row
    exists per (volunteer, slot).
    """

    slot = models.ForeignKey(
        'scheduling.Slot',
        on_delete=models.PROTECT,
        related_name='registrations',
        verbose_name=_('Créneau')
    )

    volunteer = models.ForeignKey(
        'members.Volunteer',
        on_delete=models.CASCADE,
        related_name='registrations',
        verbose_name=_('Proclamateur')
    )

    registered_at = models.DateTimeField(
        verbose_name=_("Date d'inscription")
    )

    status = models.CharField(
        max_length=20,
        choices=RegistrationStatus.choices,
        default=RegistrationStatus.PENDING,
        verbose_name=_('Statut')
    )

    status_changed_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name=_('Changement de statut')
    )

    notes = models.TextField(
        blank=True,
        verbose_name=_('Notes')
    )

    class Meta:
        verbose_name = _('Inscription')
        verbose_name_plural = _('Inscriptions')
        ordering = ['registered_at']
        constraints = [
            models.UniqueConstraint(
                fields=['volunteer', 'slot'],
                condition=Q(is_active=True) & ~Q(status=RegistrationStatus.REJECTED),
                name='unique_open_registration_per_slot',
            ),
        ]
        indexes = [
            models.Index(fields=['volunteer', 'status'], name='registration_vol_status_idx'),
            models.Index(fields=['slot', 'status'], name='registration_slot_status_idx'),
        ]

    def __str__(self):
        return f'{self.volunteer} - {self.slot} ({self.get_status_display()})'
