"""Reports models: monthly activity reports submitted by volunteers."""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel


class Report(BaseModel):
    """
    Monthly activity report (rapport) of a volunteer.

    Optionally tied to a slot the volunteer was confirmed on. Approval and
    public visibility are independent flags; only approved public reports are
    shown to everyone.
    """
    volunteer = models.ForeignKey(
        'members.Volunteer',
        on_delete=models.CASCADE,
        related_name='reports',
        verbose_name=_('Proclamateur'),
    )
    slot = models.ForeignKey(
        'scheduling.Slot',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reports',
        verbose_name=_('Créneau'),
    )
    year = models.PositiveIntegerField(verbose_name=_('Année'))
    month = models.PositiveSmallIntegerField(verbose_name=_('Mois'))
    hours = models.DecimalField(
        max_digits=6, decimal_places=2, default=0, verbose_name=_('Heures de prédication'),
    )
    placements = models.PositiveIntegerField(default=0, verbose_name=_('Placements'))
    videos = models.PositiveIntegerField(default=0, verbose_name=_('Vidéos'))
    bible_studies = models.PositiveIntegerField(default=0, verbose_name=_('Études bibliques'))
    is_approved = models.BooleanField(default=False, verbose_name=_('Approuvé'))
    approved_by = models.ForeignKey(
        'members.Profile',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='approved_reports',
        verbose_name=_('Approuvé par'),
    )
    approved_at = models.DateTimeField(null=True, blank=True, verbose_name=_("Date d'approbation"))
    is_public = models.BooleanField(default=False, verbose_name=_('Visible publiquement'))
    notes = models.TextField(blank=True, verbose_name=_('Notes'))
    submitted_at = models.DateTimeField(verbose_name=_('Soumis le'))

    class Meta:
        verbose_name = _('Rapport')
        verbose_name_plural = _('Rapports')
        ordering = ['-year', '-month', '-submitted_at']
        indexes = [
            models.Index(fields=['year', 'month'], name='report_year_month_idx'),
        ]

    def __str__(self):
        return f'{self.volunteer} - {self.month:02d}/{self.year}'
