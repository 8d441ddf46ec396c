"""Reports services - submission, approval and aggregation of activity reports."""
import logging
from decimal import Decimal, InvalidOperation

from django.db.models import Count, Sum
from django.utils import timezone

from apps.core.constants import RegistrationStatus, RuleViolation
from apps.core.exceptions import (
    ForbiddenError, NotFoundError, RuleViolationError, ValidationError,
)

from .models import Report

logger = logging.getLogger(__name__)


class ReportService:
    """Service for volunteer activity reports."""

    COUNTERS = ('placements', 'videos', 'bible_studies')

    def __init__(self, clock=None):
        self.clock = clock or timezone.now

    def submit(self, volunteer_id, year, month, hours=0, placements=0, videos=0,
               bible_studies=0, slot_id=None, notes=''):
        """
        Record a monthly report for a volunteer.

        When `slot_id` is given the volunteer must hold a confirmed
        registration on that slot.
        """
        from apps.members.models import Volunteer
        from apps.registrations.models import Registration

        try:
            year, month = int(year), int(month)
        except (TypeError, ValueError):
            raise ValidationError('Année ou mois invalide', year=year, month=month)
        if not 1 <= month <= 12:
            raise ValidationError('Mois invalide: %s' % month, month=month)

        try:
            hours = Decimal(str(hours))
        except InvalidOperation:
            raise ValidationError('Heures invalides', hours=hours)
        counters = {'placements': placements, 'videos': videos, 'bible_studies': bible_studies}
        try:
            counters = {name: int(value) for name, value in counters.items()}
        except (TypeError, ValueError):
            raise ValidationError('Compteurs invalides', **counters)
        if hours < 0 or any(value < 0 for value in counters.values()):
            raise ValidationError('Les compteurs doivent être positifs ou nuls')

        if not Volunteer.objects.filter(pk=volunteer_id).exists():
            raise NotFoundError('Proclamateur introuvable', volunteer_id=str(volunteer_id))

        if slot_id:
            confirmed = Registration.objects.filter(
                volunteer_id=volunteer_id,
                slot_id=slot_id,
                status=RegistrationStatus.CONFIRMED,
            ).exists()
            if not confirmed:
                raise RuleViolationError(
                    [RuleViolation.REPORT_SLOT_NOT_CONFIRMED],
                    volunteer_id=str(volunteer_id), slot_id=str(slot_id),
                )

        report = Report.objects.create(
            volunteer_id=volunteer_id,
            slot_id=slot_id or None,
            year=year,
            month=month,
            hours=hours,
            notes=notes or '',
            submitted_at=self.clock(),
            **counters,
        )
        logger.info('Report %s submitted by volunteer %s for %s-%02d', report.pk, volunteer_id, year, month)
        return report

    @staticmethod
    def get_report(report_id):
        try:
            return Report.objects.get(pk=report_id)
        except (Report.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Rapport introuvable', report_id=str(report_id))

    def approve(self, report_id, approver):
        """Approve a report; only admins and supervisors may."""
        if approver is None or not approver.is_staff_role:
            raise ForbiddenError('Seul un responsable peut approuver un rapport', report_id=str(report_id))

        report = self.get_report(report_id)
        report.is_approved = True
        report.approved_by = approver
        report.approved_at = self.clock()
        report.save(update_fields=['is_approved', 'approved_by', 'approved_at', 'updated_at'])
        logger.info('Report %s approved by %s', report.pk, approver.pk)
        return report

    def set_visibility(self, report_id, is_public):
        report = self.get_report(report_id)
        report.is_public = bool(is_public)
        report.save(update_fields=['is_public', 'updated_at'])
        return report

    @staticmethod
    def public_reports(year=None, month=None):
        """Approved and public reports, newest month first."""
        qs = Report.objects.filter(is_approved=True, is_public=True)
        if year:
            qs = qs.filter(year=year)
        if month:
            qs = qs.filter(month=month)
        return qs.select_related('volunteer__profile').order_by('-year', '-month', '-submitted_at')

    @staticmethod
    def monthly_totals(year, month):
        """Sum of counters over the approved reports of a month."""
        totals = Report.objects.filter(
            year=year, month=month, is_approved=True,
        ).aggregate(
            reports=Count('id'),
            hours=Sum('hours'),
            placements=Sum('placements'),
            videos=Sum('videos'),
            bible_studies=Sum('bible_studies'),
        )
        return {
            'year': int(year),
            'month': int(month),
            'reports': totals['reports'],
            'hours': totals['hours'] or Decimal('0'),
            'placements': totals['placements'] or 0,
            'videos': totals['videos'] or 0,
            'bible_studies': totals['bible_studies'] or 0,
        }
