"""Reports API views."""
from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.exceptions import ValidationError
from apps.core.permissions import IsVolunteer, IsSupervisorOrAdmin, get_own_volunteer, get_profile

from .models import Report
from .serializers import ReportSerializer, ReportSubmitSerializer, MonthlyTotalsSerializer
from .services import ReportService


def int_param(request, name):
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError('%s invalide' % name, **{name: value})


class ReportViewSet(mixins.CreateModelMixin,
                    mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    viewsets.GenericViewSet):
    """Activity reports. Volunteers see and submit their own; staff review."""

    serializer_class = ReportSerializer
    filterset_fields = ['year', 'month', 'is_approved', 'is_public']

    def get_permissions(self):
        if self.action in ['approve', 'visibility', 'totals']:
            return [IsSupervisorOrAdmin()]
        return [IsVolunteer()]

    def get_queryset(self):
        qs = Report.objects.select_related('volunteer__profile', 'approved_by')
        profile = get_profile(self.request.user)
        if self.request.user.is_superuser or (profile and profile.is_staff_role):
            return qs
        return qs.filter(volunteer__profile=profile)

    def create(self, request, *args, **kwargs):
        serializer = ReportSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        volunteer = get_own_volunteer(request)

        report = ReportService().submit(
            volunteer.pk,
            data['year'],
            data['month'],
            hours=data['hours'],
            placements=data['placements'],
            videos=data['videos'],
            bible_studies=data['bible_studies'],
            slot_id=data.get('slot'),
            notes=data['notes'],
        )
        return Response(ReportSerializer(report).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        report = ReportService().approve(pk, get_profile(request.user))
        return Response(ReportSerializer(report).data)

    @action(detail=True, methods=['post'])
    def visibility(self, request, pk=None):
        """Body: {"is_public": true|false}."""
        is_public = request.data.get('is_public')
        if not isinstance(is_public, bool):
            raise ValidationError('is_public doit être un booléen')
        report = ReportService().set_visibility(pk, is_public)
        return Response(ReportSerializer(report).data)

    @action(detail=False, methods=['get'])
    def public(self, request):
        reports = ReportService.public_reports(int_param(request, 'year'), int_param(request, 'month'))
        return Response(ReportSerializer(reports, many=True).data)

    @action(detail=False, methods=['get'])
    def totals(self, request):
        year = int_param(request, 'year')
        month = int_param(request, 'month')
        if not year or not month:
            raise ValidationError('year et month sont requis')
        return Response(MonthlyTotalsSerializer(ReportService.monthly_totals(year, month)).data)
