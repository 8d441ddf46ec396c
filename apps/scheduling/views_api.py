"""Scheduling API Views."""
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.permissions import IsVolunteer, IsSupervisorOrAdmin
from apps.core.utils import coerce_int

from .models import ActivityType, Slot
from .serializers import ActivityTypeSerializer, SlotSerializer, SlotGenerateSerializer
from .services_catalog import SlotCatalog
from .services_recurrence import RecurrenceService


class ActivityTypeViewSet(viewsets.ModelViewSet):
    """ViewSet for activity types. Deleting disables the type."""

    queryset = ActivityType.objects.all().select_related('approver')
    serializer_class = ActivityTypeSerializer
    filterset_fields = ['recurrence_enabled', 'auto_create_slots']
    search_fields = ['name', 'description']
    ordering = ['name']

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [IsVolunteer()]
        return [IsSupervisorOrAdmin()]

    def perform_destroy(self, instance):
        instance.deactivate()


class SlotViewSet(viewsets.ModelViewSet):
    """
    ViewSet for slots.

    Query params on list: activity_type, date_from, date_to, year/month,
    include_inactive (staff only).
    """

    serializer_class = SlotSerializer

    def get_permissions(self):
        if self.action in ['list', 'retrieve', 'occupancy']:
            return [IsVolunteer()]
        return [IsSupervisorOrAdmin()]

    def include_inactive(self):
        """Staff may reach deactivated slots with ?include_inactive=true."""
        return (
            self.request.query_params.get('include_inactive') == 'true'
            and IsSupervisorOrAdmin().has_permission(self.request, self)
        )

    def get_queryset(self):
        if self.action != 'list':
            return Slot.all_objects.select_related('activity_type', 'supervisor')

        params = self.request.query_params
        only_active = not self.include_inactive()
        if params.get('year') and params.get('month'):
            return SlotCatalog.month_slots(
                coerce_int(params['year'], 'year'),
                coerce_int(params['month'], 'month'),
                params.get('activity_type'),
            )
        return SlotCatalog.list_slots(
            activity_type_id=params.get('activity_type'),
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
            only_active=only_active,
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        slot = SlotCatalog.create_slot(
            activity_type_id=data['activity_type'].pk,
            date=data['date'],
            start_time=data['start_time'],
            end_time=data['end_time'],
            min_participants=data.get('min_participants', 1),
            max_participants=data.get('max_participants', 3),
            notes=data.get('notes'),
            supervisor=data.get('supervisor'),
        )
        return Response(SlotSerializer(slot).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        include_inactive = self.include_inactive()
        slot = SlotCatalog.get_slot(kwargs['pk'], include_inactive=include_inactive)
        serializer = self.get_serializer(slot, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        patch = dict(serializer.validated_data)
        if 'activity_type' in patch:
            patch['activity_type_id'] = patch.pop('activity_type').pk
        slot = SlotCatalog.update_slot(slot.pk, patch, include_inactive=include_inactive)
        return Response(SlotSerializer(slot).data)

    def destroy(self, request, *args, **kwargs):
        SlotCatalog.deactivate_slot(kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'])
    def deactivate(self, request, pk=None):
        slot = SlotCatalog.deactivate_slot(pk)
        return Response(SlotSerializer(slot).data)

    @action(detail=True, methods=['get'])
    def occupancy(self, request, pk=None):
        """Confirmed/provisional/pending counts and remaining places."""
        slot = SlotCatalog.get_slot(pk, include_inactive=True)
        return Response(SlotCatalog.occupancy(slot))

    @action(detail=False, methods=['post'])
    def generate(self, request):
        """Generate recurring slots from a weekday and frequency."""
        serializer = SlotGenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        slots = RecurrenceService().generate(
            activity_type_id=data['activity_type'],
            weekday=data['weekday'],
            start_time=data['start_time'],
            end_time=data['end_time'],
            frequency=data['frequency'],
            end_date=data['end_date'],
            min_participants=data['min_participants'],
            max_participants=data['max_participants'],
            notes=data.get('notes'),
            start_date=data.get('start_date'),
        )
        return Response(
            {'created': len(slots), 'slots': SlotSerializer(slots, many=True).data},
            status=status.HTTP_201_CREATED,
        )
