"""Registrations API Views."""
from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.exceptions import ForbiddenError
from apps.core.permissions import IsVolunteer, IsSupervisorOrAdmin, get_own_volunteer, get_profile
from apps.core.utils import coerce_int

from .models import Registration
from .serializers import (
    RegistrationSerializer, RegistrationQueueSerializer, RegistrationCreateSerializer,
)
from .services_approval import ApprovalService
from .services_eligibility import EligibilityService
from .services_ledger import RegistrationLedger


class RegistrationViewSet(mixins.CreateModelMixin,
                          mixins.ListModelMixin,
                          mixins.RetrieveModelMixin,
                          mixins.DestroyModelMixin,
                          viewsets.GenericViewSet):
    """
    Registrations. Volunteers see their own; staff see all.

    Status changes go through the approve/provisional/reject actions.
    """

    serializer_class = RegistrationSerializer
    filterset_fields = ['status', 'slot']

    def get_permissions(self):
        if self.action == 'pending_queue':
            return [IsSupervisorOrAdmin()]
        return [IsVolunteer()]

    def get_queryset(self):
        qs = Registration.objects.select_related('slot__activity_type', 'volunteer__profile')
        profile = get_profile(self.request.user)
        if self.request.user.is_superuser or (profile and profile.is_staff_role):
            return qs
        return qs.filter(volunteer__profile=profile)

    def create(self, request, *args, **kwargs):
        serializer = RegistrationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        profile = get_profile(request.user)
        volunteer_id = data.get('volunteer')
        if volunteer_id is None:
            volunteer_id = get_own_volunteer(request).pk
        elif not (profile and profile.is_staff_role):
            own = get_own_volunteer(request)
            if own.pk != volunteer_id:
                raise ForbiddenError("Vous ne pouvez inscrire que vous-même")

        registration = RegistrationLedger().register(
            volunteer_id,
            data['slot'],
            notes=data.get('notes'),
            force=data['force'],
            actor=profile,
        )
        return Response(RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        volunteer = get_own_volunteer(request)
        RegistrationLedger().withdraw(kwargs['pk'], volunteer.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _transition(self, request, pk, method):
        profile = get_profile(request.user)
        if profile is None:
            raise ForbiddenError('Profil requis pour valider une inscription')
        registration = getattr(ApprovalService(), method)(pk, actor=profile)
        return Response(RegistrationSerializer(registration).data)

    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        return self._transition(request, pk, 'approve')

    @action(detail=True, methods=['post'])
    def provisional(self, request, pk=None):
        return self._transition(request, pk, 'mark_provisional')

    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        return self._transition(request, pk, 'reject')

    @action(detail=False, methods=['get'], url_path='pending-queue')
    def pending_queue(self, request):
        """Registrations awaiting review, most urgent first."""
        queue = EligibilityService().pending_queue(request.query_params.get('activity_type'))
        return Response(RegistrationQueueSerializer(queue, many=True).data)

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """The requesting volunteer's planning, optionally for ?year=&month=."""
        volunteer = get_own_volunteer(request)
        year = request.query_params.get('year')
        month = request.query_params.get('month')
        registrations = RegistrationLedger.registrations_for_volunteer(
            volunteer.pk,
            coerce_int(year, 'year') if year else None,
            coerce_int(month, 'month') if month else None,
        )
        return Response(RegistrationSerializer(registrations, many=True).data)
