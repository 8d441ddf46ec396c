"""Communication API Views."""
from django.utils import timezone
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.core.permissions import IsVolunteer, get_profile

from .models import Notification
from .serializers import NotificationSerializer


class NotificationViewSet(mixins.ListModelMixin,
                          mixins.RetrieveModelMixin,
                          viewsets.GenericViewSet):
    """The requesting profile's notifications, newest first."""
    serializer_class = NotificationSerializer
    permission_classes = [IsVolunteer]
    filterset_fields = ['is_read', 'kind']

    def get_queryset(self):
        profile = get_profile(self.request.user)
        if profile is not None:
            return Notification.objects.filter(profile=profile)
        return Notification.objects.none()

    @action(detail=False, methods=['post'], url_path='read')
    def mark_read(self, request):
        """Mark specific notifications (ids) or all as read."""
        ids = request.data.get('ids', [])
        qs = self.get_queryset().filter(is_read=False)
        if ids:
            qs = qs.filter(id__in=ids)
        updated = qs.update(is_read=True, read_at=timezone.now())
        return Response({'message': 'Marquées comme lues', 'updated': updated})

    @action(detail=False, methods=['get'])
    def unread_count(self, request):
        """Return count of unread notifications."""
        return Response({'count': self.get_queryset().filter(is_read=False).count()})
