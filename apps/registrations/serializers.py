"""Registration serializers."""
from rest_framework import serializers

from apps.scheduling.serializers import SlotSerializer

from .models import Registration


class RegistrationSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    volunteer_name = serializers.CharField(source='volunteer.full_name', read_only=True)
    slot_detail = SlotSerializer(source='slot', read_only=True)

    class Meta:
        model = Registration
        fields = [
            'id', 'slot', 'slot_detail', 'volunteer', 'volunteer_name',
            'registered_at', 'status', 'status_display', 'status_changed_at', 'notes',
        ]
        read_only_fields = fields


class RegistrationQueueSerializer(RegistrationSerializer):
    """Pending-queue entry with its computed priority tier."""
    priority = serializers.CharField(read_only=True)

    class Meta(RegistrationSerializer.Meta):
        fields = RegistrationSerializer.Meta.fields + ['priority']
        read_only_fields = fields


class RegistrationCreateSerializer(serializers.Serializer):
    """
    Input of a registration request.

    `volunteer` defaults to the requesting user's own volunteer record;
    only staff may register someone else.
    """
    slot = serializers.UUIDField()
    volunteer = serializers.UUIDField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    force = serializers.BooleanField(required=False, default=False)
