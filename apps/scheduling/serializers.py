"""Scheduling serializers - activity types, slots, and recurrence requests."""
from rest_framework import serializers

from apps.core.constants import DayOfWeek, RecurrenceFrequency, WeekOfMonth

from .models import ActivityType, Slot


# ──────────────────────────────────────────────────────────────────────────────
# ActivityType
# ──────────────────────────────────────────────────────────────────────────────

class ActivityTypeSerializer(serializers.ModelSerializer):
    approver_name = serializers.CharField(source='approver.full_name', read_only=True, allow_null=True)

    class Meta:
        model = ActivityType
        fields = [
            'id', 'name', 'description', 'default_start_time', 'default_end_time',
            'recurrence_enabled', 'recurrence_days', 'recurrence_weeks',
            'auto_create_slots', 'approver', 'approver_name', 'is_active',
        ]
        read_only_fields = ['is_active']

    def validate_recurrence_days(self, value):
        allowed = {day for day, _label in DayOfWeek.CHOICES}
        if any(day not in allowed for day in value):
            raise serializers.ValidationError('Jours attendus entre 0 (lundi) et 6 (dimanche).')
        return sorted(set(value))

    def validate_recurrence_weeks(self, value):
        allowed = {week for week, _label in WeekOfMonth.CHOICES}
        if any(week not in allowed for week in value):
            raise serializers.ValidationError('Semaines attendues entre 1 et 4.')
        return sorted(set(value))


# ──────────────────────────────────────────────────────────────────────────────
# Slot
# ──────────────────────────────────────────────────────────────────────────────

class SlotSerializer(serializers.ModelSerializer):
    """Slot representation; writes go through SlotCatalog."""
    activity_type_name = serializers.CharField(source='activity_type.name', read_only=True)
    supervisor_name = serializers.CharField(source='supervisor.full_name', read_only=True, allow_null=True)

    class Meta:
        model = Slot
        fields = [
            'id', 'activity_type', 'activity_type_name', 'date',
            'start_time', 'end_time', 'min_participants', 'max_participants',
            'notes', 'supervisor', 'supervisor_name', 'is_active',
        ]
        read_only_fields = ['is_active']


class SlotGenerateSerializer(serializers.Serializer):
    """Input of the recurring generation action."""
    activity_type = serializers.UUIDField()
    weekday = serializers.ChoiceField(choices=DayOfWeek.CHOICES)
    frequency = serializers.ChoiceField(choices=RecurrenceFrequency.CHOICES)
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField()
    min_participants = serializers.IntegerField(min_value=1)
    max_participants = serializers.IntegerField(min_value=1)
    notes = serializers.CharField(required=False, allow_blank=True)
