"""Reports serializers."""
from rest_framework import serializers

from .models import Report


class ReportSerializer(serializers.ModelSerializer):
    volunteer_name = serializers.CharField(source='volunteer.full_name', read_only=True)
    approved_by_name = serializers.CharField(source='approved_by.full_name', read_only=True, allow_null=True)

    class Meta:
        model = Report
        fields = [
            'id', 'volunteer', 'volunteer_name', 'slot', 'year', 'month',
            'hours', 'placements', 'videos', 'bible_studies',
            'is_approved', 'approved_by', 'approved_by_name', 'approved_at',
            'is_public', 'notes', 'submitted_at',
        ]
        read_only_fields = fields


class ReportSubmitSerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=2000)
    month = serializers.IntegerField(min_value=1, max_value=12)
    hours = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, default=0)
    placements = serializers.IntegerField(min_value=0, default=0)
    videos = serializers.IntegerField(min_value=0, default=0)
    bible_studies = serializers.IntegerField(min_value=0, default=0)
    slot = serializers.UUIDField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class MonthlyTotalsSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    reports = serializers.IntegerField()
    hours = serializers.DecimalField(max_digits=10, decimal_places=2)
    placements = serializers.IntegerField()
    videos = serializers.IntegerField()
    bible_studies = serializers.IntegerField()
