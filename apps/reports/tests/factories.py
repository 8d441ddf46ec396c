"""Test factories for reports app."""
from decimal import Decimal

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory

from apps.members.tests.factories import VolunteerFactory
from apps.reports.models import Report


class ReportFactory(DjangoModelFactory):
    """Creates an unapproved, private monthly report."""

    class Meta:
        model = Report

    volunteer = factory.SubFactory(VolunteerFactory)
    year = 2024
    month = 3
    hours = Decimal('4.50')
    placements = 3
    videos = 1
    bible_studies = 0
    submitted_at = factory.LazyFunction(timezone.now)
