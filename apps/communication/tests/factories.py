"""Test factories for communication app."""
import factory
from factory.django import DjangoModelFactory
from apps.communication.models import Notification
from apps.members.tests.factories import ProfileFactory
from apps.core.constants import NotificationKind


class NotificationFactory(DjangoModelFactory):
    """Creates test notifications for profiles."""

    class Meta:
        model = Notification

    profile = factory.SubFactory(ProfileFactory)
    title = factory.Sequence(lambda n: f'Notification {n}')
    message = factory.Faker('paragraph')
    kind = NotificationKind.INSCRIPTION_CONFIRMED
