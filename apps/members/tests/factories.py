"""Test factories for members app."""
import factory
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from apps.core.constants import Roles, ProfileStatus
from apps.members.models import Profile, Volunteer

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Creates Django User instances for testing."""

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f'user{n}')
    email = factory.LazyAttribute(lambda obj: f'{obj.username}@example.com')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    password = factory.PostGenerationMethodCall('set_password', 'testpass123')


class ProfileFactory(DjangoModelFactory):
    """Creates Profile instances with a linked User account."""

    class Meta:
        model = Profile

    user = factory.SubFactory(UserFactory)
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.Sequence(lambda n: f'proclamateur{n}@example.com')
    phone = factory.Sequence(lambda n: f'06{n:08d}')
    role = Roles.VOLUNTEER
    status = ProfileStatus.ACTIVE


class SupervisorProfileFactory(ProfileFactory):
    role = Roles.SUPERVISOR


class AdminProfileFactory(ProfileFactory):
    role = Roles.ADMIN


class VolunteerFactory(DjangoModelFactory):
    """Creates Volunteer instances, each with its own Profile."""

    class Meta:
        model = Volunteer

    profile = factory.SubFactory(ProfileFactory)
    is_brother = True
