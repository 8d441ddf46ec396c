"""
Members models - user profiles and volunteers (proclamateurs).

Models:
- Profile: Person known to the application, linked to a Django User, with a role
- Volunteer: Proclamateur record attached to a Profile, holding role flags
"""
from django.contrib.auth import get_user_model
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import Roles, ProfileStatus

User = get_user_model()


# =============================================================================
# PROFILE MODEL
# =============================================================================

class Profile(BaseModel):
    """
    Person known to the application.

    The role decides who may review registrations (admin, supervisor) and who
    may force a registration past the monthly limit (admin only).
    """

    user = models.OneToOneField(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='profile',
        verbose_name=_('Compte utilisateur')
    )

    first_name = models.CharField(
        max_length=100,
        verbose_name=_('Prénom')
    )

    last_name = models.CharField(
        max_length=100,
        verbose_name=_('Nom')
    )

    email = models.EmailField(
        blank=True,
        verbose_name=_('Courriel')
    )

    phone = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_('Téléphone')
    )

    role = models.CharField(
        max_length=20,
        choices=Roles.CHOICES,
        default=Roles.VOLUNTEER,
        verbose_name=_('Rôle')
    )

    status = models.CharField(
        max_length=20,
        choices=ProfileStatus.CHOICES,
        default=ProfileStatus.ACTIVE,
        verbose_name=_('Statut')
    )

    class Meta:
        verbose_name = _('Profil')
        verbose_name_plural = _('Profils')
        ordering = ['last_name', 'first_name']

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def is_admin(self):
        return self.role == Roles.ADMIN

    @property
    def is_staff_role(self):
        """Admins and supervisors review registrations and reports."""
        return self.role in Roles.STAFF_ROLES


# =============================================================================
# VOLUNTEER MODEL
# =============================================================================

class Volunteer(BaseModel):
    """Proclamateur: the person who registers on slots and submits reports."""

    profile = models.OneToOneField(
        Profile,
        on_delete=models.CASCADE,
        related_name='volunteer',
        verbose_name=_('Profil')
    )

    is_elder = models.BooleanField(
        default=False,
        verbose_name=_('Ancien')
    )

    is_ministerial_servant = models.BooleanField(
        default=False,
        verbose_name=_('Assistant ministériel')
    )

    is_pioneer = models.BooleanField(
        default=False,
        verbose_name=_('Pionnier')
    )

    is_brother = models.BooleanField(
        default=False,
        verbose_name=_('Frère')
    )

    notes = models.TextField(
        blank=True,
        verbose_name=_('Notes')
    )

    class Meta:
        verbose_name = _('Proclamateur')
        verbose_name_plural = _('Proclamateurs')
        ordering = ['profile__last_name', 'profile__first_name']

    def __str__(self):
        return str(self.profile)

    @property
    def full_name(self):
        return self.profile.full_name
