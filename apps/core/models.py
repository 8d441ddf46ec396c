"""Base models for Planning Présentoirs - UUID primary keys, timestamps, active flag."""
import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class ActiveManager(models.Manager):
    """Returns only active (is_active=True) objects."""

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True)


class AllObjectsManager(models.Manager):
    """Returns all objects including inactive ones - use for admin, audit, recovery."""
    pass


class BaseModel(models.Model):
    """Abstract base with UUID primary key, timestamps, and is_active flag."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name=_('ID')
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name=_('Date de création')
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name=_('Date de modification')
    )

    is_active = models.BooleanField(
        default=True,
        verbose_name=_('Actif'),
        help_text=_('Indique si cet enregistrement est actif')
    )

    objects = ActiveManager()
    all_objects = AllObjectsManager()

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def deactivate(self):
        self.is_active = False
        self.save(update_fields=['is_active', 'updated_at'])

    def activate(self):
        self.is_active = True
        self.save(update_fields=['is_active', 'updated_at'])


class Parameter(BaseModel):
    """
    Runtime key/value setting editable by administrators.

    Overrides the matching Django setting (monthly registration limit,
    priority thresholds) without a redeploy.
    """

    key = models.CharField(
        max_length=100,
        unique=True,
        verbose_name=_('Clé')
    )

    value = models.CharField(
        max_length=255,
        verbose_name=_('Valeur')
    )

    description = models.TextField(
        blank=True,
        verbose_name=_('Description')
    )

    class Meta:
        verbose_name = _('Paramètre')
        verbose_name_plural = _('Paramètres')
        ordering = ['key']

    def __str__(self):
        return f'{self.key} = {self.value}'
