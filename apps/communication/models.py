"""Communication models: in-app notifications."""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import NotificationKind


class Notification(BaseModel):
    """In-app notification for a profile; optionally mirrored by e-mail."""
    profile = models.ForeignKey('members.Profile', on_delete=models.CASCADE, related_name='notifications')
    title = models.CharField(max_length=200, verbose_name=_('Titre'))
    message = models.TextField(verbose_name=_('Message'))
    kind = models.CharField(max_length=50, choices=NotificationKind.CHOICES, verbose_name=_('Type'))
    metadata = models.JSONField(default=dict, blank=True, verbose_name=_('Métadonnées'))
    is_read = models.BooleanField(default=False, verbose_name=_('Lu'))
    read_at = models.DateTimeField(null=True, blank=True)
    email_sent_at = models.DateTimeField(null=True, blank=True, verbose_name=_('Courriel envoyé le'))

    class Meta:
        verbose_name = _('Notification')
        verbose_name_plural = _('Notifications')
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.profile} - {self.title}'
