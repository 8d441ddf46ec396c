"""Celery configuration for background tasks (auto-confirmation, slot generation, e-mails)."""
import os

from celery import Celery

# Production must set DJANGO_SETTINGS_MODULE to 'config.settings.production'
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

app = Celery('planning_presentoirs')

# String config avoids serializing configuration object to child processes
app.config_from_object('django.conf:settings', namespace='CELERY')

app.autodiscover_tasks()
