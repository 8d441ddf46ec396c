import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('members', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ActivityType',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('name', models.CharField(max_length=200, verbose_name='Nom')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('default_start_time', models.TimeField(blank=True, null=True, verbose_name='Heure de début par défaut')),
                ('default_end_time', models.TimeField(blank=True, null=True, verbose_name='Heure de fin par défaut')),
                ('recurrence_enabled', models.BooleanField(default=False, verbose_name='Récurrence activée')),
                ('recurrence_days', models.JSONField(blank=True, default=list, help_text='Numéros de jour: 0 = lundi ... 6 = dimanche', verbose_name='Jours de récurrence')),
                ('recurrence_weeks', models.JSONField(blank=True, default=list, help_text='Numéros de semaine dans le mois: 1 à 4', verbose_name='Semaines du mois')),
                ('auto_create_slots', models.BooleanField(default=False, verbose_name='Création automatique des créneaux')),
                ('approver', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='approved_activity_types', to='members.profile', verbose_name='Valideur')),
            ],
            options={
                'verbose_name': "Type d'activité",
                'verbose_name_plural': "Types d'activité",
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Slot',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('date', models.DateField(verbose_name='Date')),
                ('start_time', models.TimeField(verbose_name='Heure de début')),
                ('end_time', models.TimeField(verbose_name='Heure de fin')),
                ('min_participants', models.PositiveIntegerField(default=1, verbose_name='Participants minimum')),
                ('max_participants', models.PositiveIntegerField(default=3, verbose_name='Participants maximum')),
                ('notes', models.TextField(blank=True, verbose_name='Notes')),
                ('activity_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='slots', to='scheduling.activitytype', verbose_name="Type d'activité")),
                ('supervisor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='supervised_slots', to='members.profile', verbose_name='Responsable')),
            ],
            options={
                'verbose_name': 'Créneau',
                'verbose_name_plural': 'Créneaux',
                'ordering': ['date', 'start_time'],
                'indexes': [
                    models.Index(fields=['date', 'start_time'], name='slot_date_start_idx'),
                    models.Index(fields=['activity_type', 'date'], name='slot_type_date_idx'),
                ],
            },
        ),
    ]
