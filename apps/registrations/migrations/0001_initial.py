import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('members', '0001_initial'),
        ('scheduling', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Registration',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('registered_at', models.DateTimeField(verbose_name="Date d'inscription")),
                ('status', models.CharField(choices=[('pending', 'En attente'), ('provisional', 'Provisoire'), ('confirmed', 'Confirmée'), ('rejected', 'Refusée')], default='pending', max_length=20, verbose_name='Statut')),
                ('status_changed_at', models.DateTimeField(blank=True, null=True, verbose_name='Changement de statut')),
                ('notes', models.TextField(blank=True, verbose_name='Notes')),
                ('slot', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='registrations', to='scheduling.slot', verbose_name='Créneau')),
                ('volunteer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='registrations', to='members.volunteer', verbose_name='Proclamateur')),
            ],
            options={
                'verbose_name': 'Inscription',
                'verbose_name_plural': 'Inscriptions',
                'ordering': ['registered_at'],
                'indexes': [
                    models.Index(fields=['volunteer', 'status'], name='registration_vol_status_idx'),
                    models.Index(fields=['slot', 'status'], name='registration_slot_status_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(
                        condition=models.Q(('status', 'rejected'), _negated=True),
                        fields=('volunteer', 'slot'),
                        name='unique_open_registration_per_slot',
                    ),
                ],
            },
        ),
    ]
