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
            name='Report',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('year', models.PositiveIntegerField(verbose_name='Année')),
                ('month', models.PositiveSmallIntegerField(verbose_name='Mois')),
                ('hours', models.DecimalField(decimal_places=2, default=0, max_digits=6, verbose_name='Heures de prédication')),
                ('placements', models.PositiveIntegerField(default=0, verbose_name='Placements')),
                ('videos', models.PositiveIntegerField(default=0, verbose_name='Vidéos')),
                ('bible_studies', models.PositiveIntegerField(default=0, verbose_name='Études bibliques')),
                ('is_approved', models.BooleanField(default=False, verbose_name='Approuvé')),
                ('approved_at', models.DateTimeField(blank=True, null=True, verbose_name="Date d'approbation")),
                ('is_public', models.BooleanField(default=False, verbose_name='Visible publiquement')),
                ('notes', models.TextField(blank=True, verbose_name='Notes')),
                ('submitted_at', models.DateTimeField(verbose_name='Soumis le')),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='approved_reports', to='members.profile', verbose_name='Approuvé par')),
                ('slot', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reports', to='scheduling.slot', verbose_name='Créneau')),
                ('volunteer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reports', to='members.volunteer', verbose_name='Proclamateur')),
            ],
            options={
                'verbose_name': 'Rapport',
                'verbose_name_plural': 'Rapports',
                'ordering': ['-year', '-month', '-submitted_at'],
                'indexes': [
                    models.Index(fields=['year', 'month'], name='report_year_month_idx'),
                ],
            },
        ),
    ]
