import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('first_name', models.CharField(max_length=100, verbose_name='Prénom')),
                ('last_name', models.CharField(max_length=100, verbose_name='Nom')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Courriel')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='Téléphone')),
                ('role', models.CharField(choices=[('admin', 'Administrateur'), ('supervisor', 'Responsable'), ('volunteer', 'Proclamateur')], default='volunteer', max_length=20, verbose_name='Rôle')),
                ('status', models.CharField(choices=[('active', 'Actif'), ('inactive', 'Inactif'), ('temporary', 'Temporaire')], default='active', max_length=20, verbose_name='Statut')),
                ('user', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='profile', to=settings.AUTH_USER_MODEL, verbose_name='Compte utilisateur')),
            ],
            options={
                'verbose_name': 'Profil',
                'verbose_name_plural': 'Profils',
                'ordering': ['last_name', 'first_name'],
            },
        ),
        migrations.CreateModel(
            name='Volunteer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Date de création')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Date de modification')),
                ('is_active', models.BooleanField(default=True, help_text='Indique si cet enregistrement est actif', verbose_name='Actif')),
                ('is_elder', models.BooleanField(default=False, verbose_name='Ancien')),
                ('is_ministerial_servant', models.BooleanField(default=False, verbose_name='Assistant ministériel')),
                ('is_pioneer', models.BooleanField(default=False, verbose_name='Pionnier')),
                ('is_brother', models.BooleanField(default=False, verbose_name='Frère')),
                ('notes', models.TextField(blank=True, verbose_name='Notes')),
                ('profile', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='volunteer', to='members.profile', verbose_name='Profil')),
            ],
            options={
                'verbose_name': 'Proclamateur',
                'verbose_name_plural': 'Proclamateurs',
                'ordering': ['profile__last_name', 'profile__first_name'],
            },
        ),
    ]
