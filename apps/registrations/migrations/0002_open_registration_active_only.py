from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('registrations', '0001_initial'),
    ]

    operations = [
        migrations.RemoveConstraint(
            model_name='registration',
            name='unique_open_registration_per_slot',
        ),
        migrations.AddConstraint(
            model_name='registration',
            constraint=models.UniqueConstraint(
                condition=models.Q(('is_active', True), models.Q(('status', 'rejected'), _negated=True)),
                fields=('volunteer', 'slot'),
                name='unique_open_registration_per_slot',
            ),
        ),
    ]
