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
            name='GaProperty',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('property_id', models.CharField(max_length=50, unique=True)),
                ('display_name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('users', models.ManyToManyField(blank=True, related_name='ga_properties', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='GaChannelDaily',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField()),
                ('channel_group', models.CharField(max_length=64)),
                ('sessions', models.BigIntegerField(default=0)),
                ('goal_completions', models.BigIntegerField(default=0)),
                ('engagement_rate', models.FloatField(default=0)),
                ('avg_session_duration_sec', models.FloatField(default=0)),
                ('ga_property', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='channel_daily', to='web_analytics.gaproperty')),
            ],
            options={
                'indexes': [models.Index(fields=['ga_property', 'date'], name='ga_channel_property_date_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='gachanneldaily',
            constraint=models.UniqueConstraint(fields=('ga_property', 'date', 'channel_group'), name='unique_ga_channel_day'),
        ),
    ]
