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
            name='EmailClient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('client_name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('users', models.ManyToManyField(blank=True, related_name='email_clients', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='EmailCampaign',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('campaign_id', models.CharField(max_length=100, unique=True)),
                ('campaign_name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('email_client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='campaigns', to='email_marketing.emailclient')),
            ],
        ),
        migrations.CreateModel(
            name='EmailCampaignDailyStats',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField()),
                ('requests', models.BigIntegerField(default=0)),
                ('delivered', models.BigIntegerField(default=0)),
                ('opens', models.BigIntegerField(default=0)),
                ('unique_opens', models.BigIntegerField(default=0)),
                ('clicks', models.BigIntegerField(default=0)),
                ('unique_clicks', models.BigIntegerField(default=0)),
                ('bounces', models.BigIntegerField(default=0)),
                ('unsubscribes', models.BigIntegerField(default=0)),
                ('email_campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_stats', to='email_marketing.emailcampaign')),
                ('email_client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_stats', to='email_marketing.emailclient')),
            ],
            options={
                'indexes': [models.Index(fields=['email_client', 'date'], name='email_stats_client_date_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='emailcampaigndailystats',
            constraint=models.UniqueConstraint(fields=('email_campaign', 'date'), name='unique_email_campaign_day'),
        ),
    ]
