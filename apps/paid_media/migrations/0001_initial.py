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
            name='PaidSocialAccount',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('platform', models.CharField(choices=[('facebook', 'Facebook'), ('instagram', 'Instagram'), ('linkedin', 'LinkedIn'), ('tiktok', 'TikTok')], default='facebook', max_length=20)),
                ('external_account_id', models.CharField(blank=True, max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('users', models.ManyToManyField(blank=True, related_name='paid_social_accounts', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='PaidSearchAccount',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('customer_id', models.CharField(blank=True, max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('users', models.ManyToManyField(blank=True, related_name='paid_search_accounts', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='PaidSocialDailyStats',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('campaign_id', models.CharField(max_length=100)),
                ('campaign_name', models.CharField(max_length=255)),
                ('date', models.DateField()),
                ('reach', models.BigIntegerField(default=0)),
                ('impressions', models.BigIntegerField(default=0)),
                ('engagement', models.BigIntegerField(default=0)),
                ('link_clicks', models.BigIntegerField(default=0)),
                ('landing_page_views', models.BigIntegerField(default=0)),
                ('spend', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_stats', to='paid_media.paidsocialaccount')),
            ],
            options={
                'indexes': [models.Index(fields=['account', 'date'], name='paid_social_account_date_idx')],
            },
        ),
        migrations.CreateModel(
            name='PaidSearchDailyStats',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('campaign_id', models.CharField(max_length=100)),
                ('campaign_name', models.CharField(max_length=255)),
                ('date', models.DateField()),
                ('impressions', models.BigIntegerField(default=0)),
                ('clicks', models.BigIntegerField(default=0)),
                ('conversions', models.BigIntegerField(default=0)),
                ('phone_calls', models.BigIntegerField(default=0)),
                ('spend', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_stats', to='paid_media.paidsearchaccount')),
            ],
            options={
                'indexes': [models.Index(fields=['account', 'date'], name='paid_search_account_date_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='paidsocialdailystats',
            constraint=models.UniqueConstraint(fields=('account', 'campaign_id', 'date'), name='unique_paid_social_campaign_day'),
        ),
        migrations.AddConstraint(
            model_name='paidsearchdailystats',
            constraint=models.UniqueConstraint(fields=('account', 'campaign_id', 'date'), name='unique_paid_search_campaign_day'),
        ),
    ]
