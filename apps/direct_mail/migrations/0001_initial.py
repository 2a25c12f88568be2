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
            name='UspsClient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('client_name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('users', models.ManyToManyField(blank=True, related_name='usps_clients', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='UspsCampaign',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('report_id', models.CharField(max_length=100, unique=True)),
                ('campaign_name', models.CharField(db_index=True, max_length=255)),
                ('order', models.CharField(blank=True, max_length=100)),
                ('sector', models.CharField(blank=True, max_length=100)),
                ('campaign_type', models.CharField(blank=True, max_length=100)),
                ('send_date', models.DateField(db_index=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('usps_client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='campaigns', to='direct_mail.uspsclient')),
            ],
        ),
        migrations.CreateModel(
            name='UspsCampaignSummary',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('scan_date', models.DateField()),
                ('mail_date', models.DateField(blank=True, null=True)),
                ('pieces', models.BigIntegerField(default=0)),
                ('total_scanned', models.BigIntegerField(default=0)),
                ('final_scan_count', models.BigIntegerField(default=0)),
                ('number_delivered', models.BigIntegerField(default=0)),
                ('percent_delivered', models.FloatField(default=0)),
                ('percent_final_scan', models.FloatField(default=0)),
                ('percent_on_time', models.FloatField(default=0)),
                ('percent_scanned', models.FloatField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('usps_campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='summaries', to='direct_mail.uspscampaign')),
            ],
            options={
                'indexes': [models.Index(fields=['usps_campaign', '-scan_date'], name='usps_summary_latest_idx')],
            },
        ),
    ]
