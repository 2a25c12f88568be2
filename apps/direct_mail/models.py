from django.conf import settings
from django.db import models


class UspsClient(models.Model):
    """A USPS informed-visibility mailer account, shared by one or more client users."""
    client_name = models.CharField(max_length=255)
    users = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='usps_clients', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.client_name


class UspsCampaign(models.Model):
    usps_client = models.ForeignKey(UspsClient, on_delete=models.CASCADE, related_name='campaigns')
    report_id = models.CharField(max_length=100, unique=True)
    campaign_name = models.CharField(max_length=255, db_index=True)
    order = models.CharField(max_length=100, blank=True)
    sector = models.CharField(max_length=100, blank=True)
    campaign_type = models.CharField(max_length=100, blank=True)
    send_date = models.DateField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.campaign_name


class UspsCampaignSummary(models.Model):
    """Cumulative scan snapshot for a mailing; the newest snapshot supersedes older ones."""
    usps_campaign = models.ForeignKey(UspsCampaign, on_delete=models.CASCADE, related_name='summaries')
    scan_date = models.DateField()
    mail_date = models.DateField(null=True, blank=True)
    pieces = models.BigIntegerField(default=0)
    total_scanned = models.BigIntegerField(default=0)
    final_scan_count = models.BigIntegerField(default=0)
    number_delivered = models.BigIntegerField(default=0)
    percent_delivered = models.FloatField(default=0)
    percent_final_scan = models.FloatField(default=0)
    percent_on_time = models.FloatField(default=0)
    percent_scanned = models.FloatField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['usps_campaign', '-scan_date'], name='usps_summary_latest_idx'),
        ]
