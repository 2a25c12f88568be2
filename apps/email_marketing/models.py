from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class EmailClient(models.Model):
    """An email service provider account, shared by one or more client users."""
    client_name = models.CharField(max_length=255)
    users = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='email_clients', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.client_name


class EmailCampaign(models.Model):
    email_client = models.ForeignKey(EmailClient, on_delete=models.CASCADE, related_name='campaigns')
    campaign_id = models.CharField(max_length=100, unique=True)
    campaign_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.campaign_name


class EmailCampaignDailyStats(models.Model):
    email_client = models.ForeignKey(EmailClient, on_delete=models.CASCADE, related_name='daily_stats')
    email_campaign = models.ForeignKey(EmailCampaign, on_delete=models.CASCADE, related_name='daily_stats')
    date = models.DateField()
    requests = models.BigIntegerField(default=0)
    delivered = models.BigIntegerField(default=0)
    opens = models.BigIntegerField(default=0)
    unique_opens = models.BigIntegerField(default=0)
    clicks = models.BigIntegerField(default=0)
    unique_clicks = models.BigIntegerField(default=0)
    bounces = models.BigIntegerField(default=0)
    unsubscribes = models.BigIntegerField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['email_campaign', 'date'], name='unique_email_campaign_day'),
        ]
        indexes = [
            models.Index(fields=['email_client', 'date'], name='email_stats_client_date_idx'),
        ]

    def clean(self):
        if self.email_campaign_id and self.email_client_id != self.email_campaign.email_client_id:
            raise ValidationError({'email_client': 'Must match the email client of the campaign.'})
