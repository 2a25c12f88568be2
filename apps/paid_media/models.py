from django.conf import settings
from django.db import models


class PaidSocialAccount(models.Model):
    PLATFORM_CHOICES = [
        ('facebook', 'Facebook'),
        ('instagram', 'Instagram'),
        ('linkedin', 'LinkedIn'),
        ('tiktok', 'TikTok'),
    ]

    name = models.CharField(max_length=255)
    platform = models.CharField(max_length=20, choices=PLATFORM_CHOICES, default='facebook')
    external_account_id = models.CharField(max_length=100, blank=True)
    users = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='paid_social_accounts', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class PaidSocialDailyStats(models.Model):
    account = models.ForeignKey(PaidSocialAccount, on_delete=models.CASCADE, related_name='daily_stats')
    campaign_id = models.CharField(max_length=100)
    campaign_name = models.CharField(max_length=255)
    date = models.DateField()
    reach = models.BigIntegerField(default=0)
    impressions = models.BigIntegerField(default=0)
    engagement = models.BigIntegerField(default=0)
    link_clicks = models.BigIntegerField(default=0)
    landing_page_views = models.BigIntegerField(default=0)
    spend = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['account', 'campaign_id', 'date'], name='unique_paid_social_campaign_day'),
        ]
        indexes = [
            models.Index(fields=['account', 'date'], name='paid_social_account_date_idx'),
        ]


class PaidSearchAccount(models.Model):
    name = models.CharField(max_length=255)
    customer_id = models.CharField(max_length=50, blank=True)
    users = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='paid_search_accounts', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class PaidSearchDailyStats(models.Model):
    account = models.ForeignKey(PaidSearchAccount, on_delete=models.CASCADE, related_name='daily_stats')
    campaign_id = models.CharField(max_length=100)
    campaign_name = models.CharField(max_length=255)
    date = models.DateField()
    impressions = models.BigIntegerField(default=0)
    clicks = models.BigIntegerField(default=0)
    conversions = models.BigIntegerField(default=0)
    phone_calls = models.BigIntegerField(default=0)
    spend = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['account', 'campaign_id', 'date'], name='unique_paid_search_campaign_day'),
        ]
        indexes = [
            models.Index(fields=['account', 'date'], name='paid_search_account_date_idx'),
        ]
