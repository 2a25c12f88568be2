from django.conf import settings
from django.db import models


class GaProperty(models.Model):
    """A Google Analytics 4 property, shared by one or more client users."""
    property_id = models.CharField(max_length=50, unique=True)
    display_name = models.CharField(max_length=255)
    users = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='ga_properties', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.display_name


class GaChannelDaily(models.Model):
    """Daily sessions for one default channel group (Organic Search, Paid Social, ...)."""
    ga_property = models.ForeignKey(GaProperty, on_delete=models.CASCADE, related_name='channel_daily')
    date = models.DateField()
    channel_group = models.CharField(max_length=64)
    sessions = models.BigIntegerField(default=0)
    goal_completions = models.BigIntegerField(default=0)
    engagement_rate = models.FloatField(default=0)
    avg_session_duration_sec = models.FloatField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['ga_property', 'date', 'channel_group'], name='unique_ga_channel_day'),
        ]
        indexes = [
            models.Index(fields=['ga_property', 'date'], name='ga_channel_property_date_idx'),
        ]
