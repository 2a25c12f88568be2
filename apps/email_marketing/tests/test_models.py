from datetime import date

from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.email_marketing.models import EmailCampaign, EmailCampaignDailyStats, EmailClient


class EmailCampaignDailyStatsTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.email_client = EmailClient.objects.create(client_name='Acme ESP')
        cls.other = EmailClient.objects.create(client_name='Other ESP')
        cls.campaign = EmailCampaign.objects.create(
            email_client=cls.email_client, campaign_id='em-1', campaign_name='Spring Sale',
        )

    def test_client_must_match_campaign_client(self):
        stats = EmailCampaignDailyStats(email_client=self.other, email_campaign=self.campaign, date=date(2025, 4, 15))

        with self.assertRaises(ValidationError) as raised:
            stats.full_clean()
        self.assertIn('email_client', raised.exception.message_dict)

    def test_matching_client_is_valid(self):
        stats = EmailCampaignDailyStats(email_client=self.email_client, email_campaign=self.campaign, date=date(2025, 4, 15))
        stats.full_clean()
