import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from apps.analytics.date_range import shift_years
from apps.direct_mail.models import UspsCampaign, UspsCampaignSummary, UspsClient
from apps.email_marketing.models import EmailCampaign, EmailCampaignDailyStats, EmailClient
from apps.paid_media.models import (
    PaidSearchAccount,
    PaidSearchDailyStats,
    PaidSocialAccount,
    PaidSocialDailyStats,
)
from apps.web_analytics.models import GaChannelDaily, GaProperty

User = get_user_model()

CHANNEL_GROUPS = ['Organic Search', 'Paid Search', 'Paid Social', 'Direct', 'Email', 'Referral']


class Command(BaseCommand):
    help = 'Load randomized channel statistics for a client, covering this year and last year'

    def add_arguments(self, parser):
        parser.add_argument('--client', type=str, required=True, help='Email of the client user')
        parser.add_argument('--campaigns', type=int, default=8, help='Campaigns per channel')
        parser.add_argument('--days_back', type=int, default=90, help='Days of history per year')
        parser.add_argument('--seed', type=int, default=None)

    def handle(self, *args, **options):
        try:
            client = User.objects.get(email=options['client'], role=User.ROLE_CLIENT)
        except User.DoesNotExist:
            raise CommandError(f"No client user with email {options['client']}")

        rng = random.Random(options['seed'])
        today = timezone.localdate()
        days = [today - timedelta(days=offset) for offset in range(options['days_back'])]
        # Same calendar window last year so year-over-year has data to compare
        days += [shift_years(day, -1) for day in days]

        with transaction.atomic():
            names = [f'{client.company_name or client.username} Campaign {i + 1}' for i in range(options['campaigns'])]
            created = {
                'email': self.load_email(client, names, days, rng),
                'direct_mail': self.load_direct_mail(client, names, days, rng),
                'paid_social': self.load_paid_social(client, names, days, rng),
                'paid_search': self.load_paid_search(client, names, days, rng),
                'web': self.load_web(client, days, rng),
            }

        for channel, count in created.items():
            self.stdout.write(f'{channel}: {count:,} rows')
        self.stdout.write(self.style.SUCCESS(f'Loaded demo metrics for {client.email}'))

    def bound_account(self, model, client, **defaults):
        account = model.objects.filter(users=client).order_by('pk').first()
        if account is None:
            account = model.objects.create(**defaults)
            account.users.add(client)
            self.stdout.write(f'Created {model.__name__} {account}')
        return account

    def load_email(self, client, names, days, rng):
        email_client = self.bound_account(EmailClient, client, client_name=f'{client.email} ESP')
        stats = []
        for index, name in enumerate(names):
            campaign, _ = EmailCampaign.objects.get_or_create(
                campaign_id=f'em-{email_client.pk}-{index + 1}',
                defaults={'email_client': email_client, 'campaign_name': name},
            )
            for day in rng.sample(days, k=min(len(days), 6)):
                requests = rng.randint(2000, 10000)
                delivered = int(requests * rng.uniform(0.92, 0.99))
                opens = int(delivered * rng.uniform(0.2, 0.45))
                clicks = int(opens * rng.uniform(0.05, 0.2))
                stats.append(EmailCampaignDailyStats(
                    email_client=email_client,
                    email_campaign=campaign,
                    date=day,
                    requests=requests,
                    delivered=delivered,
                    opens=opens,
                    unique_opens=int(opens * 0.8),
                    clicks=clicks,
                    unique_clicks=int(clicks * 0.85),
                    bounces=requests - delivered,
                    unsubscribes=rng.randint(0, 25),
                ))
        EmailCampaignDailyStats.objects.bulk_create(stats, ignore_conflicts=True)
        return len(stats)

    def load_direct_mail(self, client, names, days, rng):
        usps_client = self.bound_account(UspsClient, client, client_name=f'{client.email} Mailer')
        summaries = []
        for index, name in enumerate(names):
            send_date = rng.choice(days)
            campaign, _ = UspsCampaign.objects.get_or_create(
                report_id=f'usps-{usps_client.pk}-{index + 1}',
                defaults={
                    'usps_client': usps_client,
                    'campaign_name': name,
                    'send_date': send_date,
                    'order': f'ORD-{rng.randint(1000, 9999)}',
                    'sector': rng.choice(['Retail', 'Healthcare', 'Finance']),
                    'campaign_type': rng.choice(['Postcard', 'Letter', 'Flat']),
                },
            )
            pieces = rng.randint(5000, 50000)
            for scan in range(3):
                delivered = int(pieces * (0.3 + 0.3 * scan) * rng.uniform(0.9, 1.0))
                scanned = min(pieces, int(delivered * 1.05))
                summaries.append(UspsCampaignSummary(
                    usps_campaign=campaign,
                    scan_date=campaign.send_date + timedelta(days=2 + scan * 2),
                    mail_date=campaign.send_date + timedelta(days=1),
                    pieces=pieces,
                    total_scanned=scanned,
                    final_scan_count=delivered,
                    number_delivered=delivered,
                    percent_delivered=round(delivered / pieces * 100, 2),
                    percent_scanned=round(scanned / pieces * 100, 2),
                    percent_final_scan=round(delivered / pieces * 100, 2),
                    percent_on_time=round(rng.uniform(80, 99), 2),
                ))
        UspsCampaignSummary.objects.bulk_create(summaries)
        return len(summaries)

    def load_paid_social(self, client, names, days, rng):
        account = self.bound_account(PaidSocialAccount, client, name=f'{client.email} Meta Ads')
        stats = []
        for index, name in enumerate(names):
            for day in days:
                impressions = rng.randint(1000, 20000)
                link_clicks = int(impressions * rng.uniform(0.005, 0.03))
                stats.append(PaidSocialDailyStats(
                    account=account,
                    campaign_id=f'ps-{index + 1}',
                    campaign_name=name,
                    date=day,
                    reach=int(impressions * rng.uniform(0.6, 0.9)),
                    impressions=impressions,
                    engagement=int(impressions * rng.uniform(0.01, 0.05)),
                    link_clicks=link_clicks,
                    landing_page_views=int(link_clicks * rng.uniform(0.5, 0.9)),
                    spend=Decimal(str(round(impressions * rng.uniform(0.004, 0.012), 2))),
                ))
        PaidSocialDailyStats.objects.bulk_create(stats, batch_size=5000, ignore_conflicts=True)
        return len(stats)

    def load_paid_search(self, client, names, days, rng):
        account = self.bound_account(PaidSearchAccount, client, name=f'{client.email} Google Ads')
        stats = []
        for index, name in enumerate(names):
            for day in days:
                impressions = rng.randint(500, 8000)
                clicks = int(impressions * rng.uniform(0.02, 0.08))
                stats.append(PaidSearchDailyStats(
                    account=account,
                    campaign_id=f'gs-{index + 1}',
                    campaign_name=name,
                    date=day,
                    impressions=impressions,
                    clicks=clicks,
                    conversions=int(clicks * rng.uniform(0.02, 0.1)),
                    phone_calls=rng.randint(0, 5),
                    spend=Decimal(str(round(clicks * rng.uniform(0.8, 3.5), 2))),
                ))
        PaidSearchDailyStats.objects.bulk_create(stats, batch_size=5000, ignore_conflicts=True)
        return len(stats)

    def load_web(self, client, days, rng):
        ga_property = self.bound_account(
            GaProperty, client,
            property_id=str(rng.randint(100000000, 999999999)),
            display_name=f'{client.email} Website',
        )
        rows = []
        for day in days:
            for group in CHANNEL_GROUPS:
                sessions = rng.randint(20, 2000)
                rows.append(GaChannelDaily(
                    ga_property=ga_property,
                    date=day,
                    channel_group=group,
                    sessions=sessions,
                    goal_completions=int(sessions * rng.uniform(0.01, 0.06)),
                    engagement_rate=round(rng.uniform(40, 75), 2),
                    avg_session_duration_sec=round(rng.uniform(30, 240), 1),
                ))
        GaChannelDaily.objects.bulk_create(rows, batch_size=5000, ignore_conflicts=True)
        return len(rows)
