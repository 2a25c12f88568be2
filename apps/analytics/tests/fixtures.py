from datetime import date
from decimal import Decimal

from apps.authentication.models import User
from apps.direct_mail.models import UspsCampaign, UspsCampaignSummary, UspsClient
from apps.email_marketing.models import EmailCampaign, EmailCampaignDailyStats, EmailClient
from apps.paid_media.models import PaidSearchAccount, PaidSearchDailyStats, PaidSocialAccount, PaidSocialDailyStats


def make_user(email, role=User.ROLE_CLIENT, **extra):
    return User.objects.create_user(
        username=email.split('@')[0],
        email=email,
        password='testpass123',
        role=role,
        **extra
    )


def make_email_client(*users, name='Acme ESP'):
    email_client = EmailClient.objects.create(client_name=name)
    email_client.users.add(*users)
    return email_client


def add_email_stats(email_client, campaign_id, day, campaign_name=None, **values):
    campaign, _ = EmailCampaign.objects.get_or_create(
        campaign_id=campaign_id,
        defaults={'email_client': email_client, 'campaign_name': campaign_name or campaign_id},
    )
    return EmailCampaignDailyStats.objects.create(
        email_client=email_client,
        email_campaign=campaign,
        date=day,
        **values
    )


def make_usps_client(*users, name='Acme Mailer'):
    usps_client = UspsClient.objects.create(client_name=name)
    usps_client.users.add(*users)
    return usps_client


def add_mailing(usps_client, report_id, campaign_name, send_date, summaries=()):
    campaign = UspsCampaign.objects.create(
        usps_client=usps_client,
        report_id=report_id,
        campaign_name=campaign_name,
        send_date=send_date,
    )
    for summary in summaries:
        UspsCampaignSummary.objects.create(usps_campaign=campaign, **summary)
    return campaign


def make_paid_social(*users, name='Acme Meta'):
    account = PaidSocialAccount.objects.create(name=name)
    account.users.add(*users)
    return account


def add_paid_social_stats(account, campaign_id, day, spend='0', **values):
    return PaidSocialDailyStats.objects.create(
        account=account,
        campaign_id=campaign_id,
        campaign_name=campaign_id,
        date=day,
        spend=Decimal(spend),
        **values
    )


def make_paid_search(*users, name='Acme Google Ads'):
    account = PaidSearchAccount.objects.create(name=name)
    account.users.add(*users)
    return account


def add_paid_search_stats(account, campaign_id, day, spend='0', **values):
    return PaidSearchDailyStats.objects.create(
        account=account,
        campaign_id=campaign_id,
        campaign_name=campaign_id,
        date=day,
        spend=Decimal(spend),
        **values
    )


APRIL_15 = date(2025, 4, 15)
APRIL_17 = date(2025, 4, 17)
