"""Channel metrics, the cross-channel overview and the campaign join.

These functions are the entry points used by the views and the Celery report
task. Each one resolves the date range, runs the caller's scope through the
access guard and only then reads fact rows.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional

from asgiref.sync import async_to_sync, sync_to_async
from django.conf import settings

from apps.authentication.access import AccessGuard

from .aggregator import aggregate_totals, build_time_series, count_campaigns, rank_campaigns, safe_ratio
from .comparison import compare_periods
from .date_range import resolve_date_range
from .merger import OVERVIEW_CHANNELS, MultiChannelMerger
from .repositories import CHANNEL_FETCHERS, FactRowRepository
from .schemas import CHANNEL_SCHEMAS, DIRECT_MAIL_SCHEMA, EMAIL_SCHEMA

logger = logging.getLogger(__name__)


class ChannelMetricsService:
    def __init__(self, channel):
        self.channel = channel
        self.schema = CHANNEL_SCHEMAS[channel]

    def fetch_rows(self, account_id, date_range):
        return CHANNEL_FETCHERS[self.channel](account_id, date_range)

    def get_metrics(self, scope, client_user_id, account_id, from_date=None, to_date=None):
        account = AccessGuard.check(scope, client_user_id, self.channel, account_id)
        date_range = resolve_date_range(from_date, to_date)
        return self.build(account, date_range)

    def build(self, account, date_range):
        """Current window, prior-year window and their comparison for one account."""
        current_rows = self.fetch_rows(account.pk, date_range)
        prior_rows = self.fetch_rows(account.pk, date_range.previous_year())

        current = aggregate_totals(current_rows, self.schema)
        previous_year = aggregate_totals(prior_rows, self.schema)

        logger.debug(
            f"{self.channel} account {account.pk}: {len(current_rows)} rows in "
            f"{date_range.start}..{date_range.end}, {len(prior_rows)} rows prior year"
        )

        return {
            'channel': self.channel,
            'account': {'id': account.pk, 'name': str(account)},
            'selectedRange': date_range.as_dict(),
            'metrics': {
                'current': current,
                'previousYear': previous_year,
                'yearOverYear': compare_periods(current, previous_year),
            },
            'timeSeriesData': build_time_series(current_rows, self.schema),
            'topCampaigns': rank_campaigns(current_rows, self.schema, limit=top_campaigns_limit()),
            'totalCampaigns': count_campaigns(current_rows),
        }


def top_campaigns_limit():
    return getattr(settings, 'KIRK_TOP_CAMPAIGNS_LIMIT', 50)


def get_channel_service(channel):
    if channel not in CHANNEL_SCHEMAS:
        raise ValueError(f"Unknown channel {channel!r}")
    return ChannelMetricsService(channel)


@dataclass(frozen=True)
class ChannelPreferences:
    """Preferred account per channel; ``None`` means the client's first bound account."""
    email: Optional[int] = None
    direct_mail: Optional[int] = None
    paid_social: Optional[int] = None
    paid_search: Optional[int] = None

    def for_channel(self, channel):
        return getattr(self, channel)


def load_channel(scope, client_user_id, channel, account_id, date_range):
    if account_id is None:
        account = AccessGuard.default_account(scope, client_user_id, channel)
    else:
        account = AccessGuard.check(scope, client_user_id, channel, account_id)
    return get_channel_service(channel).build(account, date_range)


def get_channel_overview(scope, client_user_id, preferences=None, from_date=None, to_date=None):
    """Email, direct mail, paid social and paid search for one client in one response.

    The client itself must be visible to the scope; a channel whose account is
    missing or fails to load comes back as ``None``.
    """
    preferences = preferences or ChannelPreferences()
    date_range = resolve_date_range(from_date, to_date)
    client = AccessGuard.client(scope, client_user_id)

    branches = {
        channel: partial(
            sync_to_async(load_channel),
            scope, client.pk, channel, preferences.for_channel(channel), date_range,
        )
        for channel in OVERVIEW_CHANNELS
    }
    overview = async_to_sync(MultiChannelMerger().merge)(branches)
    overview['clientUserId'] = client.pk
    overview['selectedRange'] = date_range.as_dict()
    return overview


def campaign_key(name):
    return ' '.join(name.split()).lower()


def _empty_campaign_row(name):
    return {
        'campaignName': name,
        'emailsSent': 0,
        'emailUniqueClicks': 0,
        'emailClickThroughRate': 0.0,
        'uspsPiecesSent': 0,
        'uspsPiecesDelivered': 0,
        'uspsPiecesUndelivered': 0,
        'uspsSentDate': None,
        'uspsReceivedByPostOfficeDate': None,
        'uspsDeliveredToHomesDate': None,
    }


def merge_campaigns(email_campaigns, mail_campaigns):
    """Join ranked email and direct-mail campaigns on campaign name.

    Names match case-insensitively with whitespace collapsed. Email campaigns
    keep their ranking order, followed by direct-mail-only campaigns.
    """
    merged = {}
    for campaign in email_campaigns:
        row = merged.setdefault(campaign_key(campaign['campaignName']), _empty_campaign_row(campaign['campaignName']))
        row['emailsSent'] += campaign['delivered']
        row['emailUniqueClicks'] += campaign['uniqueClicks']
        row['emailClickThroughRate'] = safe_ratio(row['emailUniqueClicks'], row['emailsSent'])

    for campaign in mail_campaigns:
        row = merged.setdefault(campaign_key(campaign['campaignName']), _empty_campaign_row(campaign['campaignName']))
        row['uspsPiecesSent'] += campaign['pieces']
        row['uspsPiecesDelivered'] += campaign['delivered']
        row['uspsPiecesUndelivered'] = max(row['uspsPiecesSent'] - row['uspsPiecesDelivered'], 0)
        row['uspsSentDate'] = row['uspsSentDate'] or campaign['sendDate']
        row['uspsReceivedByPostOfficeDate'] = row['uspsReceivedByPostOfficeDate'] or campaign['mailDate']
        row['uspsDeliveredToHomesDate'] = max(
            filter(None, [row['uspsDeliveredToHomesDate'], campaign['lastScanDate']]),
            default=None,
        )

    return list(merged.values())


def get_campaign_aggregation(scope, client_user_id, email_client_id, usps_client_id, from_date=None, to_date=None):
    email_client = AccessGuard.check(scope, client_user_id, 'email', email_client_id)
    usps_client = AccessGuard.check(scope, client_user_id, 'direct_mail', usps_client_id)
    date_range = resolve_date_range(from_date, to_date)

    email_campaigns = rank_campaigns(FactRowRepository.email_rows(email_client.pk, date_range), EMAIL_SCHEMA)
    mail_campaigns = rank_campaigns(FactRowRepository.direct_mail_rows(usps_client.pk, date_range), DIRECT_MAIL_SCHEMA)
    campaigns = merge_campaigns(email_campaigns, mail_campaigns)

    return {
        'selectedRange': date_range.as_dict(),
        'emailClient': {'id': email_client.pk, 'name': str(email_client)},
        'uspsClient': {'id': usps_client.pk, 'name': str(usps_client)},
        'campaigns': campaigns,
        'totalCampaigns': len(campaigns),
    }


def get_bound_accounts(scope, client_user_id):
    accounts = AccessGuard.bound_accounts(scope, client_user_id)
    return {
        channel: [{'id': account.pk, 'name': str(account)} for account in channel_accounts]
        for channel, channel_accounts in accounts.items()
    }
