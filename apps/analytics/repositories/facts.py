# apps/analytics/repositories/facts.py
"""Reads channel statistics tables into FactRow lists.

Every method takes an account id the caller has already passed through the
access guard, plus a DateRange; rows are returned in date order.
"""
from django.db.models import Prefetch

from apps.direct_mail.models import UspsCampaign, UspsCampaignSummary
from apps.email_marketing.models import EmailCampaignDailyStats
from apps.paid_media.models import PaidSearchDailyStats, PaidSocialDailyStats
from apps.web_analytics.models import GaChannelDaily

from ..aggregator import FactRow
from .performance import monitor_query_performance


def _iso(day):
    return day.isoformat() if day else None


class FactRowRepository:
    @staticmethod
    @monitor_query_performance
    def email_rows(email_client_id, date_range):
        stats = (
            EmailCampaignDailyStats.objects
            .filter(
                email_campaign__email_client_id=email_client_id,
                date__range=(date_range.start, date_range.end),
            )
            .select_related('email_campaign')
            .order_by('date', 'email_campaign__campaign_id')
        )
        return [
            FactRow(
                date=row.date,
                campaign_id=row.email_campaign.campaign_id,
                campaign_name=row.email_campaign.campaign_name,
                account_id=email_client_id,
                values={
                    'requests': row.requests,
                    'delivered': row.delivered,
                    'opens': row.opens,
                    'uniqueOpens': row.unique_opens,
                    'clicks': row.clicks,
                    'uniqueClicks': row.unique_clicks,
                    'bounces': row.bounces,
                    'unsubscribes': row.unsubscribes,
                },
            )
            for row in stats
        ]

    @staticmethod
    @monitor_query_performance
    def direct_mail_rows(usps_client_id, date_range):
        """One row per mailing sent in the window, taken from its latest scan summary.

        Summaries are cumulative snapshots, so only the newest one counts.
        Mailings with no summary yet contribute zeros.
        """
        campaigns = (
            UspsCampaign.objects
            .filter(usps_client_id=usps_client_id, send_date__range=(date_range.start, date_range.end))
            .prefetch_related(Prefetch(
                'summaries',
                queryset=UspsCampaignSummary.objects.order_by('-scan_date', '-pk'),
            ))
            .order_by('send_date', 'report_id')
        )

        rows = []
        for campaign in campaigns:
            summaries = list(campaign.summaries.all())
            latest = summaries[0] if summaries else None
            rows.append(FactRow(
                date=campaign.send_date,
                campaign_id=campaign.report_id,
                campaign_name=campaign.campaign_name,
                account_id=usps_client_id,
                values={
                    'pieces': latest.pieces if latest else 0,
                    'scanned': latest.total_scanned if latest else 0,
                    'delivered': latest.final_scan_count if latest else 0,
                    'percentOnTime': latest.percent_on_time if latest else 0,
                    'percentDelivered': latest.percent_delivered if latest else 0,
                    'percentScanned': latest.percent_scanned if latest else 0,
                    'percentFinalScan': latest.percent_final_scan if latest else 0,
                },
                attributes={
                    'order': campaign.order,
                    'sector': campaign.sector,
                    'type': campaign.campaign_type,
                    'sendDate': _iso(campaign.send_date),
                    'numberDelivered': latest.number_delivered if latest else 0,
                    'mailDate': _iso(latest.mail_date) if latest else None,
                    'lastScanDate': _iso(latest.scan_date) if latest else None,
                },
            ))
        return rows

    @staticmethod
    @monitor_query_performance
    def paid_social_rows(account_id, date_range):
        stats = (
            PaidSocialDailyStats.objects
            .filter(account_id=account_id, date__range=(date_range.start, date_range.end))
            .order_by('date', 'campaign_id')
        )
        return [
            FactRow(
                date=row.date,
                campaign_id=row.campaign_id,
                campaign_name=row.campaign_name,
                account_id=account_id,
                values={
                    'reach': row.reach,
                    'impressions': row.impressions,
                    'engagement': row.engagement,
                    'linkClicks': row.link_clicks,
                    'landingPageViews': row.landing_page_views,
                    'spend': row.spend,
                },
            )
            for row in stats
        ]

    @staticmethod
    @monitor_query_performance
    def paid_search_rows(account_id, date_range):
        stats = (
            PaidSearchDailyStats.objects
            .filter(account_id=account_id, date__range=(date_range.start, date_range.end))
            .order_by('date', 'campaign_id')
        )
        return [
            FactRow(
                date=row.date,
                campaign_id=row.campaign_id,
                campaign_name=row.campaign_name,
                account_id=account_id,
                values={
                    'impressions': row.impressions,
                    'clicks': row.clicks,
                    'conversions': row.conversions,
                    'phoneCalls': row.phone_calls,
                    'spend': row.spend,
                },
            )
            for row in stats
        ]

    @staticmethod
    @monitor_query_performance
    def web_rows(ga_property_id, date_range):
        stats = (
            GaChannelDaily.objects
            .filter(ga_property_id=ga_property_id, date__range=(date_range.start, date_range.end))
            .order_by('date', 'channel_group')
        )
        return [
            FactRow(
                date=row.date,
                campaign_id=row.channel_group,
                campaign_name=row.channel_group,
                account_id=ga_property_id,
                values={
                    'sessions': row.sessions,
                    'goalCompletions': row.goal_completions,
                    'engagementRate': row.engagement_rate,
                    'avgSessionDurationSec': row.avg_session_duration_sec,
                },
            )
            for row in stats
        ]


CHANNEL_FETCHERS = {
    'email': FactRowRepository.email_rows,
    'direct_mail': FactRowRepository.direct_mail_rows,
    'paid_social': FactRowRepository.paid_social_rows,
    'paid_search': FactRowRepository.paid_search_rows,
    'web': FactRowRepository.web_rows,
}
