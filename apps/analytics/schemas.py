from .aggregator import ChannelSchema, Ratio

EMAIL_SCHEMA = ChannelSchema(
    channel='email',
    counters=('requests', 'delivered', 'opens', 'uniqueOpens', 'clicks', 'uniqueClicks', 'bounces', 'unsubscribes'),
    ratios=(
        Ratio('openRate', 'opens', 'delivered'),
        Ratio('clickThroughRate', 'clicks', 'opens'),
        Ratio('clickRate', 'clicks', 'delivered'),
        Ratio('deliveryRate', 'delivered', 'requests'),
    ),
    primary_metric='opens',
    series_fields=(
        'requests', 'delivered', 'opens', 'uniqueOpens', 'clicks', 'uniqueClicks', 'bounces', 'unsubscribes', 'openRate',
    ),
)

DIRECT_MAIL_SCHEMA = ChannelSchema(
    channel='direct_mail',
    counters=('pieces', 'scanned', 'delivered'),
    ratios=(
        Ratio('scanRate', 'scanned', 'pieces'),
        Ratio('deliveryRate', 'delivered', 'pieces'),
    ),
    averages=('percentOnTime', 'percentDelivered', 'percentScanned', 'percentFinalScan'),
    primary_metric='pieces',
    series_fields=('pieces', 'scanned', 'delivered'),
)

PAID_SOCIAL_SCHEMA = ChannelSchema(
    channel='paid_social',
    counters=('reach', 'impressions', 'engagement', 'linkClicks', 'landingPageViews', 'spend'),
    ratios=(
        Ratio('linkCtr', 'linkClicks', 'impressions'),
        Ratio('costPerLinkClick', 'spend', 'linkClicks', scale=1),
        Ratio('costPerLandingPageView', 'spend', 'landingPageViews', scale=1),
    ),
    monetary=('spend',),
    primary_metric='impressions',
    series_fields=('reach', 'impressions', 'linkClicks', 'spend'),
)

PAID_SEARCH_SCHEMA = ChannelSchema(
    channel='paid_search',
    counters=('impressions', 'clicks', 'conversions', 'phoneCalls', 'spend'),
    ratios=(
        Ratio('ctr', 'clicks', 'impressions'),
        Ratio('conversionRate', 'conversions', 'clicks'),
        Ratio('costPerClick', 'spend', 'clicks', scale=1),
        Ratio('costPerConversion', 'spend', 'conversions', scale=1),
    ),
    monetary=('spend',),
    primary_metric='clicks',
    series_fields=('impressions', 'clicks', 'conversions', 'spend'),
)

WEB_SCHEMA = ChannelSchema(
    channel='web',
    counters=('sessions', 'goalCompletions'),
    ratios=(
        Ratio('goalCompletionRate', 'goalCompletions', 'sessions'),
    ),
    averages=('engagementRate', 'avgSessionDurationSec'),
    primary_metric='sessions',
    series_bucket='month',
    series_fields=('sessions', 'goalCompletions', 'engagementRate'),
)

CHANNEL_SCHEMAS = {
    schema.channel: schema
    for schema in (EMAIL_SCHEMA, DIRECT_MAIL_SCHEMA, PAID_SOCIAL_SCHEMA, PAID_SEARCH_SCHEMA, WEB_SCHEMA)
}
