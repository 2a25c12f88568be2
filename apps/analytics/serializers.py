from rest_framework import serializers


class DateWindowSerializer(serializers.Serializer):
    # Dates stay strings here; resolve_date_range owns their validation.
    fromDate = serializers.CharField(required=False, allow_blank=True)
    toDate = serializers.CharField(required=False, allow_blank=True)


class ClientQuerySerializer(DateWindowSerializer):
    clientUserId = serializers.IntegerField(min_value=1, required=False)


class ChannelMetricsQuerySerializer(ClientQuerySerializer):
    accountId = serializers.IntegerField(min_value=1)


class OverviewQuerySerializer(ClientQuerySerializer):
    emailClientId = serializers.IntegerField(min_value=1, required=False)
    uspsClientId = serializers.IntegerField(min_value=1, required=False)
    paidSocialAccountId = serializers.IntegerField(min_value=1, required=False)
    paidSearchAccountId = serializers.IntegerField(min_value=1, required=False)


class CampaignAggregationQuerySerializer(ClientQuerySerializer):
    emailClientId = serializers.IntegerField(min_value=1)
    uspsClientId = serializers.IntegerField(min_value=1)


class ReportRequestSerializer(OverviewQuerySerializer):
    pass
