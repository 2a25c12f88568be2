from django.contrib.auth import get_user_model
from rest_framework import serializers
from .models import UspsClient, UspsCampaign, UspsCampaignSummary

User = get_user_model()


class UspsClientSerializer(serializers.ModelSerializer):
    users = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=User.objects.filter(role=User.ROLE_CLIENT),
    )

    class Meta:
        model = UspsClient
        fields = '__all__'


class UspsCampaignSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = UspsCampaignSummary
        fields = '__all__'

    def validate(self, data):
        if data.get('final_scan_count', 0) > data.get('pieces', 0):
            raise serializers.ValidationError('final_scan_count cannot exceed pieces.')
        return data


class UspsCampaignSerializer(serializers.ModelSerializer):
    latest_summary = serializers.SerializerMethodField()

    class Meta:
        model = UspsCampaign
        fields = '__all__'

    def get_latest_summary(self, obj):
        summary = obj.summaries.order_by('-scan_date', '-pk').first()
        return UspsCampaignSummarySerializer(summary).data if summary else None
