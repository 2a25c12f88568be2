from django.contrib.auth import get_user_model
from rest_framework import serializers
from .models import EmailClient, EmailCampaign

User = get_user_model()


class EmailClientSerializer(serializers.ModelSerializer):
    users = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=User.objects.filter(role=User.ROLE_CLIENT),
    )
    campaign_count = serializers.IntegerField(source='campaigns.count', read_only=True)

    class Meta:
        model = EmailClient
        fields = '__all__'


class EmailCampaignSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmailCampaign
        fields = '__all__'

    def validate_campaign_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Campaign name cannot be blank.')
        return value.strip()
