from django.contrib.auth import get_user_model
from rest_framework import serializers
from .models import PaidSocialAccount, PaidSearchAccount

User = get_user_model()


class PaidSocialAccountSerializer(serializers.ModelSerializer):
    users = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=User.objects.filter(role=User.ROLE_CLIENT),
    )

    class Meta:
        model = PaidSocialAccount
        fields = '__all__'


class PaidSearchAccountSerializer(serializers.ModelSerializer):
    users = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=User.objects.filter(role=User.ROLE_CLIENT),
    )

    class Meta:
        model = PaidSearchAccount
        fields = '__all__'

    def validate_customer_id(self, value):
        digits = value.replace('-', '')
        if digits and not digits.isdigit():
            raise serializers.ValidationError('Customer ID must contain only digits and dashes.')
        return value
