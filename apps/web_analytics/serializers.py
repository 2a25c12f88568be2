from django.contrib.auth import get_user_model
from rest_framework import serializers
from .models import GaProperty

User = get_user_model()


class GaPropertySerializer(serializers.ModelSerializer):
    users = serializers.PrimaryKeyRelatedField(
        many=True,
        required=False,
        queryset=User.objects.filter(role=User.ROLE_CLIENT),
    )

    class Meta:
        model = GaProperty
        fields = '__all__'

    def validate_property_id(self, value):
        value = value.removeprefix('properties/')
        if not value.isdigit():
            raise serializers.ValidationError('GA4 property IDs are numeric.')
        return value
