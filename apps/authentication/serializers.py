from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True)
    account_rep = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=User.ROLE_ACCOUNT_REP),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = User
        fields = ('id', 'email', 'username', 'role', 'company_name', 'account_rep', 'password')

    def validate(self, data):
        if data.get('account_rep') and data.get('role', User.ROLE_CLIENT) != User.ROLE_CLIENT:
            raise serializers.ValidationError('Only client users can be assigned an account rep.')
        return data

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()

    def validate(self, data):
        try:
            user = User.objects.get(email=data['email'])
        except User.DoesNotExist:
            raise serializers.ValidationError('Invalid credentials')

        if not user.check_password(data['password']):
            raise serializers.ValidationError('Invalid credentials')
        if not user.is_active:
            raise serializers.ValidationError('User account is disabled')
        data['user'] = user
        return data


class ClientSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'email', 'company_name', 'account_rep')
