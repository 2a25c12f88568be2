from rest_framework import viewsets
from apps.authentication.permissions import IsKirkAdmin
from .models import PaidSocialAccount, PaidSearchAccount
from .serializers import PaidSocialAccountSerializer, PaidSearchAccountSerializer


class PaidSocialAccountViewSet(viewsets.ModelViewSet):
    permission_classes = [IsKirkAdmin]
    serializer_class = PaidSocialAccountSerializer
    queryset = PaidSocialAccount.objects.prefetch_related('users').order_by('pk')


class PaidSearchAccountViewSet(viewsets.ModelViewSet):
    permission_classes = [IsKirkAdmin]
    serializer_class = PaidSearchAccountSerializer
    queryset = PaidSearchAccount.objects.prefetch_related('users').order_by('pk')
