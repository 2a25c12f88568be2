from rest_framework import viewsets
from apps.authentication.permissions import IsKirkAdmin
from .models import UspsClient, UspsCampaign
from .serializers import UspsClientSerializer, UspsCampaignSerializer


class UspsClientViewSet(viewsets.ModelViewSet):
    """Admin management of USPS mailer accounts and their client bindings."""
    permission_classes = [IsKirkAdmin]
    serializer_class = UspsClientSerializer
    queryset = UspsClient.objects.prefetch_related('users').order_by('pk')


class UspsCampaignViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [IsKirkAdmin]
    serializer_class = UspsCampaignSerializer
    queryset = UspsCampaign.objects.all()

    def get_queryset(self):
        queryset = UspsCampaign.objects.select_related('usps_client').order_by('-send_date', 'pk')
        usps_client_id = self.request.query_params.get('usps_client')
        if usps_client_id and usps_client_id.isdigit():
            queryset = queryset.filter(usps_client_id=usps_client_id)
        return queryset
