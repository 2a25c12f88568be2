from rest_framework import viewsets
from apps.authentication.permissions import IsKirkAdmin
from .models import EmailClient, EmailCampaign
from .serializers import EmailClientSerializer, EmailCampaignSerializer


class EmailClientViewSet(viewsets.ModelViewSet):
    """Admin management of email provider accounts and their client bindings."""
    permission_classes = [IsKirkAdmin]
    serializer_class = EmailClientSerializer
    queryset = EmailClient.objects.prefetch_related('users').order_by('pk')


class EmailCampaignViewSet(viewsets.ModelViewSet):
    permission_classes = [IsKirkAdmin]
    serializer_class = EmailCampaignSerializer
    queryset = EmailCampaign.objects.all()

    def get_queryset(self):
        queryset = EmailCampaign.objects.select_related('email_client').order_by('pk')
        email_client_id = self.request.query_params.get('email_client')
        if email_client_id and email_client_id.isdigit():
            queryset = queryset.filter(email_client_id=email_client_id)
        return queryset
