from rest_framework import viewsets
from apps.authentication.permissions import IsKirkAdmin
from .models import GaProperty
from .serializers import GaPropertySerializer


class GaPropertyViewSet(viewsets.ModelViewSet):
    permission_classes = [IsKirkAdmin]
    serializer_class = GaPropertySerializer
    queryset = GaProperty.objects.prefetch_related('users').order_by('pk')
