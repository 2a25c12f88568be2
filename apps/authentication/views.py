import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from .permissions import HasKirkRole, IsKirkAdmin
from .scopes import scope_for_user
from .serializers import ClientSummarySerializer, LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsKirkAdmin])
def register(request):
    """Admins create admin, account rep and client users."""
    serializer = UserSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    logger.info(f"User {user.email} created with role {user.role} by {request.user.email}")
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.validated_data['user']
    refresh = RefreshToken.for_user(user)
    return Response({
        'refresh': str(refresh),
        'access': str(refresh.access_token),
        'user': UserSerializer(user).data,
    })


@api_view(['GET'])
@permission_classes([HasKirkRole])
def me(request):
    return Response(UserSerializer(request.user).data)


@api_view(['GET'])
@permission_classes([HasKirkRole])
def clients(request):
    """Client users visible under the caller's scope."""
    queryset = scope_for_user(request.user).clients().order_by('pk')
    return Response({
        'clients': ClientSummarySerializer(queryset, many=True).data,
        'total_clients': queryset.count(),
    })
