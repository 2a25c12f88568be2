import logging
from dataclasses import asdict
from functools import wraps

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.access import AccessGuard
from apps.authentication.permissions import HasKirkRole
from apps.authentication.scopes import scope_for_user
from .date_range import resolve_date_range
from .exceptions import AccountNotAccessibleError, InvalidRangeError
from .serializers import (
    CampaignAggregationQuerySerializer,
    ChannelMetricsQuerySerializer,
    ClientQuerySerializer,
    OverviewQuerySerializer,
    ReportRequestSerializer,
)
from .services import (
    ChannelPreferences,
    get_bound_accounts,
    get_campaign_aggregation,
    get_channel_overview,
    get_channel_service,
)
from .tasks import generate_channel_report

logger = logging.getLogger(__name__)


def error_response(message, code, status_code, **extra):
    return Response({'error': message, 'code': code, **extra}, status=status_code)


def analytics_errors(view):
    """Translate aggregation-layer errors into 400/404 responses."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except InvalidRangeError as e:
            return error_response(str(e), e.code, status.HTTP_400_BAD_REQUEST)
        except AccountNotAccessibleError as e:
            logger.info(f"User {request.user.pk} denied: {e}")
            return error_response('Account not found', e.code, status.HTTP_404_NOT_FOUND)
    return wrapper


def validated_query(serializer_class, data):
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        return None, error_response(
            'Invalid query parameters', 'INVALID_QUERY', status.HTTP_400_BAD_REQUEST,
            details=serializer.errors,
        )
    return serializer.validated_data, None


def client_user_id_for(request, params):
    """Clients default to themselves; admins and reps must name the client."""
    if 'clientUserId' in params:
        return params['clientUserId']
    if request.user.is_client:
        return request.user.pk
    return None


def missing_client_response():
    return error_response(
        'clientUserId is required', 'INVALID_QUERY', status.HTTP_400_BAD_REQUEST,
    )


def preferences_from(params):
    return ChannelPreferences(
        email=params.get('emailClientId'),
        direct_mail=params.get('uspsClientId'),
        paid_social=params.get('paidSocialAccountId'),
        paid_search=params.get('paidSearchAccountId'),
    )


@api_view(['GET'])
@permission_classes([HasKirkRole])
@analytics_errors
def channel_metrics(request, channel):
    """Current, prior-year and year-over-year metrics for one channel account."""
    params, error = validated_query(ChannelMetricsQuerySerializer, request.query_params)
    if error:
        return error
    client_user_id = client_user_id_for(request, params)
    if client_user_id is None:
        return missing_client_response()

    data = get_channel_service(channel).get_metrics(
        scope_for_user(request.user),
        client_user_id,
        params['accountId'],
        params.get('fromDate'),
        params.get('toDate'),
    )
    return Response(data)


@api_view(['GET'])
@permission_classes([HasKirkRole])
@analytics_errors
def channel_overview(request):
    params, error = validated_query(OverviewQuerySerializer, request.query_params)
    if error:
        return error
    client_user_id = client_user_id_for(request, params)
    if client_user_id is None:
        return missing_client_response()

    data = get_channel_overview(
        scope_for_user(request.user),
        client_user_id,
        preferences_from(params),
        params.get('fromDate'),
        params.get('toDate'),
    )
    return Response(data)


@api_view(['GET'])
@permission_classes([HasKirkRole])
@analytics_errors
def campaign_aggregation(request):
    """Email and direct-mail results joined by campaign name."""
    params, error = validated_query(CampaignAggregationQuerySerializer, request.query_params)
    if error:
        return error
    client_user_id = client_user_id_for(request, params)
    if client_user_id is None:
        return missing_client_response()

    data = get_campaign_aggregation(
        scope_for_user(request.user),
        client_user_id,
        params['emailClientId'],
        params['uspsClientId'],
        params.get('fromDate'),
        params.get('toDate'),
    )
    return Response(data)


@api_view(['GET'])
@permission_classes([HasKirkRole])
@analytics_errors
def bound_accounts(request):
    params, error = validated_query(ClientQuerySerializer, request.query_params)
    if error:
        return error
    client_user_id = client_user_id_for(request, params)
    if client_user_id is None:
        return missing_client_response()

    return Response({
        'clientUserId': client_user_id,
        'accounts': get_bound_accounts(scope_for_user(request.user), client_user_id),
    })


@api_view(['POST'])
@permission_classes([HasKirkRole])
@analytics_errors
def queue_channel_report(request):
    """Queue the overview as a background report after checking access up front."""
    params, error = validated_query(ReportRequestSerializer, request.data)
    if error:
        return error
    client_user_id = client_user_id_for(request, params)
    if client_user_id is None:
        return missing_client_response()

    scope = scope_for_user(request.user)
    resolve_date_range(params.get('fromDate'), params.get('toDate'))
    AccessGuard.client(scope, client_user_id)

    preferences = preferences_from(params)
    task = generate_channel_report.delay(
        request.user.pk,
        client_user_id,
        params.get('fromDate'),
        params.get('toDate'),
        asdict(preferences),
    )
    logger.info(f"Queued channel report {task.id} for client {client_user_id}")
    return Response({'task_id': task.id, 'status': 'queued'}, status=status.HTTP_202_ACCEPTED)
