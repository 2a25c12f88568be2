import logging

from celery import shared_task
from django.contrib.auth import get_user_model
from django.db import OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from apps.authentication.scopes import scope_for_user
from .services import ChannelPreferences, get_channel_overview

logger = logging.getLogger(__name__)


@shared_task
@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=4, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
)
def generate_channel_report(requester_id, client_user_id, from_date=None, to_date=None, preferences=None):
    """Build the cross-channel overview off the request path.

    The requester's scope is derived when the task runs, not when it is queued.
    """
    requester = get_user_model().objects.get(pk=requester_id)
    overview = get_channel_overview(
        scope_for_user(requester),
        client_user_id,
        ChannelPreferences(**(preferences or {})),
        from_date,
        to_date,
    )
    logger.info(
        f"Channel report for client {client_user_id} requested by {requester_id}: "
        f"{overview['summary']['channelsReporting']} channels, "
        f"{len(overview['failedChannels'])} unavailable"
    )
    return overview
