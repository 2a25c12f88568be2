"""Ownership checks for channel accounts.

A channel account (email client, USPS client, paid social/search account,
GA property) is bound to one or more client users. The guard confirms that
the caller's scope permits the client and that the client is bound to the
requested account before any metrics are read.
"""
import logging

from django.apps import apps

from apps.analytics.exceptions import AccountNotAccessibleError
from .models import User

logger = logging.getLogger(__name__)

CHANNEL_ACCOUNT_MODELS = {
    'email': 'email_marketing.EmailClient',
    'direct_mail': 'direct_mail.UspsClient',
    'paid_social': 'paid_media.PaidSocialAccount',
    'paid_search': 'paid_media.PaidSearchAccount',
    'web': 'web_analytics.GaProperty',
}


def account_model(channel):
    try:
        label = CHANNEL_ACCOUNT_MODELS[channel]
    except KeyError:
        raise ValueError(f"Unknown channel {channel!r}")
    return apps.get_model(label)


class AccessGuard:
    @staticmethod
    def client(scope, client_user_id):
        try:
            client = User.objects.get(pk=client_user_id, role=User.ROLE_CLIENT, is_active=True)
        except (User.DoesNotExist, ValueError, TypeError):
            raise AccountNotAccessibleError('client', client_user_id)

        if not scope.permits_client(client):
            logger.info(f"{scope} denied access to client {client_user_id}")
            raise AccountNotAccessibleError('client', client_user_id)
        return client

    @staticmethod
    def check(scope, client_user_id, channel, account_id):
        """Return the bound account or raise AccountNotAccessibleError."""
        client = AccessGuard.client(scope, client_user_id)
        try:
            account = account_model(channel).objects.filter(pk=account_id, users=client).first()
        except (ValueError, TypeError):
            account = None

        if account is None:
            raise AccountNotAccessibleError(channel, account_id)
        return account

    @staticmethod
    def default_account(scope, client_user_id, channel):
        """First account bound to the client for ``channel``, by primary key."""
        client = AccessGuard.client(scope, client_user_id)
        account = account_model(channel).objects.filter(users=client).order_by('pk').first()
        if account is None:
            raise AccountNotAccessibleError(channel)
        return account

    @staticmethod
    def bound_accounts(scope, client_user_id):
        client = AccessGuard.client(scope, client_user_id)
        return {
            channel: list(account_model(channel).objects.filter(users=client).order_by('pk'))
            for channel in CHANNEL_ACCOUNT_MODELS
        }
