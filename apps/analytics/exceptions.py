class AnalyticsError(Exception):
    """Base class for errors raised by the aggregation layer."""
    code = 'ANALYTICS_ERROR'


class InvalidRangeError(AnalyticsError):
    """A date range that is malformed, inverted or only half supplied."""
    code = 'INVALID_RANGE'


class AccountNotAccessibleError(AnalyticsError):
    """The caller may not read the requested client or channel account.

    Raised both when the account does not exist and when it exists but is
    outside the caller's scope, so the two are indistinguishable to callers.
    """
    code = 'ACCOUNT_NOT_ACCESSIBLE'

    def __init__(self, channel, account_id=None):
        self.channel = channel
        self.account_id = account_id
        super().__init__(f"{channel} account {account_id} is not accessible" if account_id is not None
                         else f"No accessible {channel} account")
