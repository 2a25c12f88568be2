"""Concurrent per-channel fan-out for the client overview."""
import asyncio
import logging
from dataclasses import asdict, dataclass
from typing import Awaitable, Callable, Mapping

from .exceptions import AnalyticsError

logger = logging.getLogger(__name__)

OVERVIEW_CHANNELS = ('email', 'direct_mail', 'paid_social', 'paid_search')


@dataclass(frozen=True)
class PartialChannelFailure:
    """A channel that could not be loaded; the overview reports it as null."""
    channel: str
    code: str
    reason: str

    @classmethod
    def from_exception(cls, channel, error):
        return cls(channel=channel, code=getattr(error, 'code', 'CHANNEL_FAILED'), reason=str(error))

    def as_dict(self):
        return asdict(self)


class MultiChannelMerger:
    def __init__(self, channels=OVERVIEW_CHANNELS):
        self.channels = tuple(channels)

    async def merge(self, branches: Mapping[str, Callable[[], Awaitable[dict]]]) -> dict:
        """Run every branch, wait for all of them, and assemble one response.

        A failing branch leaves its channel as ``None``. If no branch succeeds
        and at least one failed with something other than an analytics error,
        that error is raised instead of returning an empty overview.
        """
        requested = [channel for channel in self.channels if channel in branches]
        outcomes = await asyncio.gather(
            *(branches[channel]() for channel in requested),
            return_exceptions=True,
        )

        channels = {channel: None for channel in self.channels}
        failures = []
        unexpected = []
        for channel, outcome in zip(requested, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                failure = PartialChannelFailure.from_exception(channel, outcome)
                logger.warning(f"Channel {channel} unavailable: {failure.code} {failure.reason}")
                failures.append(failure)
                if not isinstance(outcome, AnalyticsError):
                    unexpected.append(outcome)
                continue
            channels[channel] = outcome

        if requested and len(failures) == len(requested) and unexpected:
            raise unexpected[0]

        return {
            'channels': channels,
            'summary': self.summarize(channels),
            'failedChannels': [failure.as_dict() for failure in failures],
        }

    @staticmethod
    def summarize(channels: Mapping[str, dict]) -> dict:
        loaded = {channel: payload for channel, payload in channels.items() if payload is not None}
        spend_by_channel = {
            channel: payload['metrics']['current']['spend']
            for channel, payload in loaded.items()
            if 'spend' in payload['metrics']['current']
        }
        return {
            'channelsReporting': len(loaded),
            'totalCampaigns': sum(payload['totalCampaigns'] for payload in loaded.values()),
            'totalSpend': round(sum(spend_by_channel.values()), 2),
            'spendByChannel': spend_by_channel,
        }
