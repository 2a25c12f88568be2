"""Pure aggregation over channel fact rows.

Nothing here touches the database or checks access; callers hand in rows
that were already fetched for an access-scoped account.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional


@dataclass(frozen=True)
class FactRow:
    """One day of activity for one campaign of one account."""
    date: date
    campaign_id: str
    campaign_name: str
    account_id: Any
    values: Mapping[str, Any]
    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Ratio:
    name: str
    numerator: str
    denominator: str
    scale: int = 100


@dataclass(frozen=True)
class ChannelSchema:
    channel: str
    counters: tuple
    primary_metric: str
    ratios: tuple = ()
    averages: tuple = ()
    monetary: tuple = ()
    series_bucket: str = 'day'
    series_fields: Optional[tuple] = None

    @property
    def metric_names(self):
        return self.counters + self.averages + tuple(ratio.name for ratio in self.ratios)


def safe_ratio(numerator, denominator, scale=100) -> float:
    """``numerator / denominator * scale`` rounded to 2 places, 0 on a zero denominator."""
    if not denominator:
        return 0.0
    return round(float(numerator) / float(denominator) * scale, 2)


def _number(value):
    if isinstance(value, Decimal):
        return round(float(value), 2)
    return value


def aggregate_totals(rows: Iterable[FactRow], schema: ChannelSchema) -> dict:
    """Sum counters, average the averaged fields and derive ratios.

    Zero rows produce a zero-valued result.
    """
    rows = list(rows)
    sums = {name: 0 for name in schema.counters}
    for row in rows:
        for name in schema.counters:
            sums[name] += row.values.get(name) or 0

    totals = {}
    for name in schema.counters:
        value = sums[name]
        totals[name] = round(float(value), 2) if name in schema.monetary else _number(value)

    for name in schema.averages:
        observed = [float(row.values.get(name) or 0) for row in rows]
        totals[name] = round(sum(observed) / len(observed), 2) if observed else 0.0

    for ratio in schema.ratios:
        totals[ratio.name] = safe_ratio(sums[ratio.numerator], sums[ratio.denominator], ratio.scale)

    return totals


def rank_campaigns(rows: Iterable[FactRow], schema: ChannelSchema, limit: Optional[int] = None) -> list:
    """Per-campaign totals ordered by the primary metric, highest first.

    Ties are broken by campaign id ascending so the order never depends on
    the order rows arrived in. ``limit=None`` returns every campaign.
    """
    grouped = {}
    for row in rows:
        grouped.setdefault(row.campaign_id, []).append(row)

    ranked = []
    for campaign_id, campaign_rows in grouped.items():
        latest = max(campaign_rows, key=lambda row: row.date)
        entry = {
            'campaignId': campaign_id,
            'campaignName': latest.campaign_name,
        }
        entry.update(latest.attributes)
        entry.update(aggregate_totals(campaign_rows, schema))
        ranked.append(entry)

    ranked.sort(key=lambda entry: (-entry[schema.primary_metric], entry['campaignId']))
    if limit is not None:
        return ranked[:limit]
    return ranked


def bucket_key(day: date, bucket: str) -> str:
    if bucket == 'month':
        return day.strftime('%Y-%m')
    return day.isoformat()


def build_time_series(rows: Iterable[FactRow], schema: ChannelSchema) -> list:
    """One point per day (or month) that has rows, ascending by date."""
    buckets = {}
    for row in rows:
        buckets.setdefault(bucket_key(row.date, schema.series_bucket), []).append(row)

    fields = schema.series_fields or schema.metric_names
    series = []
    for key in sorted(buckets):
        totals = aggregate_totals(buckets[key], schema)
        point = {'date': key}
        point.update({name: totals[name] for name in fields})
        series.append(point)
    return series


def count_campaigns(rows: Iterable[FactRow]) -> int:
    return len({row.campaign_id for row in rows})
