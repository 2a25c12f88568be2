def percent_change(current, prior) -> float:
    """Percent change from ``prior`` to ``current``.

    0 -> 0 is no change; 0 -> anything else is reported as a 100% increase.
    """
    if not prior:
        return 0.0 if not current else 100.0
    return round((current - prior) / prior * 100, 2)


def compare_periods(current: dict, prior: dict) -> dict:
    comparison = {}
    for metric, value in current.items():
        previous = prior.get(metric, 0)
        comparison[metric] = {
            'delta': round(value - previous, 2),
            'percentChange': percent_change(value, previous),
        }
    return comparison
