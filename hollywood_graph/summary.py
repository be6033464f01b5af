"""Statistics over an actor-number mapping."""

from __future__ import annotations

from collections import Counter

from hollywood_graph.model import ActorNumberEntry, ActorNumberReport
from hollywood_graph.traversal import is_not_found


def summarize(source: str, numbers: dict[str, int]) -> ActorNumberReport:
    """Sort entries by (hop, name) and compute the average actor number.

    The average includes the source itself at hop 0.
    """
    if is_not_found(numbers):
        return ActorNumberReport(source=source, found=False)

    entries = [
        ActorNumberEntry(name=name, hop=hop)
        for name, hop in sorted(numbers.items(), key=lambda item: (item[1], item[0]))
    ]
    hops = [e.hop for e in entries]
    histogram = Counter(hops)

    return ActorNumberReport(
        source=source,
        found=True,
        entries=entries,
        reachable=len(entries) - 1,
        average=sum(hops) / len(hops),
        max_hop=max(hops),
        histogram=dict(sorted(histogram.items())),
    )
