"""
Grouping and aggregation helpers shared by the pattern families.

    groups = group_by(rows, key=lambda r: r[0])
    stats = summarize(groups, value=lambda r: r[1])
    stats["Centre"].mean, stats["Centre"].count
"""
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


@dataclass
class GroupStats:
    """Count, total and mean of one group."""
    count: int
    total: float

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count else 0.0


def group_by(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """Partition items by key, keeping input order within each group."""
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def summarize(
    groups: Dict[K, List[T]],
    value: Callable[[T], float]
) -> Dict[K, GroupStats]:
    """Reduce each group to its count, total and mean of value(item)."""
    return {
        group_key: GroupStats(count=len(members), total=sum(value(m) for m in members))
        for group_key, members in groups.items()
    }


def count_tags(
    items: Iterable[T],
    tags: Callable[[T], Optional[Iterable[Hashable]]]
) -> Counter:
    """
    Count occurrences of every tag across items.

    A tag listed twice on one item counts twice. Items whose tags are
    not a list are skipped.
    """
    counts: Counter = Counter()
    for item in items:
        item_tags = tags(item)
        if isinstance(item_tags, list):
            counts.update(item_tags)
    return counts
