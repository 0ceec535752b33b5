"""
Detector Module

Finds statistically significant pattern shifts against the trailing baseline.

Components:
- PatternShiftDetector: Runs the spike, surge and emergence families
- PatternShift: Data class for a detected shift
- group_by / summarize / count_tags: Shared grouping helpers
"""

from .models import PatternShift
from .detector import PatternShiftDetector
from .aggregation import GroupStats, group_by, summarize, count_tags


__all__ = [
    "PatternShiftDetector",
    "PatternShift",
    "GroupStats",
    "group_by",
    "summarize",
    "count_tags",
]
