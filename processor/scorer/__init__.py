"""
Scorer Module

Computes each signal's composite priority score and urgency tier.

Components:
- PriorityScorer: Multi-factor scoring against the sentiment baseline
- PriorityResult: Data class for scoring results
- urgency_level_for: Step function from score to urgency tier
"""

from .models import PriorityResult
from .scorer import PriorityScorer
from .config import urgency_level_for


__all__ = [
    "PriorityScorer",
    "PriorityResult",
    "urgency_level_for",
]
