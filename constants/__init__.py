"""
Constants package for the Signal Intelligence Core.

Contains shared enums and the scoring vocabularies.
"""

from .enums import (
    ThreatLevel,
    UrgencyLevel,
    PatternType,
    ConfigType,
    ConfigKey,
    AlertType,
)
from .vocabulary import (
    POLITICAL_KEYWORDS,
    SECURITY_KEYWORDS,
    ECONOMIC_KEYWORDS,
    PRIORITY_KEYWORDS,
    HIGH_INTENSITY_EMOTIONS,
)

__all__ = [
    # Enums
    "ThreatLevel",
    "UrgencyLevel",
    "PatternType",
    "ConfigType",
    "ConfigKey",
    "AlertType",
    # Vocabularies
    "POLITICAL_KEYWORDS",
    "SECURITY_KEYWORDS",
    "ECONOMIC_KEYWORDS",
    "PRIORITY_KEYWORDS",
    "HIGH_INTENSITY_EMOTIONS",
]
