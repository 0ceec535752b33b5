"""
Reference vocabularies for priority scoring.

Keyword sets are matched case-insensitively against a signal's
keywords_detected; the emotion set against its emotional_tone tags.
Entries are stored lowercase.
"""

POLITICAL_KEYWORDS = frozenset({
    "election",
    "government",
    "president",
    "minister",
    "politics",
    "biya",
    "corruption",
})

SECURITY_KEYWORDS = frozenset({
    "boko haram",
    "separatist",
    "military",
    "conflict",
    "violence",
    "anglophone",
})

ECONOMIC_KEYWORDS = frozenset({
    "unemployment",
    "inflation",
    "economy",
    "poverty",
    "salary",
})

PRIORITY_KEYWORDS = POLITICAL_KEYWORDS | SECURITY_KEYWORDS | ECONOMIC_KEYWORDS

HIGH_INTENSITY_EMOTIONS = frozenset({
    "anger",
    "fear",
    "rage",
    "panic",
})
