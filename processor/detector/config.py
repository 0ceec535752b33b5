"""
Windows and significance thresholds for pattern shift detection.
"""
from datetime import timedelta


# ============================================
# WINDOWS
# ============================================

RECENT_WINDOW = timedelta(hours=1)      # [now - 1h, now]
BASELINE_WINDOW = timedelta(hours=24)   # [now - 24h, now - 1h)


# ============================================
# SENTIMENT SPIKES (regional)
# ============================================

SPIKE_MIN_RECENT_SAMPLES = 3
SPIKE_MIN_DELTA = 0.3
SPIKE_CONFIDENCE_CAP = 0.95
SPIKE_CONFIDENCE_SCALE = 2.0


# ============================================
# EMOTION SURGES
# ============================================

SURGE_MIN_FREQUENCY = 0.1
SURGE_MIN_RATIO = 2.0
SURGE_BASELINE_FLOOR = 0.01
SURGE_CONFIDENCE_CAP = 0.9
SURGE_CONFIDENCE_SCALE = 3.0


# ============================================
# TOPIC EMERGENCE
# ============================================

TOPIC_LIMIT = 5
TOPIC_MIN_VOLUME = 10.0
TOPIC_CONFIDENCE_CAP = 0.85
TOPIC_CONFIDENCE_DIVISOR = 50.0
