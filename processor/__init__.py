"""
Processor package for the Signal Intelligence Core.

Components:
- BaselineEstimator: Trailing-window mean sentiment
- PriorityScorer: Multi-factor priority scoring
- PatternShiftDetector: Spike, surge and emergence detection
- ThresholdAdapter: Drift-driven threshold adaptation
- AlertEmitter: Alert records for high-priority signals

Main entry points: SignalIntelligencePipeline and SignalIntelligenceService
"""

from .exceptions import IntelligenceError, DataAccessError, InvalidSignalError
from .models import Signal, IntelligenceMetrics, ThresholdConfig, AnalysisResult
from .baseline import BaselineEstimator
from .scorer import PriorityScorer, PriorityResult, urgency_level_for
from .detector import PatternShiftDetector, PatternShift
from .thresholds import ThresholdAdapter, adjustment_factor, scale_thresholds
from .alerts import AlertEmitter
from .pipeline import SignalIntelligencePipeline
from .service import SignalIntelligenceService

__all__ = [
    # Entry points
    "SignalIntelligencePipeline",
    "SignalIntelligenceService",
    # Components
    "BaselineEstimator",
    "PriorityScorer",
    "PriorityResult",
    "urgency_level_for",
    "PatternShiftDetector",
    "PatternShift",
    "ThresholdAdapter",
    "adjustment_factor",
    "scale_thresholds",
    "AlertEmitter",
    # Models
    "Signal",
    "IntelligenceMetrics",
    "ThresholdConfig",
    "AnalysisResult",
    # Errors
    "IntelligenceError",
    "DataAccessError",
    "InvalidSignalError",
]
