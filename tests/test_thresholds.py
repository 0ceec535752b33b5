"""Threshold adapter tests: factor selection, clamping and persistence."""

import pytest

from constants import ConfigKey
from processor.models import ThresholdConfig
from processor.thresholds import ThresholdAdapter, adjustment_factor, scale_thresholds
from repositories import IntelligenceConfigRepository


def as_tuple(config: ThresholdConfig):
    return (config.urgency_threshold, config.relevance_threshold, config.pattern_sensitivity)


# ── Pure helpers ─────────────────────────────────────────────────────────────

class TestAdjustmentFactor:
    @pytest.mark.parametrize("drift,factor", [
        (0.0, 1.1),
        (0.09, 1.1),
        (-0.09, 1.1),
        (0.1, 1.0),
        (0.2, 1.0),
        (0.3, 1.0),
        (0.31, 0.9),
        (-0.4, 0.9),
        (0.5, 0.9),
        (0.51, 0.8),
        (-0.6, 0.8),
        (-2.0, 0.8),
    ])
    def test_factor_bands(self, drift, factor):
        assert adjustment_factor(drift) == factor

    def test_symmetric_in_sign(self):
        for drift in (0.05, 0.2, 0.4, 0.7):
            assert adjustment_factor(drift) == adjustment_factor(-drift)


class TestScaleThresholds:
    def test_stability_raises_defaults(self):
        scaled = scale_thresholds(ThresholdConfig(), 1.1)
        assert as_tuple(scaled) == pytest.approx((0.77, 0.66, 0.33))

    def test_volatility_lowers_defaults(self):
        scaled = scale_thresholds(ThresholdConfig(), 0.8)
        assert as_tuple(scaled) == pytest.approx((0.56, 0.48, 0.24))

    def test_results_clamped_to_ranges(self):
        high = scale_thresholds(ThresholdConfig(0.9, 0.8, 0.5), 1.1)
        assert as_tuple(high) == (0.9, 0.8, 0.5)

        low = scale_thresholds(ThresholdConfig(0.5, 0.4, 0.2), 0.8)
        assert as_tuple(low) == (0.5, 0.4, 0.2)

    def test_input_not_mutated(self):
        config = ThresholdConfig()
        scale_thresholds(config, 0.8)
        assert as_tuple(config) == (0.7, 0.6, 0.3)


# ── Persistence ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestThresholdAdapter:
    async def test_defaults_when_nothing_stored(self, db):
        async with db() as session:
            config = await ThresholdAdapter(session).current()
        assert as_tuple(config) == (0.7, 0.6, 0.3)
        assert config.last_updated is None

    async def test_zero_drift_raises_and_persists(self, db):
        async with db() as session:
            updated = await ThresholdAdapter(session).update(0.0)

        assert as_tuple(updated) == pytest.approx((0.77, 0.66, 0.33))
        assert updated.drift_factor == 0.0
        assert updated.last_updated is not None

        async with db() as session:
            stored = await IntelligenceConfigRepository(session).get(ConfigKey.THRESHOLDS.value)
        assert stored.config_type == "system"
        assert stored.config_value["urgency_threshold"] == pytest.approx(0.77)
        assert stored.config_value["drift_factor"] == 0.0

    async def test_large_negative_drift_lowers(self, db):
        async with db() as session:
            updated = await ThresholdAdapter(session).update(-0.6)
        assert as_tuple(updated) == pytest.approx((0.56, 0.48, 0.24))
        assert updated.drift_factor == -0.6

    async def test_neutral_band_is_idempotent(self, db):
        async with db() as session:
            first = await ThresholdAdapter(session).update(0.2)
        async with db() as session:
            second = await ThresholdAdapter(session).update(0.2)

        assert as_tuple(first) == pytest.approx((0.7, 0.6, 0.3))
        assert as_tuple(second) == pytest.approx(as_tuple(first))

    async def test_repeated_updates_compound_until_clamped(self, db):
        for _ in range(10):
            async with db() as session:
                await ThresholdAdapter(session).update(0.0)
        async with db() as session:
            config = await ThresholdAdapter(session).current()
        assert as_tuple(config) == pytest.approx((0.9, 0.8, 0.5))

        for _ in range(10):
            async with db() as session:
                await ThresholdAdapter(session).update(0.9)
        async with db() as session:
            config = await ThresholdAdapter(session).current()
        assert as_tuple(config) == pytest.approx((0.5, 0.4, 0.2))

    async def test_partial_stored_config_falls_back_to_defaults(self, db):
        async with db() as session:
            await IntelligenceConfigRepository(session).upsert(
                ConfigKey.THRESHOLDS.value, {"urgency_threshold": 0.8}
            )
        async with db() as session:
            config = await ThresholdAdapter(session).current()
        assert as_tuple(config) == (0.8, 0.6, 0.3)

    async def test_update_scales_from_stored_values(self, db):
        async with db() as session:
            await IntelligenceConfigRepository(session).upsert(
                ConfigKey.THRESHOLDS.value,
                {"urgency_threshold": 0.8, "relevance_threshold": 0.5, "pattern_sensitivity": 0.4},
            )
        async with db() as session:
            updated = await ThresholdAdapter(session).update(0.4)
        assert as_tuple(updated) == pytest.approx((0.72, 0.45, 0.36))
