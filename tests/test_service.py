"""Alert emitter, payload validation and the service entry points."""

from datetime import datetime, timedelta

import pytest

from config import settings
from processor import AlertEmitter, InvalidSignalError, Signal, SignalIntelligenceService
from repositories import AlertRepository
from tests.factories import make_log


def ago(minutes: float) -> datetime:
    """Offsets from the wall clock, for paths that analyze 'now'."""
    return datetime.now() - timedelta(minutes=minutes)


def scored_signal(**overrides) -> Signal:
    defaults = dict(
        id="sig_001",
        content_text="Security forces deployed after clashes near the market",
        platform="facebook",
        sentiment_score=-0.8,
        emotional_tone=["fear"],
        region_detected="Far North",
        priority_score=0.86,
        urgency_level="critical",
    )
    return Signal(**{**defaults, **overrides})


async def all_alerts(db):
    async with db() as session:
        return await AlertRepository(session).get_all()


# ── Payload validation ───────────────────────────────────────────────────────

class TestSignalFromDict:
    def test_parses_known_fields_and_ignores_extras(self):
        signal = Signal.from_dict({
            "id": 42,
            "content_text": "hello",
            "created_at": "2026-10-19T11:30:00",
            "urgency_level": "high",
            "unexpected": "ignored",
        })
        assert signal.id == "42"
        assert signal.created_at == datetime(2026, 10, 19, 11, 30)
        assert signal.urgency_level == "high"
        assert signal.platform == "unknown"

    @pytest.mark.parametrize("payload", [
        ["not", "an", "object"],
        {"content_text": "no id"},
        {"id": "sig", "content_text": None},
    ])
    def test_rejects_incomplete_payloads(self, payload):
        with pytest.raises(InvalidSignalError):
            Signal.from_dict(payload)

    def test_accepts_empty_content_text(self):
        signal = Signal.from_dict({"id": "sig", "content_text": ""})
        assert signal.content_text == ""

    def test_rejects_bad_timestamp(self):
        with pytest.raises(InvalidSignalError, match="Invalid timestamp"):
            Signal.from_dict({"id": "sig", "content_text": "x", "created_at": "yesterday"})

    def test_invalid_signal_error_is_a_value_error(self):
        assert issubclass(InvalidSignalError, ValueError)


# ── Alert emitter ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestAlertEmitter:
    async def test_alert_fields(self, db):
        async with db() as session:
            await AlertEmitter(session).push(scored_signal())

        alerts = await all_alerts(db)
        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.alert_type == "high_priority_signal"
        assert alert.severity == "critical"
        assert alert.title == "CRITICAL Priority Signal Detected"
        assert alert.description == "Security forces deployed after clashes near the market..."
        assert alert.affected_regions == ["Far North"]
        assert alert.sentiment_data == {
            "priority_score": 0.86,
            "sentiment_score": -0.8,
            "emotional_tone": ["fear"],
            "platform": "facebook",
        }
        assert alert.related_content_ids == ["sig_001"]
        assert alert.auto_generated is True
        assert alert.acknowledged is False

    async def test_description_truncated_to_two_hundred_chars(self, db):
        async with db() as session:
            await AlertEmitter(session).push(scored_signal(content_text="x" * 250, region_detected=None))

        alert = (await all_alerts(db))[0]
        assert alert.description == "x" * 200 + "..."
        assert alert.affected_regions == []

    async def test_missing_urgency_rejected(self, db):
        with pytest.raises(InvalidSignalError):
            async with db() as session:
                await AlertEmitter(session).push(scored_signal(urgency_level=None))
        assert await all_alerts(db) == []


# ── Service ──────────────────────────────────────────────────────────────────

@pytest.fixture
def service(db):
    return SignalIntelligenceService(session_factory=db)


@pytest.mark.asyncio
class TestService:
    async def test_push_to_alerts(self, service, db):
        await service.push_to_alerts(scored_signal(urgency_level="high"))

        alerts = await all_alerts(db)
        assert [a.severity for a in alerts] == ["high"]

    async def test_update_and_read_thresholds(self, service):
        updated = await service.update_thresholds(-0.6)
        current = await service.get_thresholds()

        assert current.urgency_threshold == pytest.approx(0.56)
        assert current.relevance_threshold == pytest.approx(0.48)
        assert current.pattern_sensitivity == pytest.approx(0.24)
        assert current.drift_factor == -0.6
        assert current.last_updated == updated.last_updated

    async def test_analyze_then_latest(self, service, seed):
        await seed(make_log(id="recent", created_at=ago(10)))

        result = await service.analyze_signals()
        cached = await service.get_latest_analysis()

        assert [s.id for s in result.top_signals] == ["recent"]
        assert cached.run_id == result.run_id

    async def test_adaptive_thresholds_reported_when_enabled(self, service, monkeypatch):
        await service.update_thresholds(0.0)
        monkeypatch.setattr(settings, "USE_ADAPTIVE_THRESHOLDS", True)

        result = await service.analyze_signals()

        assert result.intelligence_metrics.urgency_threshold == pytest.approx(0.77)
        assert result.intelligence_metrics.relevance_threshold == pytest.approx(0.66)


@pytest.mark.asyncio
class TestRunCycle:
    async def test_alerts_only_high_priority_top_signals(self, service, seed, db):
        await seed(
            make_log(id="crit_a", sentiment_score=-0.9, threat_level="critical", created_at=ago(15)),
            make_log(id="crit_b", sentiment_score=-0.9, threat_level="critical", created_at=ago(45)),
            *[make_log(sentiment_score=0.0, threat_level="low", created_at=ago(20 + i)) for i in range(3)],
        )

        result = await service.run_cycle()

        assert [s.urgency_level for s in result.top_signals[:3]] == ["high", "high", "medium"]
        alerts = await all_alerts(db)
        assert sorted(a.related_content_ids[0] for a in alerts) == ["crit_a", "crit_b"]

        # Drift is ~0, below the adaptation trigger
        thresholds = await service.get_thresholds()
        assert thresholds.last_updated is None

    async def test_alerts_limited_to_top_three(self, service, seed, db):
        await seed(*[
            make_log(sentiment_score=-0.9, threat_level="critical", emotional_tone=["anger"],
                     keywords_detected=["election"], author_influence_score=0.9, created_at=ago(5 + i))
            for i in range(5)
        ])

        result = await service.run_cycle()

        assert all(s.urgency_level == "high" for s in result.top_signals)
        assert len(await all_alerts(db)) == 3

    async def test_alerting_can_be_disabled(self, service, seed, db, monkeypatch):
        monkeypatch.setattr(settings, "AUTO_ALERT_ENABLED", False)
        await seed(make_log(sentiment_score=-0.9, threat_level="critical", created_at=ago(5)))

        await service.run_cycle()
        assert await all_alerts(db) == []

    async def test_large_drift_adapts_thresholds(self, service, seed):
        await seed(
            *[make_log(sentiment_score=0.8, created_at=ago(3 * 24 * 60)) for _ in range(4)],
            *[make_log(sentiment_score=-0.4, created_at=ago(10)) for _ in range(2)],
        )

        result = await service.run_cycle()

        assert result.intelligence_metrics.current_sentiment_drift == pytest.approx(-0.8)
        thresholds = await service.get_thresholds()
        assert thresholds.urgency_threshold == pytest.approx(0.56)
        assert thresholds.drift_factor == pytest.approx(-0.8)
