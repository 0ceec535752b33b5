"""API endpoint tests with the intelligence service swapped for an in-memory fake."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import get_intelligence_service
from processor import (
    AnalysisResult,
    DataAccessError,
    IntelligenceMetrics,
    PatternShift,
    Signal,
    ThresholdConfig,
)
from processor.thresholds import adjustment_factor, scale_thresholds


class FakeService:
    """Records calls and returns canned results."""

    def __init__(self):
        self.pushed = []
        self.drifts = []
        self.latest = None
        self.fail_with = None

    async def analyze_signals(self):
        if self.fail_with:
            raise self.fail_with
        return AnalysisResult(
            top_signals=[Signal(id="sig_1", content_text="Fuel shortage", priority_score=0.82,
                                urgency_level="critical", change_from_baseline=0.6,
                                topic_relevance=0.9, spike_indicator=True)],
            pattern_shifts=[PatternShift(id="topic_emergence_fuel_1", pattern_type="topic_emergence",
                                         topic="fuel", baseline_value=0.0, current_value=60.0,
                                         change_magnitude=60.0, confidence=0.85,
                                         detected_at=datetime(2026, 10, 19, 11, 50))],
            intelligence_metrics=IntelligenceMetrics(total_signals_processed=1, high_priority_signals=1,
                                                     pattern_shifts_detected=1),
        )

    async def push_to_alerts(self, signal):
        if self.fail_with:
            raise self.fail_with
        self.pushed.append(signal)

    async def update_thresholds(self, current_drift):
        self.drifts.append(current_drift)
        return scale_thresholds(ThresholdConfig(), adjustment_factor(current_drift))

    async def get_thresholds(self):
        return ThresholdConfig()

    async def get_latest_analysis(self):
        return self.latest


@pytest.fixture
def fake():
    service = FakeService()
    app.dependency_overrides[get_intelligence_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client(fake):
    return TestClient(app)


def post_action(client, body):
    return client.post("/api/signal-intelligence", json=body)


# ── analyze_signals ──────────────────────────────────────────────────────────

class TestAnalyzeSignals:
    def test_returns_signals_shifts_and_metrics(self, client):
        res = post_action(client, {"action": "analyze_signals"})

        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        assert body["top_signals"][0]["id"] == "sig_1"
        assert body["top_signals"][0]["urgency_level"] == "critical"
        assert body["top_signals"][0]["spike_indicator"] is True
        assert body["pattern_shifts"][0]["pattern_type"] == "topic_emergence"
        assert body["pattern_shifts"][0]["detected_at"] == "2026-10-19T11:50:00"
        assert body["intelligence_metrics"]["total_signals_processed"] == 1
        assert body["intelligence_metrics"]["urgency_threshold"] == 0.7

    def test_data_access_failure_is_500(self, client, fake):
        fake.fail_with = DataAccessError("Failed to fetch signals: database is locked")

        res = post_action(client, {"action": "analyze_signals"})

        assert res.status_code == 500
        assert res.json() == {"error": "Failed to fetch signals: database is locked", "success": False}


# ── push_to_alerts ───────────────────────────────────────────────────────────

class TestPushToAlerts:
    def test_pushes_signal(self, client, fake):
        res = post_action(client, {
            "action": "push_to_alerts",
            "signal": {"id": "sig_1", "content_text": "Fuel shortage", "urgency_level": "high"},
        })

        assert res.status_code == 200
        assert res.json() == {"success": True, "message": "Signal pushed to alerts successfully"}
        assert [s.id for s in fake.pushed] == ["sig_1"]

    @pytest.mark.parametrize("body", [
        {"action": "push_to_alerts"},
        {"action": "push_to_alerts", "signal": None},
        {"action": "push_to_alerts", "signal": {}},
    ])
    def test_missing_signal_is_400(self, client, fake, body):
        res = post_action(client, body)

        assert res.status_code == 400
        assert res.json()["error"] == "Signal data required for alert push"
        assert fake.pushed == []

    def test_invalid_signal_is_400(self, client, fake):
        res = post_action(client, {"action": "push_to_alerts", "signal": {"id": "sig_1"}})

        assert res.status_code == 400
        assert "content_text" in res.json()["error"]
        assert fake.pushed == []

    def test_sink_failure_is_500(self, client, fake):
        fake.fail_with = RuntimeError("alerts table unavailable")

        res = post_action(client, {
            "action": "push_to_alerts",
            "signal": {"id": "sig_1", "content_text": "Fuel shortage", "urgency_level": "high"},
        })

        assert res.status_code == 500
        assert res.json()["error"] == "alerts table unavailable"


# ── update_thresholds ────────────────────────────────────────────────────────

class TestUpdateThresholds:
    def test_returns_new_thresholds(self, client, fake):
        res = post_action(client, {"action": "update_thresholds", "current_drift": -0.6})

        assert res.status_code == 200
        thresholds = res.json()["thresholds"]
        assert thresholds["urgency_threshold"] == pytest.approx(0.56)
        assert thresholds["relevance_threshold"] == pytest.approx(0.48)
        assert thresholds["pattern_sensitivity"] == pytest.approx(0.24)
        assert fake.drifts == [-0.6]

    def test_zero_drift_accepted(self, client, fake):
        res = post_action(client, {"action": "update_thresholds", "current_drift": 0})

        assert res.status_code == 200
        assert fake.drifts == [0.0]

    @pytest.mark.parametrize("drift", [None, "0.4", True])
    def test_missing_or_non_numeric_drift_is_400(self, client, fake, drift):
        body = {"action": "update_thresholds"}
        if drift is not None:
            body["current_drift"] = drift

        res = post_action(client, body)

        assert res.status_code == 400
        assert res.json()["error"] == "Current drift value required for threshold update"
        assert fake.drifts == []


# ── Dispatch and CORS ────────────────────────────────────────────────────────

class TestDispatch:
    @pytest.mark.parametrize("body", [{"action": "dance"}, {}])
    def test_unknown_action_is_400(self, client, body):
        res = post_action(client, body)

        assert res.status_code == 400
        assert res.json() == {"error": "Unknown action"}

    @pytest.mark.parametrize("body", [[1, 2], "analyze_signals", 42])
    def test_non_object_body_is_400(self, client, body):
        res = post_action(client, body)

        assert res.status_code == 400
        assert res.json() == {"error": "Request body must be a JSON object", "success": False}

    @pytest.mark.parametrize("content", [b"not json", b"", b'{"action": '])
    def test_malformed_json_is_400(self, client, fake, content):
        res = client.post("/api/signal-intelligence", content=content,
                          headers={"Content-Type": "application/json"})

        assert res.status_code == 400
        assert res.json() == {"error": "Request body must be valid JSON", "success": False}
        assert fake.pushed == [] and fake.drifts == []

    def test_preflight_allows_any_origin(self, client):
        res = client.options("/api/signal-intelligence", headers={
            "Origin": "https://dashboard.example.org",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization, content-type",
        })

        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] == "*"

    def test_responses_carry_cors_header(self, client):
        res = post_action(client, {"action": "analyze_signals"})
        assert res.status_code == 200

        res = client.post("/api/signal-intelligence", json={"action": "dance"},
                          headers={"Origin": "https://dashboard.example.org"})
        assert res.headers["access-control-allow-origin"] == "*"


# ── Read endpoints ───────────────────────────────────────────────────────────

class TestReadEndpoints:
    def test_latest_not_found(self, client):
        res = client.get("/api/signal-intelligence/latest")
        assert res.status_code == 404

    def test_latest_returns_cached_run(self, client, fake):
        fake.latest = AnalysisResult(run_id="analysis_1", analyzed_at=datetime(2026, 10, 19, 12, 0))

        res = client.get("/api/signal-intelligence/latest")

        assert res.status_code == 200
        body = res.json()
        assert body["run_id"] == "analysis_1"
        assert body["analyzed_at"] == "2026-10-19T12:00:00"
        assert body["top_signals"] == []

    def test_thresholds(self, client):
        res = client.get("/api/signal-intelligence/thresholds")

        assert res.status_code == 200
        assert res.json()["thresholds"]["urgency_threshold"] == 0.7

    def test_health(self, client):
        res = client.get("/api/health")
        assert res.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"
