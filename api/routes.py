"""
API Routes - Endpoint definitions for the Signal Intelligence Core

Endpoints:
- Health Check
- Signal intelligence action endpoint (analyze_signals, push_to_alerts, update_thresholds)
- Latest cached analysis
- Active thresholds
"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger

from config import settings
from processor import SignalIntelligenceService, Signal, InvalidSignalError

router = APIRouter()


def get_intelligence_service() -> SignalIntelligenceService:
    """FastAPI dependency providing the intelligence service."""
    return SignalIntelligenceService()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "success": False})


# ============================================================
# Health Check
# ============================================================
@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "database": settings.DATABASE_URL or str(settings.DATABASE_PATH)
    }


# ============================================================
# Signal Intelligence
# ============================================================
@router.post("/signal-intelligence")
async def signal_intelligence(
    request: Request,
    service: SignalIntelligenceService = Depends(get_intelligence_service),
):
    """
    Action endpoint.

    Body fields:
    - action: 'analyze_signals' | 'push_to_alerts' | 'update_thresholds'
    - signal: full signal object (push_to_alerts)
    - current_drift: number (update_thresholds)
    """
    try:
        body = await request.json()
    except ValueError:
        return _error("Request body must be valid JSON", 400)
    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    action = body.get("action")

    try:
        if action == "analyze_signals":
            result = await service.analyze_signals()
            return {"success": True, **result.to_response()}

        if action == "push_to_alerts":
            payload = body.get("signal")
            if not isinstance(payload, dict) or not payload:
                return _error("Signal data required for alert push", 400)
            await service.push_to_alerts(Signal.from_dict(payload))
            return {"success": True, "message": "Signal pushed to alerts successfully"}

        if action == "update_thresholds":
            current_drift = body.get("current_drift")
            if isinstance(current_drift, bool) or not isinstance(current_drift, (int, float)):
                return _error("Current drift value required for threshold update", 400)
            thresholds = await service.update_thresholds(float(current_drift))
            return {"success": True, "thresholds": thresholds.to_dict()}

    except InvalidSignalError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception(f"Error in signal intelligence action '{action}': {e}")
        return _error(str(e), 500)

    return JSONResponse(status_code=400, content={"error": "Unknown action"})


@router.get("/signal-intelligence/latest")
async def get_latest_analysis(
    service: SignalIntelligenceService = Depends(get_intelligence_service),
):
    """Cached results of the last successful analysis."""
    result = await service.get_latest_analysis()
    if result is None:
        raise HTTPException(status_code=404, detail="No analysis found")

    return {
        **result.to_response(),
        "run_id": result.run_id,
        "analyzed_at": result.analyzed_at.isoformat() if result.analyzed_at else None,
    }


@router.get("/signal-intelligence/thresholds")
async def get_thresholds(
    service: SignalIntelligenceService = Depends(get_intelligence_service),
):
    """Currently active adaptive thresholds."""
    thresholds = await service.get_thresholds()
    return {"thresholds": thresholds.to_dict()}
