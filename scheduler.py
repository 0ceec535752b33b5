"""
Scheduler - Periodic signal intelligence analysis

Current Setup:
- Analysis cycle runs every minute (configurable via ANALYSIS_INTERVAL_MINUTES)
- Cycle includes: analyze signals → push top high-priority signals to alerts
  → adapt thresholds when drift is large

Usage:
    python scheduler.py              # Run scheduler daemon
    python scheduler.py --once       # Run one cycle and exit
"""
import asyncio
import sys
from datetime import datetime, timedelta

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import settings, ensure_directories
from utils import logger, init_logging


class SignalIntelligenceScheduler:
    """
    Scheduler for the periodic analysis cycle.

    Each tick is independent; runs share no in-process state.
    """

    def __init__(self, service=None):
        self.scheduler = AsyncIOScheduler()
        self.service = service
        self._last_run_result = None

    def _get_service(self):
        if self.service is None:
            from processor import SignalIntelligenceService
            self.service = SignalIntelligenceService()
        return self.service

    def setup(self):
        """Setup the analysis job."""
        ensure_directories()

        self.scheduler.add_job(
            self.run_analysis_cycle,
            IntervalTrigger(minutes=settings.ANALYSIS_INTERVAL_MINUTES),
            id="signal_analysis",
            name="Signal Intelligence Analysis",
            replace_existing=True,
            max_instances=1,
            next_run_time=datetime.now() + timedelta(minutes=1)
        )

        logger.info("Scheduler setup complete with 1 job (signal analysis)")
        self._log_schedule()

    def _log_schedule(self):
        """Log current job schedule."""
        jobs = self.scheduler.get_jobs()
        logger.info(f"Scheduled jobs ({len(jobs)}):")
        for job in jobs:
            logger.info(f"  - {job.name}: {job.trigger}")

    async def run_analysis_cycle(self) -> bool:
        """
        Job: run one analysis cycle.

        Returns:
            True on success, False if the run failed
        """
        logger.info("Starting analysis cycle...")

        try:
            result = await self._get_service().run_cycle()
        except Exception as e:
            logger.exception(f"Analysis cycle failed: {e}")
            return False

        self._last_run_result = result
        metrics = result.intelligence_metrics
        logger.info(f"Cycle complete: {metrics.total_signals_processed} signals, "
                    f"{metrics.high_priority_signals} high priority, "
                    f"{metrics.pattern_shifts_detected} pattern shifts")
        return True

    def start(self):
        """Start the scheduler."""
        self.setup()
        self.scheduler.start()
        logger.info("Scheduler started - Press Ctrl+C to stop")

    def stop(self):
        """Stop the scheduler."""
        self.scheduler.shutdown()
        logger.info("Scheduler stopped")

    def run_once(self) -> bool:
        """Run one analysis cycle and exit."""
        ensure_directories()

        logger.info("Running analysis cycle once...")
        result = asyncio.run(self._run_once())

        if result:
            logger.info("Analysis cycle completed successfully")
        else:
            logger.error("Analysis cycle failed")

        return result

    async def _run_once(self) -> bool:
        from database import close_engine

        try:
            return await self.run_analysis_cycle()
        finally:
            await close_engine()


def run_scheduler():
    """Run the scheduler as main process."""
    import signal

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    scheduler = SignalIntelligenceScheduler()
    scheduler.start()

    def shutdown(signum, frame):
        logger.info("Received shutdown signal")
        scheduler.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    try:
        loop.run_forever()
    except (KeyboardInterrupt, SystemExit):
        scheduler.stop()


def main():
    """Main entry point with CLI arguments."""
    import argparse

    parser = argparse.ArgumentParser(description="Signal Intelligence Scheduler")
    parser.add_argument("--once", action="store_true", help="Run one analysis cycle and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    init_logging(app_name="scheduler")
    if args.verbose:
        logger.info("Verbose mode enabled")

    # Migrations are applied by the API service on startup

    scheduler = SignalIntelligenceScheduler()

    if args.once:
        result = scheduler.run_once()
        sys.exit(0 if result else 1)
    else:
        run_scheduler()


if __name__ == "__main__":
    main()
