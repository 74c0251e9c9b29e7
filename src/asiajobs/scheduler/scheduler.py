"""APScheduler-based periodic refresh."""

import logging
from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from asiajobs.collector.refresh import RefreshResult, run_refresh
from asiajobs.config import AsiaJobsConfig

logger = logging.getLogger(__name__)

JOB_ID = "asiajobs_refresh"


def refresh_task(config: AsiaJobsConfig) -> RefreshResult | None:
    """Run one refresh cycle. Same flow as the CLI refresh command."""
    try:
        result = run_refresh(config)
    except Exception as e:
        logger.error("Scheduled refresh failed: %s", e)
        return None

    logger.info(
        "Scheduled refresh: %d jobs, %d new, %d source errors",
        len(result.jobs),
        result.new_count,
        len(result.errors),
    )
    return result


def build_trigger(interval_hours: float) -> IntervalTrigger:
    """Interval trigger for the refresh job."""
    if interval_hours <= 0:
        raise ValueError(f"Invalid refresh interval: {interval_hours}")
    return IntervalTrigger(hours=interval_hours)


def start_scheduler(config: AsiaJobsConfig) -> BackgroundScheduler:
    """Start a background scheduler running refresh_task every interval."""
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        refresh_task,
        trigger=build_trigger(config.scheduler.interval_hours),
        args=[config],
        id=JOB_ID,
        replace_existing=True,
    )

    logger.info("Scheduler started, refreshing every %s hours", config.scheduler.interval_hours)
    scheduler.start()
    return scheduler


def stop_scheduler(scheduler: BackgroundScheduler):
    """Shut down the scheduler gracefully."""
    scheduler.shutdown(wait=False)
    logger.info("Scheduler stopped")


def get_next_run_time(scheduler: BackgroundScheduler) -> datetime | None:
    """Get next scheduled run time."""
    job = scheduler.get_job(JOB_ID)
    if job:
        return job.next_run_time
    return None
