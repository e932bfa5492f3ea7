from __future__ import annotations

import atexit
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .weekly_report import WeeklyReportJob

logger = logging.getLogger(__name__)

JOB_ID = "weekly_attendance_report"


def start_report_scheduler(job: WeeklyReportJob, *, interval_seconds: int) -> BackgroundScheduler:
    """Run the weekly report on a fixed interval in a background thread."""
    scheduler = BackgroundScheduler(daemon=True)
    scheduler.add_job(
        func=job.run,
        trigger=IntervalTrigger(seconds=int(interval_seconds)),
        id=JOB_ID,
        name="Weekly Attendance Report",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    atexit.register(lambda: scheduler.shutdown(wait=False) if scheduler.running else None)
    logger.info("Weekly report scheduled every %s seconds", interval_seconds)
    return scheduler
