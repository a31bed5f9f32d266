from datetime import timedelta

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from django.conf import settings
from django.utils import timezone

from emojicache.sync import run_sync_cycle


def scheduled_sync():
    print("📅 Scheduled task: Fetching emojis")
    return run_sync_cycle()


def start_scheduler():
    scheduler = BackgroundScheduler(timezone=settings.TIME_ZONE)
    # initial fetch at start-up, then daily at midnight
    scheduler.add_job(
        scheduled_sync,
        CronTrigger(
            hour=settings.SYNC_CRON_HOUR,
            minute=settings.SYNC_CRON_MINUTE,
            timezone=settings.TIME_ZONE,
        ),
        id="sync_emojis",
        max_instances=1,
        coalesce=True,
        next_run_time=timezone.now(),
    )
    scheduler.add_job(
        lambda: print("💓 Scheduler heartbeat"),
        "interval",
        hours=settings.HEARTBEAT_INTERVAL_HOURS,
        id="heartbeat",
        next_run_time=timezone.now()
        + timedelta(hours=settings.HEARTBEAT_INTERVAL_HOURS),
    )
    scheduler.start()
    return scheduler
