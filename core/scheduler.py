import logging
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from core.config import settings
from core.store import db, HabitStore
from core.time_utils import get_current_time, to_local

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()

def apply_day_rollover(store: HabitStore, now: datetime) -> bool:
    """
    Closes the previous day if the date has rolled over since the last check.

    For every habit:
    1. best_streak catches up with streak.
    2. A good habit loses its streak unless it was completed on the closed day
       and that day was yesterday; a gap of several days always breaks it.
    3. completed_today resets.
    4. current_week_completed resets when a new ISO week has started.

    Returns True if a rollover was applied.
    """
    now = to_local(now)
    with store.lock:
        last_check = to_local(store.last_maintenance)
        if now.date() <= last_check.date():
            return False

        new_week = now.isocalendar()[:2] != last_check.isocalendar()[:2]
        gap = (now.date() - last_check.date()).days
        missed = 0

        for habit in store.list_habits():
            update = {"best_streak": max(habit.best_streak, habit.streak)}

            broken = gap > 1 or not habit.completed_today
            if not habit.is_bad and broken and habit.streak > 0:
                update["streak"] = 0
                missed += 1

            update["completed_today"] = False
            if new_week and not habit.is_bad:
                update["current_week_completed"] = 0

            store.replace_habit(habit.model_copy(update=update))

        store.last_maintenance = now

    logger.info("Day rollover applied (%d streaks reset, %d day(s) closed, new week: %s)", missed, gap, new_week)
    return True

async def run_daily_maintenance():
    now = get_current_time()
    logger.debug("Checking daily maintenance at %s", now)
    try:
        apply_day_rollover(db, now)
    except Exception:
        logger.exception("Daily maintenance failed")

def start_scheduler():
    # Run periodically to catch day rollovers without restart
    scheduler.add_job(run_daily_maintenance, IntervalTrigger(hours=settings.MAINTENANCE_INTERVAL_HOURS))
    scheduler.start()

def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
