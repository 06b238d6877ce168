"""
Blob storage housekeeping.

Uploads that were never attached to a record (abandoned forms, replaced
images and documents) are deleted once they are older than the grace period.
"""
import logging

from celery import shared_task

from tasks.base import BaseTask
from tasks.config import TASK_CONFIG

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    base=BaseTask,
    name="storage.purge_orphaned_uploads",
    autoretry_for=(OSError,),
    retry_backoff=60,
    retry_kwargs={"max_retries": 3},
)
def purge_orphaned_uploads_task(self, older_than_hours=None):
    from apps.corecode.storage import purge_orphaned_files

    self.log_progress("Looking for orphaned uploads", 0)
    purged = purge_orphaned_files(older_than_hours)
    self.log_progress(f"Removed {purged} orphaned upload(s)", 100)
    return {"status": "success", "purged": purged}


def schedule_purge(older_than_hours=None):
    """
    Queue the purge on a worker, or run it inline where no worker exists.

    Returns the task result dict when run inline, else the AsyncResult.
    """
    if TASK_CONFIG["USE_CELERY"]:
        return purge_orphaned_uploads_task.delay(older_than_hours)

    logger.info("Celery disabled (%s); purging inline", TASK_CONFIG["ENV_TYPE"])
    return purge_orphaned_uploads_task.apply(args=(older_than_hours,)).get()
