"""
Base task classes - NO DJANGO IMPORTS AT MODULE LEVEL
"""
import logging
from celery import Task

logger = logging.getLogger(__name__)


class BaseTask(Task):
    """
    Base class for background tasks: progress logging and failure reporting.
    """

    abstract = True

    def log_progress(self, message, progress=None):
        """Log task progress with a visual indicator"""
        progress = max(0, min(100, int(progress or 0)))

        bar_length = 20
        filled = int(bar_length * progress / 100)
        bar = "█" * filled + "░" * (bar_length - filled)

        logger.info("[%s] %3d%% - %s: %s", bar, progress, self.name, message)

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        logger.error("Task %s [%s] failed: %s", self.name, task_id, exc)
        super().on_failure(exc, task_id, args, kwargs, einfo)
