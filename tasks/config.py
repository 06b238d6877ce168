"""
Configuration for background tasks - NO EARLY DJANGO IMPORTS
"""
import os
import logging

logger = logging.getLogger(__name__)

# Use explicit environment variable for CPanel detection
ENV_TYPE = os.environ.get("ENV_TYPE", "STANDARD").upper()

TASK_CONFIG = {
    # cPanel hosts have no worker; tasks run inline from cron instead
    "USE_CELERY": ENV_TYPE != "CPANEL",
    "ENV_TYPE": ENV_TYPE,
}

logger.debug("Background tasks: env=%s celery=%s", ENV_TYPE, TASK_CONFIG["USE_CELERY"])
