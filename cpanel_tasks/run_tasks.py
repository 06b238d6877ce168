#!/usr/bin/env python
"""
CPanel task runner - executes tasks synchronously when Celery is not available
"""
import os
import sys
import django
import logging

# Setup Django
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "spgs_app.settings")
django.setup()

from apps.corecode.storage import purge_orphaned_files  # noqa: E402

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def run_purge_orphaned_uploads(older_than_hours=None):
    """Run the orphaned upload purge"""
    logger.info("Purging orphaned uploads (older than %s hours)", older_than_hours or "default")
    return purge_orphaned_files(older_than_hours)


if __name__ == "__main__":
    # This script can be called from CPanel cron jobs
    # Example: python cpanel_tasks/run_tasks.py purge_orphaned_uploads 48
    if len(sys.argv) > 1 and sys.argv[1] == "purge_orphaned_uploads":
        hours = int(sys.argv[2]) if len(sys.argv) > 2 else None
        print(f"Removed: {run_purge_orphaned_uploads(hours)}")
    else:
        print("Available commands:")
        print("  purge_orphaned_uploads [hours]")
