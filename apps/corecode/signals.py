"""
Signals for blob storage with transaction safety.
File bytes are only removed once the database change has committed.
"""
import logging

from django.core.files.storage import default_storage
from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import StoredFile

logger = logging.getLogger(__name__)


def safe_delete_file(name):
    """
    Safely delete a file with error handling.
    Only deletes if file exists in storage.
    """
    if not name:
        return
    try:
        if default_storage.exists(name):
            default_storage.delete(name)
            logger.debug("Deleted file: %s", name)
        else:
            logger.warning("File not found in storage: %s", name)
    except OSError:
        logger.exception("Error deleting file %s", name)


@receiver(post_delete, sender=StoredFile)
def delete_blob_on_delete(sender, instance, **kwargs):
    """Remove the bytes after the StoredFile row is gone"""
    name = instance.file.name if instance.file else None
    transaction.on_commit(lambda: safe_delete_file(name))
