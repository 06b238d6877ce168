"""
Blob storage for uploaded images and documents.

Files reach storage two ways:
- two-step: the browser asks for a short-lived signed upload URL, then POSTs
  the raw bytes to it and receives a storage ID
- one-step: a multipart form carries the file and the view stores it directly

Both produce a StoredFile row; records point at it with an optional foreign key.
"""
import logging
import mimetypes
import uuid
from datetime import timedelta

from django.conf import settings
from django.core import signing
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from django.db import transaction
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .models import StoredFile

logger = logging.getLogger(__name__)

UPLOAD_SALT = "corecode.storage.upload"


class UploadTokenError(Exception):
    """Upload URL is invalid or has expired"""
    pass


class UploadConflict(Exception):
    """Upload URL was already used"""
    pass


def _signer():
    return signing.TimestampSigner(salt=UPLOAD_SALT)


def generate_upload_url(request=None):
    """
    Issue a signed upload URL valid for STORAGE_UPLOAD_URL_MAX_AGE seconds.

    The storage ID the blob will get is embedded in the token, so one URL
    can be used exactly once.
    """
    token = _signer().sign(str(uuid.uuid4()))
    path = reverse("corecode:storage_upload", kwargs={"token": token})
    if request is not None:
        return request.build_absolute_uri(path)
    return path


def read_upload_token(token):
    try:
        value = _signer().unsign(token, max_age=settings.STORAGE_UPLOAD_URL_MAX_AGE)
    except signing.SignatureExpired:
        raise UploadTokenError(_("Upload URL has expired"))
    except signing.BadSignature:
        raise UploadTokenError(_("Invalid upload URL"))

    try:
        return uuid.UUID(value)
    except ValueError:
        raise UploadTokenError(_("Invalid upload URL"))


def _check_size(size):
    if size <= 0:
        raise ValidationError(_("Uploaded file is empty"))
    if size > settings.STORAGE_MAX_UPLOAD_SIZE:
        raise ValidationError(
            _("File size must be less than %(max)s MB.") % {
                "max": settings.STORAGE_MAX_UPLOAD_SIZE // (1024 * 1024)
            }
        )


def store_bytes(data, content_type, storage_id=None, filename=None):
    """Store a raw request body under the given storage ID"""
    _check_size(len(data))

    if storage_id is not None and StoredFile.objects.filter(pk=storage_id).exists():
        raise UploadConflict(_("Upload URL has already been used"))

    content_type = (content_type or "application/octet-stream").split(";")[0].strip()
    if not filename:
        extension = mimetypes.guess_extension(content_type) or ""
        filename = f"blob{extension}"

    stored = StoredFile(content_type=content_type, size=len(data))
    if storage_id is not None:
        stored.id = storage_id
    stored.file.save(filename, ContentFile(data), save=False)
    stored.save(force_insert=True)

    logger.info("Stored blob %s (%s, %s bytes)", stored.pk, content_type, stored.size)
    return stored


def store_upload(uploaded_file):
    """Store a file received through a multipart form"""
    _check_size(uploaded_file.size)

    stored = StoredFile(
        content_type=getattr(uploaded_file, "content_type", "") or "application/octet-stream",
        size=uploaded_file.size,
    )
    stored.file.save(uploaded_file.name, uploaded_file, save=False)
    stored.save(force_insert=True)

    logger.info("Stored upload %s (%s)", stored.pk, uploaded_file.name)
    return stored


def get_file_url(storage_id):
    """
    Resolve a storage ID to its download URL.

    Returns None when the ID is unknown or the bytes are missing.
    """
    try:
        stored = StoredFile.objects.get(pk=storage_id)
    except (StoredFile.DoesNotExist, ValidationError, ValueError):
        return None
    return stored.url


def orphaned_files(older_than_hours=None):
    """Blobs no record references, older than the grace period"""
    if older_than_hours is None:
        older_than_hours = settings.STORAGE_ORPHAN_GRACE_HOURS

    cutoff = timezone.now() - timedelta(hours=older_than_hours)
    queryset = StoredFile.objects.filter(created_at__lt=cutoff)
    for relation in StoredFile._meta.related_objects:
        queryset = queryset.filter(**{f"{relation.name}__isnull": True})
    return queryset


def purge_orphaned_files(older_than_hours=None):
    """
    Delete unreferenced blobs past the grace period.

    Rows go first; the post_delete signal removes the bytes once the
    transaction commits. Returns the number of blobs removed.
    """
    purged = 0
    with transaction.atomic():
        for stored in orphaned_files(older_than_hours):
            stored.delete()
            purged += 1
    if purged:
        logger.info("Purged %s orphaned blob(s)", purged)
    return purged
