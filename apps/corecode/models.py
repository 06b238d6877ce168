import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import models
from django.utils.translation import gettext_lazy as _


class Faculty(models.TextChoices):
    ARTS = "Faculty of Arts", _("Faculty of Arts")
    EDUCATION = "Faculty of Education", _("Faculty of Education")
    MGT_SOCIAL_SCIENCES = "Faculty of Mgt. & Social Sciences", _("Faculty of Mgt. & Social Sciences")
    NAT_SCIENCE = (
        "Faculty of Nat. Science & Environmental Studies",
        _("Faculty of Nat. Science & Environmental Studies"),
    )
    LAW = "Faculty of Law", _("Faculty of Law")


class ProgramType(models.TextChoices):
    PGD = "pgd", _("PGD")
    MASTERS = "masters", _("Masters")
    PHD = "phd", _("PhD")


class Semester(models.IntegerChoices):
    FIRST = 1, _("First Semester")
    SECOND = 2, _("Second Semester")


def stored_file_path(instance, filename):
    return f"uploads/{instance.pk}/{filename}"


class StoredFile(models.Model):
    """A blob in file storage, addressed by its storage ID"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    file = models.FileField(upload_to=stored_file_path, max_length=255)
    content_type = models.CharField(max_length=100, blank=True)
    size = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("Stored File")
        verbose_name_plural = _("Stored Files")

    def __str__(self):
        return str(self.pk)

    @property
    def url(self):
        """Resolved download URL, or None when the bytes are gone"""
        if not self.file or not default_storage.exists(self.file.name):
            return None
        return self.file.url

    @property
    def is_pdf(self):
        return self.content_type == "application/pdf"


class UserMetadata(models.Model):
    """Claims supplied by the identity provider for a dashboard user"""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="metadata",
    )
    public_metadata = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("User Metadata")
        verbose_name_plural = _("User Metadata")

    def __str__(self):
        return f"{self.user} ({self.role or 'no role'})"

    @property
    def role(self):
        return self.public_metadata.get("role")


class Hero(models.Model):
    """Landing page hero block"""

    title = models.CharField(max_length=200)
    desc = models.JSONField(default=list, blank=True)

    class Meta:
        verbose_name_plural = _("Hero")

    def __str__(self):
        return self.title

    def as_dict(self):
        return {"id": self.pk, "title": self.title, "desc": self.desc}


class Vision(models.Model):
    title = models.CharField(max_length=200)
    desc = models.TextField()

    def __str__(self):
        return self.title

    def as_dict(self):
        return {"id": self.pk, "title": self.title, "desc": self.desc}


class Mission(models.Model):
    title = models.CharField(max_length=200)
    desc = models.TextField()

    def __str__(self):
        return self.title

    def as_dict(self):
        return {"id": self.pk, "title": self.title, "desc": self.desc}
