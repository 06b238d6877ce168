from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import StoredFile


class Staff(models.Model):
    name = models.CharField(max_length=200, verbose_name=_("Name"))
    role = models.CharField(max_length=200, verbose_name=_("Role"))
    email = models.EmailField(verbose_name=_("Email"))
    linkedin = models.URLField(blank=True, verbose_name=_("LinkedIn"))
    profile = models.TextField(blank=True, verbose_name=_("Profile"))
    image = models.ForeignKey(
        StoredFile,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="staff_images",
    )
    image_url = models.CharField(max_length=500, blank=True)
    format = models.CharField(max_length=20, default="image")

    class Meta:
        ordering = ["name"]
        verbose_name = _("Staff")
        verbose_name_plural = _("Staff")

    def __str__(self):
        return f"{self.name} ({self.role})"

    @property
    def resolved_image_url(self):
        """Current URL of the stored image, falling back to the saved one"""
        if self.image_id:
            url = self.image.url
            if url:
                return url
        return self.image_url or None

    def as_dict(self):
        return {
            "id": self.pk,
            "name": self.name,
            "role": self.role,
            "email": self.email,
            "linkedin": self.linkedin,
            "profile": self.profile,
            "storage_id": str(self.image_id) if self.image_id else None,
            "image_url": self.resolved_image_url,
            "format": self.format,
        }
