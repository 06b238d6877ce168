from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import StoredFile


class Alumnus(models.Model):
    name = models.CharField(max_length=200, verbose_name=_("Name"))
    degree = models.CharField(max_length=200, verbose_name=_("Degree"))
    current_position = models.CharField(max_length=200, verbose_name=_("Current Position"))
    company = models.CharField(max_length=200, blank=True, verbose_name=_("Company"))
    testimonial = models.TextField(verbose_name=_("Testimonial"))
    linkedin = models.URLField(blank=True, verbose_name=_("LinkedIn"))
    graduated_on = models.CharField(max_length=4, blank=True, verbose_name=_("Graduation Year"))
    email = models.EmailField(blank=True, verbose_name=_("Email"))
    tel = models.CharField(max_length=20, verbose_name=_("Phone"))
    photo = models.CharField(max_length=500, blank=True)
    storage = models.ForeignKey(
        StoredFile,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="alumni_photos",
    )

    class Meta:
        ordering = ["name"]
        verbose_name = _("Alumnus")
        verbose_name_plural = _("Alumni")

    def __str__(self):
        return self.name

    def as_dict(self):
        return {
            "id": self.pk,
            "name": self.name,
            "degree": self.degree,
            "current_position": self.current_position,
            "company": self.company,
            "testimonial": self.testimonial,
            "linkedin": self.linkedin,
            "graduated_on": self.graduated_on,
            "email": self.email,
            "tel": self.tel,
            "photo": self.photo,
            "storage_id": str(self.storage_id) if self.storage_id else None,
        }
