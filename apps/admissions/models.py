from django.db import models
from django.utils.translation import gettext_lazy as _


class AdmissionRequirement(models.Model):
    """Entry requirements for one kind of program, one line per requirement"""

    title = models.CharField(max_length=200, verbose_name=_("Title"))
    requirements = models.JSONField(default=list, blank=True, verbose_name=_("Requirements"))

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.title

    def as_dict(self):
        return {"id": self.pk, "title": self.title, "requirements": self.requirements}


class AlternativeAdmissionRoute(models.Model):
    title = models.CharField(max_length=200, verbose_name=_("Title"))
    description = models.TextField(verbose_name=_("Description"))

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.title

    def as_dict(self):
        return {"id": self.pk, "title": self.title, "description": self.description}


class HowToApply(models.Model):
    text = models.TextField(verbose_name=_("Instructions"))
    link = models.URLField(max_length=500, verbose_name=_("Application Link"))

    class Meta:
        ordering = ["pk"]
        verbose_name = _("How to Apply")
        verbose_name_plural = _("How to Apply")

    def __str__(self):
        return self.link

    def as_dict(self):
        return {"id": self.pk, "text": self.text, "link": self.link}
