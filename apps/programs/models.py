from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import Faculty, ProgramType
from apps.corecode.utils import NO_DATE_YET


class Program(models.Model):
    """A postgraduate program (PGD, Masters or PhD offering)"""

    program_full_name = models.CharField(max_length=255, verbose_name=_("Program Full Name"))
    program_short_name = models.CharField(max_length=100, verbose_name=_("Program Short Name"))
    program_overview = models.TextField(verbose_name=_("Overview"))
    # [{"title": ..., "description": ...}, ...]
    why_choose = models.JSONField(default=list, blank=True, verbose_name=_("Why Choose"))
    next_intake = models.CharField(
        max_length=40,
        default=NO_DATE_YET,
        verbose_name=_("Next Intake"),
        help_text=_("ISO date, or No-DATE-YET"),
    )
    study_duration = models.CharField(max_length=100, verbose_name=_("Study Duration"))
    delivery_mode = models.CharField(max_length=100, verbose_name=_("Delivery Mode"))
    study_mode = models.CharField(max_length=100, verbose_name=_("Study Mode"))
    slug = models.SlugField(max_length=255, unique=True)
    status = models.BooleanField(default=True, verbose_name=_("Active"))

    class Meta:
        ordering = ["program_short_name"]
        verbose_name = _("Program")
        verbose_name_plural = _("Programs")

    def __str__(self):
        return self.program_short_name

    def get_absolute_url(self):
        return reverse("programs:program_detail", kwargs={"slug": self.slug})

    def as_summary(self):
        return {
            "id": self.pk,
            "program_short_name": self.program_short_name,
            "status": self.status,
            "study_duration": self.study_duration,
            "delivery_mode": self.delivery_mode,
            "slug": self.slug,
        }

    def as_dict(self):
        return {
            **self.as_summary(),
            "program_full_name": self.program_full_name,
            "program_overview": self.program_overview,
            "why_choose": self.why_choose,
            "next_intake": self.next_intake,
            "study_mode": self.study_mode,
        }


class Course(models.Model):
    course = models.CharField(max_length=255, verbose_name=_("Course"))
    slug = models.SlugField(max_length=255, unique=True)
    duration = models.CharField(max_length=100)
    mode = models.CharField(max_length=100)
    overview = models.TextField()
    type = models.CharField(max_length=10, choices=ProgramType.choices)
    why_choose = models.JSONField(default=list, blank=True, verbose_name=_("Why Choose"))
    faculty = models.CharField(max_length=100, choices=Faculty.choices)

    class Meta:
        ordering = ["course"]
        indexes = [
            models.Index(fields=["type"]),
            models.Index(fields=["faculty", "type"]),
        ]

    def __str__(self):
        return self.course

    def get_absolute_url(self):
        return reverse("programs:course_detail", kwargs={"slug": self.slug})

    def as_dict(self):
        return {
            "id": self.pk,
            "course": self.course,
            "slug": self.slug,
            "duration": self.duration,
            "mode": self.mode,
            "overview": self.overview,
            "type": self.type,
            "why_choose": self.why_choose,
            "faculty": self.faculty,
        }
