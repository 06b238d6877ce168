from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import Faculty, ProgramType, Semester, StoredFile


class Material(models.Model):
    """A downloadable PDF filed under a faculty and program type"""

    faculty = models.CharField(max_length=100, choices=Faculty.choices, verbose_name=_("Faculty"))
    type = models.CharField(max_length=10, choices=ProgramType.choices, verbose_name=_("Program Type"))
    title = models.CharField(max_length=255, verbose_name=_("Title"))
    description = models.TextField(verbose_name=_("Description"))
    file = models.ForeignKey(
        StoredFile,
        on_delete=models.PROTECT,
        related_name="%(class)s_files",
    )
    downloads = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["title"]

    def __str__(self):
        return self.title

    @property
    def file_url(self):
        return self.file.url if self.file_id else None

    def record_download(self):
        type(self).objects.filter(pk=self.pk).update(downloads=models.F("downloads") + 1)
        self.refresh_from_db(fields=["downloads"])
        return self.downloads

    def as_dict(self):
        return {
            "id": self.pk,
            "faculty": self.faculty,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "file": str(self.file_id),
            "downloads": self.downloads,
        }


class CourseMaterial(Material):

    class Meta(Material.Meta):
        verbose_name = _("Course Material")
        verbose_name_plural = _("Course Materials")
        indexes = [
            models.Index(fields=["faculty", "type"], name="material_faculty_type_idx"),
        ]


class GPCMaterial(Material):
    """General postgraduate course material, taught per semester"""

    semester = models.PositiveSmallIntegerField(choices=Semester.choices, verbose_name=_("Semester"))

    class Meta(Material.Meta):
        ordering = ["semester", "title"]
        verbose_name = _("GPC Material")
        verbose_name_plural = _("GPC Materials")
        indexes = [
            models.Index(fields=["faculty", "type"], name="gpc_faculty_type_idx"),
        ]

    def as_dict(self):
        return {**super().as_dict(), "semester": self.semester}
