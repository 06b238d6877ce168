from django.db import models
from django.db.models.functions import Lower
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import Faculty, ProgramType


class PGStudent(models.Model):
    """A registered postgraduate student"""

    name = models.CharField(max_length=200, verbose_name=_("Name"))
    email = models.EmailField(verbose_name=_("Email"))
    phone = models.CharField(max_length=20, verbose_name=_("Phone"))
    regno = models.CharField(max_length=50, unique=True, verbose_name=_("Registration Number"))
    faculty = models.CharField(max_length=100, choices=Faculty.choices, verbose_name=_("Faculty"))
    type = models.CharField(max_length=10, choices=ProgramType.choices, verbose_name=_("Program Type"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = [Lower("name")]
        verbose_name = _("PG Student")
        verbose_name_plural = _("PG Students")
        indexes = [
            models.Index(fields=["faculty", "type"]),
            models.Index(fields=["type"]),
        ]

    def __str__(self):
        return f"{self.name} ({self.regno})"

    @classmethod
    def statistics(cls):
        counts = dict(
            cls.objects.order_by().values_list("type").annotate(count=models.Count("pk"))
        )
        stats = {value: counts.get(value, 0) for value in ProgramType.values}
        stats["total"] = sum(counts.values())
        return stats

    def as_dict(self):
        return {
            "id": self.pk,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "regno": self.regno,
            "faculty": self.faculty,
            "type": self.type,
        }
