from django.db import models
from django.utils.translation import gettext_lazy as _


class ContactInfo(models.Model):
    """The single contact-us record"""

    address = models.TextField(verbose_name=_("Address"))
    # [{"email1": ..., "email2": ...}]
    email = models.JSONField(default=list, blank=True, verbose_name=_("Email addresses"))
    # [{"tel1": ..., "tel2": ...}]
    phone = models.JSONField(default=list, blank=True, verbose_name=_("Phone numbers"))
    # [{"days": ..., "time": ...}]
    office_hours = models.JSONField(default=list, blank=True, verbose_name=_("Office hours"))
    # [{"email": ..., "tel": ...}]
    admission_office = models.JSONField(default=list, blank=True, verbose_name=_("Admission office"))
    research_office = models.JSONField(default=list, blank=True, verbose_name=_("Research office"))
    student_support = models.JSONField(default=list, blank=True, verbose_name=_("Student support"))
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Contact Information")
        verbose_name_plural = _("Contact Information")

    def __str__(self):
        return str(_("Contact Information"))

    @classmethod
    def current(cls):
        return cls.objects.order_by("pk").first()

    def as_dict(self):
        return {
            "id": self.pk,
            "address": self.address,
            "email": self.email,
            "phone": self.phone,
            "office_hours": self.office_hours,
            "admission_office": self.admission_office,
            "research_office": self.research_office,
            "student_support": self.student_support,
        }
