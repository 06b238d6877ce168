from django.db import models
from django.utils.translation import gettext_lazy as _


class FeeCategory(models.TextChoices):
    PGD = "pgd", _("PGD")
    MASTERS = "masters", _("Masters")
    PHD_GENERAL = "phd_general", _("PhD (General)")
    PHD_NATSCI = "phd_natsci", _("PhD (Natural Sciences)")
    PHD_EDU = "phd_edu", _("PhD (Education)")


class ExtraFeeType(models.TextChoices):
    COURSE_DEFERMENT = "Course Deferment", _("Course Deferment")
    DEVELOPMENT_LEVY = "Development Levy", _("Development Levy")
    EXAMS_LEVY = "Exams Levy", _("Exams Levy")
    CHANGE_OF_SUPERVISOR = "Change of Supervisor", _("Change of Supervisor")
    CHANGE_OF_DEPARTMENT = "Change of Department", _("Change of Department")
    UTILITY_LEVY = "Utility Levy", _("Utility Levy")
    CARRYOVER_FEE = "Carryover Fee", _("Carryover Fee")


class ProgramFee(models.Model):
    """A line of a program's fee table, paid into one or more accounts"""

    category = models.CharField(
        max_length=20,
        choices=FeeCategory.choices,
        db_index=True,
        verbose_name=_("Category"),
    )
    title = models.CharField(max_length=200, verbose_name=_("Title"))
    # Amounts are displayed as entered, e.g. "₦150,000"
    amount = models.CharField(max_length=100, verbose_name=_("Amount"))
    description = models.TextField(blank=True, verbose_name=_("Description"))
    # [{"bank": ..., "accountNumber": ..., "accountName": ...}, ...]
    details = models.JSONField(default=list, blank=True, verbose_name=_("Bank Details"))
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "pk"]
        verbose_name = _("Program Fee")
        verbose_name_plural = _("Program Fees")

    def __str__(self):
        return f"{self.get_category_display()}: {self.title}"

    def as_dict(self):
        return {
            "id": self.pk,
            "category": self.category,
            "title": self.title,
            "amount": self.amount,
            "description": self.description,
            "details": self.details,
        }


class AdditionalFee(models.Model):
    title = models.CharField(max_length=200)
    amount = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    bank = models.CharField(max_length=200)
    account_number = models.CharField(max_length=30)
    account_name = models.CharField(max_length=200)

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.title

    def as_dict(self):
        return {
            "id": self.pk,
            "title": self.title,
            "amount": self.amount,
            "description": self.description,
            "bank": self.bank,
            "account_number": self.account_number,
            "account_name": self.account_name,
        }


class ExtraFeesAccount(models.Model):
    """The single account extra fees are paid into"""

    bank_name = models.CharField(max_length=200, blank=True)
    account_number = models.CharField(max_length=30, blank=True)
    account_name = models.CharField(max_length=200, blank=True)

    class Meta:
        verbose_name = _("Extra Fees Account")
        verbose_name_plural = _("Extra Fees Account")

    def __str__(self):
        return f"{self.bank_name} {self.account_number}".strip() or str(_("Extra Fees Account"))

    @classmethod
    def get_solo(cls):
        account = cls.objects.order_by("pk").first()
        if account is None:
            account = cls.objects.create()
        return account

    def as_dict(self):
        return {
            "id": self.pk,
            "bank_name": self.bank_name,
            "account_number": self.account_number,
            "account_name": self.account_name,
        }


class ExtraFee(models.Model):
    fee_type = models.CharField(
        max_length=40,
        choices=ExtraFeeType.choices,
        unique=True,
        verbose_name=_("Fee Type"),
    )
    amount = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ["pk"]

    def __str__(self):
        return self.fee_type

    def as_dict(self):
        return {"id": self.pk, "fee_type": self.fee_type, "amount": self.amount}
