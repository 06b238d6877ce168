from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.validators import email_pattern_validator, student_phone_validator

from .models import PGStudent

NIGERIA_DIALING_CODE = "+234"


def normalize_phone(phone):
    """Store local numbers (0XXXXXXXXXX) in international form"""
    if phone.startswith("0"):
        return NIGERIA_DIALING_CODE + phone[1:]
    return phone


class PGStudentForm(forms.ModelForm):

    class Meta:
        model = PGStudent
        fields = ["name", "email", "phone", "regno", "faculty", "type"]
        widgets = {
            "phone": forms.TextInput(attrs={"placeholder": "+2348012345678 or 08012345678"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["email"].validators.append(email_pattern_validator)

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError(_("Name is required"))
        return name

    def clean_phone(self):
        phone = self.cleaned_data["phone"].replace(" ", "")
        student_phone_validator(phone)
        return normalize_phone(phone)

    def clean_regno(self):
        regno = self.cleaned_data["regno"].strip()
        if not regno:
            raise forms.ValidationError(_("Registration number is required"))
        return regno
