from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import UploadFormMixin
from apps.corecode.validators import (
    email_pattern_validator,
    https_url_validator,
    validate_image_size,
)

from .models import Staff


class StaffForm(UploadFormMixin, forms.ModelForm):
    """Staff bio; a photo is required when the record is created"""

    upload_required = True
    upload_required_message = _("Image is required")

    image = forms.ImageField(
        required=False,
        validators=[validate_image_size],
        help_text=_("Max 1MB. Leave empty to keep the current image."),
    )

    class Meta:
        model = Staff
        fields = ["name", "role", "email", "linkedin", "profile"]
        widgets = {
            "profile": forms.Textarea(attrs={"rows": 5}),
            "linkedin": forms.URLInput(attrs={"placeholder": "https://linkedin.com/in/..."}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["email"].validators.append(email_pattern_validator)
        self.fields["linkedin"].validators.append(https_url_validator)
        self.fields["profile"].required = True

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if len(name) < 2:
            raise forms.ValidationError(_("Name must be at least 2 characters"))
        return name

    def clean_role(self):
        role = self.cleaned_data["role"].strip()
        if len(role) < 2:
            raise forms.ValidationError(_("Role must be at least 2 characters"))
        return role

    def clean_profile(self):
        profile = self.cleaned_data["profile"].strip()
        if not profile:
            raise forms.ValidationError(_("Profile is required"))
        return profile

    def save(self, commit=True):
        staff = super().save(commit=False)
        stored = self.store_file()
        # A new image replaces the reference; otherwise the old one is kept
        if stored is not None:
            staff.image = stored
            staff.image_url = stored.url or ""
            staff.format = "image"
        if commit:
            staff.save()
        return staff
