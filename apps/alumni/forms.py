from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import UploadFormMixin
from apps.corecode.validators import (
    email_pattern_validator,
    international_phone_validator,
    linkedin_profile_validator,
    validate_image_size,
)

from .models import Alumnus


def graduation_year_choices():
    current = timezone.now().year
    return [("", "---------")] + [(str(year), str(year)) for year in range(current, 1979, -1)]


class AlumnusForm(UploadFormMixin, forms.ModelForm):
    upload_field = "photo"
    upload_model_field = "storage"

    photo = forms.ImageField(
        required=False,
        validators=[validate_image_size],
        help_text=_("Optional. Max 1MB."),
    )
    graduated_on = forms.ChoiceField(
        required=False,
        choices=graduation_year_choices,
        label=_("Graduation Year"),
    )

    class Meta:
        model = Alumnus
        fields = [
            "name",
            "degree",
            "current_position",
            "company",
            "graduated_on",
            "email",
            "tel",
            "linkedin",
            "testimonial",
        ]
        widgets = {
            "testimonial": forms.Textarea(attrs={"rows": 4, "maxlength": 250}),
            "tel": forms.TextInput(attrs={"placeholder": "+2348012345678"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["tel"].validators.append(international_phone_validator)
        self.fields["email"].validators.append(email_pattern_validator)
        self.fields["linkedin"].validators.append(linkedin_profile_validator)
        self.fields["email"].required = True
        # Required on create; an existing record may have it blank
        self.fields["linkedin"].required = self.instance.pk is None

        # Keep a stored year outside the dropdown range editable
        year = self.instance.graduated_on
        choices = list(self.fields["graduated_on"].choices)
        if year and year not in dict(choices):
            self.fields["graduated_on"].choices = choices + [(year, year)]

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if len(name) < 5:
            raise forms.ValidationError(_("Name must be at least 5 characters."))
        return name

    def clean_testimonial(self):
        testimonial = self.cleaned_data["testimonial"].strip()
        if len(testimonial) < 20:
            raise forms.ValidationError(_("Testimonial must be at least 20 characters."))
        if len(testimonial) > 250:
            raise forms.ValidationError(_("Testimonial must not exceed 250 characters."))
        return testimonial

    def save(self, commit=True):
        alumnus = super().save(commit=False)
        stored = self.store_file()
        if stored is not None:
            alumnus.storage = stored
            alumnus.photo = stored.url or ""
        if commit:
            alumnus.save()
        return alumnus
