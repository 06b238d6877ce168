from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.utils import clean_lines

from .models import AdmissionRequirement, AlternativeAdmissionRoute, HowToApply


class AdmissionRequirementForm(forms.ModelForm):
    """Requirement list edited as one line per requirement"""

    requirements = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 10}),
        help_text=_("One requirement per line. Empty lines are ignored."),
    )

    class Meta:
        model = AdmissionRequirement
        fields = ["title", "requirements"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            self.initial["requirements"] = "\n".join(self.instance.requirements)

    def clean_requirements(self):
        return clean_lines(self.cleaned_data.get("requirements", "").splitlines())


class AlternativeAdmissionRouteForm(forms.ModelForm):

    class Meta:
        model = AlternativeAdmissionRoute
        fields = ["title", "description"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 5}),
        }


class HowToApplyForm(forms.ModelForm):

    class Meta:
        model = HowToApply
        fields = ["text", "link"]
        widgets = {
            "text": forms.Textarea(attrs={"rows": 5}),
        }
