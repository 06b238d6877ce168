from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import UploadFormMixin
from apps.corecode.validators import validate_pdf

from .models import CourseMaterial, GPCMaterial


class MaterialForm(UploadFormMixin, forms.ModelForm):
    """
    PDF material. Every field is required when adding; when updating,
    fields left empty keep their current value.
    """

    upload_field = "document"
    upload_model_field = "file"
    upload_required = True
    upload_required_message = _("Please upload a PDF document")
    stored_content_prefix = "application/pdf"
    stored_max_size_setting = "STORAGE_MAX_UPLOAD_SIZE"

    document = forms.FileField(
        required=False,
        label=_("PDF document"),
        validators=[validate_pdf],
        widget=forms.ClearableFileInput(attrs={"accept": "application/pdf"}),
    )

    class Meta:
        fields = ["faculty", "type", "title", "description"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            for name in self._meta.fields:
                self.fields[name].required = False

    def clean(self):
        cleaned_data = super().clean()
        if self.instance.pk:
            for name in self._meta.fields:
                if cleaned_data.get(name) in (None, ""):
                    cleaned_data[name] = getattr(self.instance, name)
        return cleaned_data

    def save(self, commit=True):
        material = super().save(commit=False)
        stored = self.store_file()
        # A new document replaces the reference; the old blob is left for the purge task
        if stored is not None:
            material.file = stored
        if commit:
            material.save()
        return material


class CourseMaterialForm(MaterialForm):

    class Meta(MaterialForm.Meta):
        model = CourseMaterial


class GPCMaterialForm(MaterialForm):

    class Meta(MaterialForm.Meta):
        model = GPCMaterial
        fields = MaterialForm.Meta.fields + ["semester"]
