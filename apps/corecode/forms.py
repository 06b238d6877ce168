from django import forms
from django.conf import settings
from django.utils.translation import gettext_lazy as _

from .models import Mission, StoredFile, Vision
from .storage import store_upload


class UploadFormMixin:
    """
    Accept a file either directly in the form or as the storage ID returned
    by a signed upload URL (the hidden ``storage_id`` field).

    Forms set ``upload_field`` to their file field; ``store_file()`` returns
    the StoredFile for the new upload, or None when nothing new came in.
    """

    upload_field = "image"
    upload_required = False
    upload_required_message = _("Image is required")
    stored_content_prefix = "image/"
    stored_max_size_setting = "IMAGE_MAX_UPLOAD_SIZE"
    # model foreign key to StoredFile, when named differently from the form field
    upload_model_field = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["storage_id"] = forms.UUIDField(required=False, widget=forms.HiddenInput)
        self.stored_file = None
        # stored by save() from a direct upload
        self.new_stored_file = None

    def has_existing_upload(self):
        field = self.upload_model_field or self.upload_field
        return bool(self.instance.pk and getattr(self.instance, field + "_id", None))

    def clean(self):
        cleaned_data = super().clean()
        self.stored_file = None

        storage_id = cleaned_data.get("storage_id")
        if storage_id:
            try:
                stored = StoredFile.objects.get(pk=storage_id)
            except StoredFile.DoesNotExist:
                self.add_error(self.upload_field, _("Uploaded file not found"))
            else:
                self._check_stored_file(stored)

        has_new_upload = bool(cleaned_data.get(self.upload_field)) or storage_id
        if self.upload_required and not has_new_upload and not self.has_existing_upload():
            self.add_error(self.upload_field, self.upload_required_message)
        return cleaned_data

    def _check_stored_file(self, stored):
        limit = getattr(settings, self.stored_max_size_setting)
        if not stored.content_type.startswith(self.stored_content_prefix):
            self.add_error(self.upload_field, _("Unsupported file type"))
        elif stored.size > limit:
            self.add_error(
                self.upload_field,
                _("File size must be less than %(max)sMB.") % {"max": limit // (1024 * 1024)},
            )
        else:
            self.stored_file = stored

    def store_file(self):
        if self.stored_file is not None:
            return self.stored_file
        upload = self.cleaned_data.get(self.upload_field)
        if upload:
            self.new_stored_file = store_upload(upload)
            return self.new_stored_file
        return None


class AboutTextForm(forms.ModelForm):
    """Shared shape of the vision and mission statements"""

    class Meta:
        fields = ["title", "desc"]
        widgets = {
            "desc": forms.Textarea(attrs={"rows": 6}),
        }
        labels = {
            "desc": _("Description"),
        }

    def clean_title(self):
        title = self.cleaned_data["title"].strip()
        if not title:
            raise forms.ValidationError(_("Title is required"))
        return title

    def clean_desc(self):
        desc = self.cleaned_data["desc"].strip()
        if not desc:
            raise forms.ValidationError(_("Description is required"))
        return desc


class VisionForm(AboutTextForm):
    class Meta(AboutTextForm.Meta):
        model = Vision


class MissionForm(AboutTextForm):
    class Meta(AboutTextForm.Meta):
        model = Mission


class ItemListFormMixin:
    """
    ModelForm mixin that edits JSON list-of-objects fields through formsets
    rendered alongside the main fields.

    ``item_formsets`` maps each model field to its formset class. Items are
    stored as dicts of the item form's fields; blank and deleted rows are
    dropped.
    """

    item_formsets = {}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.formsets = {
            field: formset_class(
                self.data if self.is_bound else None,
                prefix=field,
                initial=getattr(self.instance, field) or None,
            )
            for field, formset_class in self.item_formsets.items()
        }

    @property
    def formset_sections(self):
        return [
            (self.instance._meta.get_field(field).verbose_name, formset)
            for field, formset in self.formsets.items()
        ]

    def is_valid(self):
        form_valid = super().is_valid()
        formsets_valid = all([formset.is_valid() for formset in self.formsets.values()])
        return form_valid and formsets_valid

    @staticmethod
    def item_values(formset):
        items = []
        for item_form in formset.forms:
            data = getattr(item_form, "cleaned_data", None) or {}
            if data.get("DELETE"):
                continue
            item = {name: data.get(name) or "" for name in item_form.fields if name != "DELETE"}
            if any(item.values()):
                items.append(item)
        return items

    def save(self, commit=True):
        for field, formset in self.formsets.items():
            setattr(self.instance, field, self.item_values(formset))
        return super().save(commit=commit)
