from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import ItemListFormMixin
from apps.corecode.utils import NO_DATE_YET, RESERVED_SLUGS, generate_slug, sanitize_html

from .models import Course, Program


class WhyChooseItemForm(forms.Form):
    """One 'why choose this program' reason"""

    title = forms.CharField(max_length=200, required=False)
    description = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 2}),
    )

    def clean(self):
        cleaned_data = super().clean()
        title = (cleaned_data.get("title") or "").strip()
        description = (cleaned_data.get("description") or "").strip()

        # Blank rows are ignored
        if not title and not description:
            return cleaned_data

        if len(title) < 2:
            self.add_error("title", _("Title must be at least 2 characters"))
        if len(description) < 10:
            self.add_error("description", _("Description must be at least 10 characters"))

        cleaned_data["title"] = title
        cleaned_data["description"] = description
        return cleaned_data


WhyChooseFormSet = forms.formset_factory(WhyChooseItemForm, extra=1, can_delete=True)


class ProgramForm(ItemListFormMixin, forms.ModelForm):
    item_formsets = {"why_choose": WhyChooseFormSet}

    next_intake = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={"type": "date"}),
        help_text=_("Leave empty if no date has been fixed."),
    )

    class Meta:
        model = Program
        fields = [
            "program_full_name",
            "program_short_name",
            "program_overview",
            "next_intake",
            "study_duration",
            "delivery_mode",
            "study_mode",
            "status",
        ]
        widgets = {
            "program_overview": forms.Textarea(attrs={"rows": 8, "class": "rich-text"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        intake = self.instance.next_intake
        if intake and intake != NO_DATE_YET:
            self.initial["next_intake"] = intake[:10]
        else:
            self.initial["next_intake"] = None

    def clean_program_full_name(self):
        name = self.cleaned_data["program_full_name"].strip()
        if len(name) < 2:
            raise forms.ValidationError(_("Program name must be at least 2 characters"))
        return name

    def clean_program_short_name(self):
        name = self.cleaned_data["program_short_name"].strip()
        if len(name) < 2:
            raise forms.ValidationError(_("Short name must be at least 2 characters"))
        return name

    def clean_program_overview(self):
        overview = sanitize_html(self.cleaned_data["program_overview"]).strip()
        if len(overview) < 10:
            raise forms.ValidationError(_("Overview must be at least 10 characters"))
        return overview

    def clean_next_intake(self):
        intake = self.cleaned_data.get("next_intake")
        if not intake:
            return NO_DATE_YET
        return intake.isoformat()

    def clean(self):
        cleaned_data = super().clean()
        full_name = cleaned_data.get("program_full_name")
        if full_name is None:
            return cleaned_data

        slug = generate_slug(full_name)
        if not slug:
            raise forms.ValidationError(_("Slug is required"))
        if slug in RESERVED_SLUGS:
            self.add_error("program_full_name", _("This name is reserved, please choose another"))
            return cleaned_data

        duplicates = Program.objects.filter(slug=slug).exclude(pk=self.instance.pk)
        if duplicates.exists():
            self.add_error(
                "program_full_name",
                _("A program with this name already exists"),
            )
        cleaned_data["slug"] = slug
        return cleaned_data

    def save(self, commit=True):
        self.instance.slug = self.cleaned_data["slug"]
        return super().save(commit=commit)


class CourseForm(ItemListFormMixin, forms.ModelForm):
    item_formsets = {"why_choose": WhyChooseFormSet}

    class Meta:
        model = Course
        fields = ["course", "duration", "mode", "overview", "type", "faculty"]
        widgets = {
            "overview": forms.Textarea(attrs={"rows": 8, "class": "rich-text"}),
        }

    def clean_course(self):
        name = self.cleaned_data["course"].strip()
        if not generate_slug(name):
            raise forms.ValidationError(_("Course name is required"))
        return name

    def clean_overview(self):
        return sanitize_html(self.cleaned_data["overview"])

    def clean(self):
        cleaned_data = super().clean()
        name = cleaned_data.get("course")
        if not name:
            return cleaned_data

        # Slug only follows the name when the name changes
        if self.instance.pk and name == self.instance.course:
            cleaned_data["slug"] = self.instance.slug
            return cleaned_data

        slug = generate_slug(name)
        if slug in RESERVED_SLUGS:
            self.add_error("course", _("This name is reserved, please choose another"))
            return cleaned_data
        if Course.objects.filter(slug=slug).exclude(pk=self.instance.pk).exists():
            self.add_error("course", _("Course with this name already exists"))
        cleaned_data["slug"] = slug
        return cleaned_data

    def save(self, commit=True):
        self.instance.slug = self.cleaned_data["slug"]
        return super().save(commit=commit)
