from django import forms
from django.utils import timezone
from django.utils.html import strip_tags
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import UploadFormMixin
from apps.corecode.utils import RESERVED_SLUGS, generate_slug, sanitize_html
from apps.corecode.validators import validate_image_size

from .models import SLUG_MAX_LENGTH, NewsArticle


class NewsForm(UploadFormMixin, forms.ModelForm):
    upload_field = "image"
    upload_model_field = "storage"

    image = forms.ImageField(
        required=False,
        label=_("Cover image"),
        validators=[validate_image_size],
    )
    tags = forms.CharField(
        required=False,
        help_text=_("Comma separated."),
    )

    class Meta:
        model = NewsArticle
        fields = ["title", "author", "content"]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 12, "class": "rich-text"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            self.initial["tags"] = ", ".join(self.instance.tags)

    def clean_title(self):
        title = self.cleaned_data["title"].strip()
        if not title:
            raise forms.ValidationError(_("Title is required"))

        # Slugs are fixed once an article exists
        if self.instance.pk is None:
            slug = generate_slug(title, max_length=SLUG_MAX_LENGTH)
            if not slug:
                raise forms.ValidationError(_("Title must contain letters or numbers"))
            if slug in RESERVED_SLUGS:
                raise forms.ValidationError(_("This title is reserved, please choose another"))
            if NewsArticle.objects.filter(slug=slug).exists():
                raise forms.ValidationError(_("A news item with this title already exists"))
            self.instance.slug = slug
        return title

    def clean_content(self):
        content = sanitize_html(self.cleaned_data["content"])
        if not strip_tags(content).strip():
            raise forms.ValidationError(_("Content is required"))
        return content

    def clean_tags(self):
        tags = [tag.strip() for tag in self.cleaned_data.get("tags", "").split(",")]
        return [tag for tag in tags if tag]

    def save(self, commit=True):
        article = super().save(commit=False)
        article.tags = self.cleaned_data["tags"]
        # Refresh the excerpt from the new content
        article.excerpt = ""

        stored = self.store_file()
        if stored is not None:
            article.storage = stored
            article.cover_image = stored.url or ""

        if article.pk:
            article.updated_on = timezone.now()
        if commit:
            article.save()
        return article
