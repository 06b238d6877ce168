from django.db import models
from django.db.models import F
from django.urls import reverse
from django.utils import timezone
from django.utils.html import strip_tags
from django.utils.text import Truncator
from django.utils.translation import gettext_lazy as _

from apps.corecode.models import StoredFile

SLUG_MAX_LENGTH = 60


class NewsArticle(models.Model):
    title = models.CharField(max_length=255, verbose_name=_("Title"))
    slug = models.SlugField(max_length=SLUG_MAX_LENGTH, unique=True)
    content = models.TextField(verbose_name=_("Content"))
    excerpt = models.CharField(max_length=300, blank=True)
    cover_image = models.CharField(max_length=500, blank=True)
    storage = models.ForeignKey(
        StoredFile,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="news_covers",
    )
    author = models.CharField(max_length=200, verbose_name=_("Author"))
    publication_date = models.DateTimeField(default=timezone.now)
    views = models.PositiveIntegerField(default=0)
    updated_on = models.DateTimeField(null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ["-publication_date", "-pk"]
        verbose_name = _("News Article")
        verbose_name_plural = _("News")

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("news:news_detail", kwargs={"slug": self.slug})

    def save(self, *args, **kwargs):
        if not self.excerpt and self.content:
            self.excerpt = Truncator(strip_tags(self.content)).chars(200)
        super().save(*args, **kwargs)

    @classmethod
    def increment_views(cls, slug):
        """Count a read; unknown slugs are ignored"""
        return cls.objects.filter(slug=slug).update(views=F("views") + 1)

    def as_summary(self):
        return {
            "id": self.pk,
            "title": self.title,
            "slug": self.slug,
            "cover_image": self.cover_image,
            "author": self.author,
            "views": self.views,
            "publication_date": self.publication_date.isoformat(),
            "updated_on": self.updated_on.isoformat() if self.updated_on else None,
        }

    def as_dict(self):
        return {
            **self.as_summary(),
            "content": self.content,
            "excerpt": self.excerpt,
            "tags": self.tags,
        }
