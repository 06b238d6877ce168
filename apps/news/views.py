from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET, require_POST
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, FilterQueryMixin, MutationMessageMixin
from apps.corecode.utils import apply_choice_filter, unique_values

from .forms import NewsForm
from .models import NewsArticle

LATEST_LIMIT = 100

SORT_ORDERS = {
    "default": ["-publication_date", "-pk"],
    "views_asc": ["views", "-publication_date"],
    "views_desc": ["-views", "-publication_date"],
}


def get_news_list(search=None, author=None, sort="default"):
    """The latest articles, optionally searched, filtered and re-sorted"""
    latest = list(NewsArticle.objects.values_list("pk", flat=True)[:LATEST_LIMIT])
    queryset = NewsArticle.objects.filter(pk__in=latest)
    if search:
        queryset = queryset.filter(title__icontains=search.strip())
    queryset = apply_choice_filter(queryset, "author", author)
    return queryset.order_by(*SORT_ORDERS.get(sort, SORT_ORDERS["default"]))


class NewsListView(LoginRequiredMixin, FilterQueryMixin, ListView):
    model = NewsArticle
    template_name = "news/news_list.html"
    context_object_name = "articles"
    paginate_by = 12

    def get_queryset(self):
        return get_news_list(
            self.request.GET.get("search"),
            self.request.GET.get("author"),
            self.request.GET.get("sort", "default"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["authors"] = unique_values(NewsArticle.objects.values_list("author", flat=True))
        context["sort_options"] = [
            ("default", _("Latest")),
            ("views_desc", _("Most viewed")),
            ("views_asc", _("Least viewed")),
        ]
        context["search"] = self.request.GET.get("search", "")
        context["selected_author"] = self.request.GET.get("author", "all")
        context["selected_sort"] = self.request.GET.get("sort", "default")
        return context


class NewsDetailView(LoginRequiredMixin, DetailView):
    model = NewsArticle
    template_name = "news/news_detail.html"
    context_object_name = "article"


class NewsCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = NewsArticle
    form_class = NewsForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("news:news_list")
    success_message = _("News published successfully")
    error_message = _("Failed to publish news")
    page_title = _("Add News")


class NewsUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = NewsArticle
    form_class = NewsForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("news:news_list")
    success_message = _("News updated successfully")
    error_message = _("Failed to update news")
    page_title = _("Update News")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("News item not found"))


class NewsDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = NewsArticle
    success_url = reverse_lazy("news:news_list")
    success_message = _("News deleted successfully")
    error_message = _("Failed to delete news")


# JSON endpoints

@require_GET
def news_list_api(request):
    articles = get_news_list(
        request.GET.get("search"),
        request.GET.get("author"),
        request.GET.get("sort", "default"),
    )
    return JsonResponse({"news": [article.as_summary() for article in articles]})


@require_GET
def news_detail_api(request, slug):
    article = get_object_or_404(NewsArticle, slug=slug)
    return JsonResponse(article.as_dict())


@require_POST
def increment_views_api(request, slug):
    updated = NewsArticle.increment_views(slug)
    return JsonResponse({"updated": bool(updated)})
