from datetime import timedelta

from django.urls import reverse
from django.utils import timezone

from apps.corecode.testing import DashboardTestCase, make_image

from .models import NewsArticle
from .views import LATEST_LIMIT


def news_data(**overrides):
    data = {
        "title": "Matriculation Ceremony 2024",
        "author": "Registry",
        "content": "<p>New students were welcomed to the school.</p>",
        "tags": "events, students ,",
    }
    data.update(overrides)
    return data


class NewsFormTest(DashboardTestCase):

    def test_create_sets_slug_tags_and_excerpt(self):
        response = self.client.post(reverse("news:news_create"), news_data(image=make_image()))
        self.assertRedirects(response, reverse("news:news_list"))

        article = NewsArticle.objects.get()
        self.assertEqual(article.slug, "matriculation-ceremony-2024")
        self.assertEqual(article.tags, ["events", "students"])
        self.assertEqual(article.excerpt, "New students were welcomed to the school.")
        self.assertEqual(article.cover_image, article.storage.url)
        self.assertIsNone(article.updated_on)

    def test_duplicate_title_is_rejected(self):
        self.client.post(reverse("news:news_create"), news_data())
        response = self.client.post(reverse("news:news_create"), news_data())
        self.assertIn("A news item with this title already exists", response.context["form"].errors["title"])
        self.assertEqual(NewsArticle.objects.count(), 1)

    def test_title_matching_a_fixed_route_is_rejected(self):
        for title in ["Create", "API"]:
            with self.subTest(title=title):
                response = self.client.post(reverse("news:news_create"), news_data(title=title))
                self.assertIn("This title is reserved, please choose another", response.context["form"].errors["title"])
        self.assertFalse(NewsArticle.objects.exists())

    def test_empty_content_is_rejected(self):
        response = self.client.post(reverse("news:news_create"), news_data(content="<script>x()</script>"))
        self.assertIn("Content is required", response.context["form"].errors["content"])

    def test_long_title_slug_is_truncated(self):
        self.client.post(reverse("news:news_create"), news_data(title="Word " * 30))
        self.assertLessEqual(len(NewsArticle.objects.get().slug), 60)

    def test_update_keeps_slug_and_stamps_updated_on(self):
        self.client.post(reverse("news:news_create"), news_data())
        article = NewsArticle.objects.get()

        self.client.post(
            reverse("news:news_update", args=[article.pk]),
            news_data(title="Matriculation Ceremony Held", content="<p>Updated text.</p>"),
        )
        article.refresh_from_db()
        self.assertEqual(article.title, "Matriculation Ceremony Held")
        self.assertEqual(article.slug, "matriculation-ceremony-2024")
        self.assertEqual(article.excerpt, "Updated text.")
        self.assertIsNotNone(article.updated_on)


class NewsListTest(DashboardTestCase):

    def make_article(self, title, author="Registry", views=0, days_ago=0):
        return NewsArticle.objects.create(
            title=title,
            slug=title.lower().replace(" ", "-"),
            content="<p>Body</p>",
            author=author,
            views=views,
            publication_date=timezone.now() - timedelta(days=days_ago),
        )

    def test_newest_first_with_pages_of_twelve(self):
        for i in range(15):
            self.make_article(f"Story {i}", days_ago=i)

        first = self.client.get(reverse("news:news_list"))
        second = self.client.get(reverse("news:news_list"), {"page": 2})
        first_titles = [a.title for a in first.context["articles"]]
        second_titles = [a.title for a in second.context["articles"]]

        self.assertEqual(len(first_titles), 12)
        self.assertEqual(len(second_titles), 3)
        self.assertEqual(first_titles[0], "Story 0")
        self.assertFalse(set(first_titles) & set(second_titles))

    def test_list_only_covers_the_latest_hundred(self):
        now = timezone.now()
        NewsArticle.objects.bulk_create([
            NewsArticle(
                title=f"Story {i}",
                slug=f"story-{i}",
                content="<p>Body</p>",
                author="Registry",
                publication_date=now - timedelta(days=i),
            )
            for i in range(LATEST_LIMIT + 5)
        ])

        response = self.client.get(reverse("news:news_list"))
        self.assertEqual(response.context["paginator"].count, LATEST_LIMIT)

        response = self.client.get(reverse("news:news_list"), {"search": "Story 104"})
        self.assertEqual(list(response.context["articles"]), [])
        response = self.client.get(reverse("news:news_list"), {"search": "Story 99"})
        self.assertEqual([a.title for a in response.context["articles"]], ["Story 99"])

    def test_sort_by_views_and_filter_by_author(self):
        self.make_article("Popular", author="Dean", views=50)
        self.make_article("Quiet", author="Registry", views=1)
        self.make_article("Middle", author="Dean", views=10)

        response = self.client.get(reverse("news:news_list"), {"sort": "views_desc"})
        self.assertEqual([a.title for a in response.context["articles"]], ["Popular", "Middle", "Quiet"])

        response = self.client.get(reverse("news:news_list"), {"author": "Dean", "sort": "views_asc"})
        self.assertEqual([a.title for a in response.context["articles"]], ["Middle", "Popular"])
        self.assertEqual(response.context["authors"], ["Dean", "Registry"])

    def test_increment_views(self):
        article = self.make_article("Read Me")
        response = self.client.post(reverse("news:increment_views", args=[article.slug]))
        self.assertEqual(response.json(), {"updated": True})
        article.refresh_from_db()
        self.assertEqual(article.views, 1)

        response = self.client.post(reverse("news:increment_views", args=["no-such-story"]))
        self.assertEqual(response.json(), {"updated": False})

    def test_detail_and_api(self):
        article = self.make_article("Read Me")
        response = self.client.get(article.get_absolute_url())
        self.assertEqual(response.context["article"], article)

        data = self.client.get(reverse("news:news_detail_api", args=[article.slug])).json()
        self.assertEqual(data["title"], "Read Me")
        self.assertEqual(data["excerpt"], "Body")
