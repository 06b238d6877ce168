from django.urls import path

from . import views

app_name = "news"

urlpatterns = [
    path("", views.NewsListView.as_view(), name="news_list"),
    path("create/", views.NewsCreateView.as_view(), name="news_create"),
    path("<int:pk>/update/", views.NewsUpdateView.as_view(), name="news_update"),
    path("<int:pk>/delete/", views.NewsDeleteView.as_view(), name="news_delete"),

    # JSON endpoints
    path("api/", views.news_list_api, name="news_list_api"),
    path("api/<slug:slug>/", views.news_detail_api, name="news_detail_api"),
    path("api/<slug:slug>/views/", views.increment_views_api, name="increment_views"),

    path("<slug:slug>/", views.NewsDetailView.as_view(), name="news_detail"),
]
