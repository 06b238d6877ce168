from django.urls import path

from . import views

app_name = "corecode"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("about-us/", views.AboutView.as_view(), name="about"),
    path("about-us/vision/<int:pk>/update/", views.VisionUpdateView.as_view(), name="vision_update"),
    path("about-us/mission/<int:pk>/update/", views.MissionUpdateView.as_view(), name="mission_update"),

    # Blob storage
    path("api/storage/upload-url/", views.upload_url_api, name="upload_url"),
    path("storage/upload/<str:token>/", views.storage_upload, name="storage_upload"),
    path("api/storage/<uuid:storage_id>/", views.file_url_api, name="file_url"),

    # Site content
    path("api/hero/", views.hero_api, name="hero_api"),
    path("api/content/", views.content_api, name="content_api"),
]
