from django.urls import path

from . import views

app_name = "alumni"

urlpatterns = [
    path("", views.AlumniListView.as_view(), name="alumni_list"),
    path("create/", views.AlumnusCreateView.as_view(), name="alumni_create"),
    path("<int:pk>/update/", views.AlumnusUpdateView.as_view(), name="alumni_update"),
    path("<int:pk>/delete/", views.AlumnusDeleteView.as_view(), name="alumni_delete"),
    path("api/", views.alumni_list_api, name="alumni_list_api"),
]
