from django.urls import path

from . import views

app_name = "admissions"

urlpatterns = [
    # Requirements
    path("requirements/", views.RequirementListView.as_view(), name="requirement_list"),
    path("requirements/<int:pk>/update/", views.RequirementUpdateView.as_view(), name="requirement_update"),
    path("requirements/<int:pk>/delete/", views.RequirementDeleteView.as_view(), name="requirement_delete"),
    path(
        "requirements/<int:pk>/lines/<int:index>/remove/",
        views.remove_requirement_line,
        name="requirement_line_remove",
    ),

    # Alternative routes
    path("routes/", views.RouteListView.as_view(), name="route_list"),
    path("routes/create/", views.RouteCreateView.as_view(), name="route_create"),
    path("routes/<int:pk>/update/", views.RouteUpdateView.as_view(), name="route_update"),
    path("routes/<int:pk>/delete/", views.RouteDeleteView.as_view(), name="route_delete"),

    # How to apply
    path("how-to-apply/", views.HowToApplyListView.as_view(), name="how_to_apply_list"),
    path("how-to-apply/<int:pk>/update/", views.HowToApplyUpdateView.as_view(), name="how_to_apply_update"),

    path("api/", views.admissions_api, name="admissions_api"),
]
