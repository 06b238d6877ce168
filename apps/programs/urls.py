from django.urls import path

from . import views

app_name = "programs"

urlpatterns = [
    # Program URLs
    path("", views.ProgramListView.as_view(), name="program_list"),
    path("create/", views.ProgramCreateView.as_view(), name="program_create"),
    path("<int:pk>/update/", views.ProgramUpdateView.as_view(), name="program_update"),
    path("<int:pk>/delete/", views.ProgramDeleteView.as_view(), name="program_delete"),

    # Course URLs
    path("courses/", views.CourseListView.as_view(), name="course_list"),
    path("courses/create/", views.CourseCreateView.as_view(), name="course_create"),
    path("courses/<int:pk>/update/", views.CourseUpdateView.as_view(), name="course_update"),
    path("courses/<int:pk>/delete/", views.CourseDeleteView.as_view(), name="course_delete"),
    path("courses/<slug:slug>/", views.CourseDetailView.as_view(), name="course_detail"),

    # JSON endpoints
    path("api/", views.program_list_api, name="program_list_api"),
    path("api/courses/", views.course_list_api, name="course_list_api"),
    path("api/courses/<slug:slug>/", views.course_detail_api, name="course_detail_api"),
    path("api/<slug:slug>/", views.program_detail_api, name="program_detail_api"),

    path("<slug:slug>/", views.ProgramDetailView.as_view(), name="program_detail"),
]
