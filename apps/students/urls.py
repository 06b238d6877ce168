from django.urls import path

from . import views

app_name = "students"

urlpatterns = [
    path("", views.StudentListView.as_view(), name="student_list"),
    path("create/", views.StudentCreateView.as_view(), name="student_create"),
    path("<int:pk>/update/", views.StudentUpdateView.as_view(), name="student_update"),
    path("<int:pk>/delete/", views.StudentDeleteView.as_view(), name="student_delete"),

    # JSON endpoints
    path("api/", views.student_list_api, name="student_list_api"),
    path("api/statistics/", views.statistics_api, name="statistics_api"),
    path("api/regno/<path:regno>/", views.student_by_regno_api, name="student_by_regno_api"),
]
