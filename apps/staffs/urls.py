from django.urls import path

from . import views

app_name = "staffs"

urlpatterns = [
    path("", views.StaffListView.as_view(), name="staff_list"),
    path("create/", views.StaffCreateView.as_view(), name="staff_create"),
    path("<int:pk>/update/", views.StaffUpdateView.as_view(), name="staff_update"),
    path("<int:pk>/delete/", views.StaffDeleteView.as_view(), name="staff_delete"),
    path("api/", views.staff_list_api, name="staff_list_api"),
]
