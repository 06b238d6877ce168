from django.urls import path

from . import views

app_name = "materials"

urlpatterns = [
    # Course materials
    path("", views.CourseMaterialListView.as_view(), name="material_list"),
    path("create/", views.CourseMaterialCreateView.as_view(), name="material_create"),
    path("<int:pk>/update/", views.CourseMaterialUpdateView.as_view(), name="material_update"),
    path("<int:pk>/delete/", views.CourseMaterialDeleteView.as_view(), name="material_delete"),
    path("<int:pk>/download/", views.download_material, name="material_download"),

    # GPC materials
    path("gpc/", views.GPCMaterialListView.as_view(), name="gpc_list"),
    path("gpc/create/", views.GPCMaterialCreateView.as_view(), name="gpc_create"),
    path("gpc/<int:pk>/update/", views.GPCMaterialUpdateView.as_view(), name="gpc_update"),
    path("gpc/<int:pk>/delete/", views.GPCMaterialDeleteView.as_view(), name="gpc_delete"),
    path("gpc/<int:pk>/download/", views.download_gpc, name="gpc_download"),

    # JSON endpoints
    path("api/", views.material_list_api, name="material_list_api"),
    path("api/gpc/", views.gpc_list_api, name="gpc_list_api"),
]
