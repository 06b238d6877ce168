from django.urls import path

from . import views

app_name = "contact"

urlpatterns = [
    path("", views.ContactInfoView.as_view(), name="contact_info"),
    path("update/", views.ContactInfoUpdateView.as_view(), name="contact_update"),
    path("api/", views.contact_info_api, name="contact_info_api"),
]
