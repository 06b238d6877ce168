from django.urls import path

from . import views

app_name = "finance"

urlpatterns = [
    # Additional fees
    path("additional/", views.AdditionalFeeListView.as_view(), name="additional_fee_list"),
    path("additional/create/", views.AdditionalFeeCreateView.as_view(), name="additional_fee_create"),
    path("additional/<int:pk>/update/", views.AdditionalFeeUpdateView.as_view(), name="additional_fee_update"),

    # Extra fees
    path("extra/", views.ExtraFeesView.as_view(), name="extra_fees"),
    path("extra/account/update/", views.ExtraFeesAccountUpdateView.as_view(), name="extra_fees_account_update"),
    path("extra/<int:pk>/update/", views.ExtraFeeUpdateView.as_view(), name="extra_fee_update"),

    # JSON endpoints
    path("api/additional/", views.additional_fee_list_api, name="additional_fee_list_api"),
    path("api/extra/", views.extra_fees_api, name="extra_fees_api"),
    path("api/<str:category>/", views.fee_list_api, name="fee_list_api"),

    # Program fee tables
    path("", views.FeeListView.as_view(), name="fee_list"),
    path("<int:pk>/update/", views.ProgramFeeUpdateView.as_view(), name="fee_update"),
    path("<str:category>/create/", views.ProgramFeeCreateView.as_view(), name="fee_create"),
]
