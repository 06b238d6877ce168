from django.conf import settings
from django.conf.urls.static import static
from django.contrib.auth.views import LogoutView
from django.urls import include, path

from apps.corecode.views_auth import DashboardLoginView

urlpatterns = [
    path("login/", DashboardLoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("", include("apps.corecode.urls")),
    path("programs/", include("apps.programs.urls")),
    path("staff/", include("apps.staffs.urls")),
    path("alumni/", include("apps.alumni.urls")),
    path("news/", include("apps.news.urls")),
    path("fees/", include("apps.finance.urls")),
    path("materials/", include("apps.materials.urls")),
    path("admissions/", include("apps.admissions.urls")),
    path("contact-us/", include("apps.contact.urls")),
    path("pg-students/", include("apps.students.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
