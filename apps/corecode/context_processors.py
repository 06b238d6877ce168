from django.conf import settings


def site_defaults(request):
    return {
        "site_name": settings.SITE_NAME,
    }
