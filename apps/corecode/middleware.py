import logging

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.http import JsonResponse
from django.shortcuts import render

from .roles import is_dashboard_admin

logger = logging.getLogger(__name__)


class AdminRoleMiddleware:
    """
    Gate the whole dashboard on a single role claim.

    Anonymous visitors are sent to the login page; signed-in users without
    the admin role get the access denied page instead of any content.
    """

    ALLOWED_PATTERNS = [
        "/login/",
        "/logout/",
        # signed upload URLs carry their own credential
        "/storage/upload/",
    ]

    def __init__(self, get_response):
        self.get_response = get_response
        self.allowed = list(self.ALLOWED_PATTERNS)
        for prefix in (settings.STATIC_URL, settings.MEDIA_URL):
            if prefix:
                self.allowed.append(prefix)

    def __call__(self, request):
        path = request.path

        for allowed in self.allowed:
            if path.startswith(allowed):
                return self.get_response(request)

        is_api = "/api/" in path

        if not request.user.is_authenticated:
            if is_api:
                return JsonResponse({"error": "Authentication required"}, status=401)
            return redirect_to_login(request.get_full_path())

        if not is_dashboard_admin(request.user):
            logger.warning("Access denied for %s on %s", request.user, path)
            if is_api:
                return JsonResponse({"error": "Access denied"}, status=403)
            return render(request, "corecode/access_denied.html", status=403)

        return self.get_response(request)
