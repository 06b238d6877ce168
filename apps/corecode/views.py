import logging
import os

from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.urls import reverse_lazy
from django.utils.text import get_valid_filename
from django.utils.translation import gettext_lazy as _
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from django.views.generic import TemplateView, UpdateView

from apps.alumni.models import Alumnus
from apps.materials.models import CourseMaterial, GPCMaterial
from apps.news.models import NewsArticle
from apps.programs.models import Course, Program
from apps.staffs.models import Staff
from apps.students.models import PGStudent

from .forms import MissionForm, VisionForm
from .mixins import MutationMessageMixin
from .models import Hero, Mission, Vision
from .services import get_all_content, get_hero
from .storage import (
    UploadConflict,
    UploadTokenError,
    generate_upload_url,
    get_file_url,
    read_upload_token,
    store_bytes,
)

logger = logging.getLogger(__name__)


class HomeView(LoginRequiredMixin, TemplateView):
    template_name = "corecode/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["stats"] = [
            {"label": _("Programs"), "count": Program.objects.count()},
            {"label": _("Courses"), "count": Course.objects.count()},
            {"label": _("Staff"), "count": Staff.objects.count()},
            {"label": _("Alumni"), "count": Alumnus.objects.count()},
            {"label": _("News"), "count": NewsArticle.objects.count()},
            {
                "label": _("Materials"),
                "count": CourseMaterial.objects.count() + GPCMaterial.objects.count(),
            },
            {"label": _("PG Students"), "count": PGStudent.objects.count()},
        ]
        return context


class AboutView(LoginRequiredMixin, TemplateView):
    template_name = "corecode/about.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["heroes"] = Hero.objects.order_by("pk")
        context["visions"] = Vision.objects.order_by("pk")
        context["missions"] = Mission.objects.order_by("pk")
        return context


class VisionUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Vision
    form_class = VisionForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("corecode:about")
    success_message = _("Vision updated successfully!")
    error_message = _("Failed to update vision")
    page_title = _("Update Vision")


class MissionUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Mission
    form_class = MissionForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("corecode:about")
    success_message = _("Mission updated successfully!")
    error_message = _("Failed to update mission")
    page_title = _("Update Mission")


# JSON endpoints

@require_POST
def upload_url_api(request):
    """Hand the browser a one-time URL to POST a file to"""
    return JsonResponse({"uploadUrl": generate_upload_url(request)})


@csrf_exempt
@require_POST
def storage_upload(request, token):
    """Receive the raw bytes for a signed upload URL"""
    try:
        storage_id = read_upload_token(token)
    except UploadTokenError as e:
        logger.warning("Rejected upload: %s", e)
        return JsonResponse({"error": str(e)}, status=403)

    filename = request.headers.get("X-File-Name")
    if filename:
        filename = get_valid_filename(os.path.basename(filename))

    try:
        stored = store_bytes(
            request.body,
            request.content_type,
            storage_id=storage_id,
            filename=filename,
        )
    except UploadConflict as e:
        return JsonResponse({"error": str(e)}, status=409)
    except ValidationError as e:
        return JsonResponse({"error": " ".join(e.messages)}, status=400)

    return JsonResponse({"storageId": str(stored.pk)})


@require_GET
def file_url_api(request, storage_id):
    url = get_file_url(storage_id)
    if url is None:
        return JsonResponse({"error": "File not found"}, status=404)
    return JsonResponse({"url": url})


@require_GET
def hero_api(request):
    return JsonResponse({"hero": get_hero()})


@require_GET
def content_api(request):
    return JsonResponse(get_all_content())
