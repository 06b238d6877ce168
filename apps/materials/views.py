import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, HttpResponseRedirect, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, MutationMessageMixin
from apps.corecode.models import Faculty, ProgramType, Semester
from apps.corecode.utils import apply_choice_filter

from .forms import CourseMaterialForm, GPCMaterialForm
from .models import CourseMaterial, GPCMaterial

logger = logging.getLogger(__name__)


def filter_materials(model, faculty=None, course_type=None):
    queryset = model.objects.select_related("file")
    queryset = apply_choice_filter(queryset, "faculty", faculty)
    return apply_choice_filter(queryset, "type", course_type)


class MaterialListView(LoginRequiredMixin, ListView):
    template_name = "materials/material_list.html"
    context_object_name = "materials"
    page_title = _("Course Materials")
    url_prefix = "materials:material"

    def get_queryset(self):
        return filter_materials(
            self.model,
            self.request.GET.get("faculty"),
            self.request.GET.get("type"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = self.page_title
        context["url_prefix"] = self.url_prefix
        context["faculties"] = Faculty.choices
        context["course_types"] = ProgramType.choices
        context["selected_faculty"] = self.request.GET.get("faculty", "all")
        context["selected_type"] = self.request.GET.get("type", "all")
        return context


class CourseMaterialListView(MaterialListView):
    model = CourseMaterial


class GPCMaterialListView(MaterialListView):
    """GPC materials, listed per semester"""
    model = GPCMaterial
    template_name = "materials/gpc_list.html"
    page_title = _("GPC Materials")
    url_prefix = "materials:gpc"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        materials = context["materials"]
        context["semesters"] = [
            (label, [m for m in materials if m.semester == value])
            for value, label in Semester.choices
        ]
        return context


class CourseMaterialCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = CourseMaterial
    form_class = CourseMaterialForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("materials:material_list")
    success_message = _("Course material added successfully")
    error_message = _("Failed to add course material")
    page_title = _("Add Course Material")


class CourseMaterialUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = CourseMaterial
    form_class = CourseMaterialForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("materials:material_list")
    success_message = _("Course material updated successfully")
    error_message = _("Failed to update course material")
    page_title = _("Update Course Material")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Document not found"))


class CourseMaterialDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = CourseMaterial
    success_url = reverse_lazy("materials:material_list")
    success_message = _("Course material deleted successfully")
    error_message = _("Failed to delete course material")


class GPCMaterialCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = GPCMaterial
    form_class = GPCMaterialForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("materials:gpc_list")
    success_message = _("GPC material added successfully")
    error_message = _("Failed to add GPC material")
    page_title = _("Add GPC Material")


class GPCMaterialUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = GPCMaterial
    form_class = GPCMaterialForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("materials:gpc_list")
    success_message = _("GPC material updated successfully")
    error_message = _("Failed to update GPC material")
    page_title = _("Update GPC Material")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Document not found"))


class GPCMaterialDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = GPCMaterial
    success_url = reverse_lazy("materials:gpc_list")
    success_message = _("GPC material deleted successfully")
    error_message = _("Failed to delete GPC material")


def _download(model, pk):
    material = get_object_or_404(model.objects.select_related("file"), pk=pk)
    url = material.file_url
    if not url:
        logger.warning("Download of %s %s failed: blob missing", model.__name__, pk)
        raise Http404(_("File not found"))
    material.record_download()
    return HttpResponseRedirect(url)


@require_GET
def download_material(request, pk):
    return _download(CourseMaterial, pk)


@require_GET
def download_gpc(request, pk):
    return _download(GPCMaterial, pk)


# JSON endpoints

@require_GET
def material_list_api(request):
    materials = filter_materials(CourseMaterial, request.GET.get("faculty"), request.GET.get("type"))
    return JsonResponse({"materials": [material.as_dict() for material in materials]})


@require_GET
def gpc_list_api(request):
    materials = filter_materials(GPCMaterial, request.GET.get("faculty"), request.GET.get("type"))
    by_semester = {value: [] for value in Semester.values}
    for material in materials:
        by_semester[material.semester].append(material.as_dict())
    return JsonResponse({
        "first_semester": by_semester[Semester.FIRST],
        "second_semester": by_semester[Semester.SECOND],
    })
