import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET, require_POST
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, MutationMessageMixin

from .forms import AdmissionRequirementForm, AlternativeAdmissionRouteForm, HowToApplyForm
from .models import AdmissionRequirement, AlternativeAdmissionRoute, HowToApply
from .services import RequirementError, RequirementService

logger = logging.getLogger(__name__)


# Admission requirements

class RequirementListView(LoginRequiredMixin, ListView):
    model = AdmissionRequirement
    template_name = "admissions/requirement_list.html"
    context_object_name = "requirements"


class RequirementUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = AdmissionRequirement
    form_class = AdmissionRequirementForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("admissions:requirement_list")
    success_message = _("Requirements updated successfully")
    error_message = _("Failed to update requirements")
    page_title = _("Update Requirements")

    def perform_save(self, form):
        return RequirementService.update_requirements(
            self.object.pk,
            form.cleaned_data["title"],
            form.cleaned_data["requirements"],
        )


class RequirementDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = AdmissionRequirement
    success_url = reverse_lazy("admissions:requirement_list")
    success_message = _("Requirement deleted successfully")
    error_message = _("Failed to delete requirement")


@require_POST
def remove_requirement_line(request, pk, index):
    """Delete one line of a requirement list"""
    try:
        removed = RequirementService.remove_requirement_line(pk, index)
    except RequirementError as e:
        logger.warning("Could not remove line %s of requirements %s: %s", index, pk, e)
        messages.error(request, str(e))
    else:
        messages.success(request, _("Removed: %(line)s") % {"line": removed})
    return redirect("admissions:requirement_list")


# Alternative admission routes

class RouteListView(LoginRequiredMixin, ListView):
    model = AlternativeAdmissionRoute
    template_name = "admissions/route_list.html"
    context_object_name = "routes"


class RouteCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = AlternativeAdmissionRoute
    form_class = AlternativeAdmissionRouteForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("admissions:route_list")
    success_message = _("Admission route added successfully")
    error_message = _("Failed to add admission route")
    page_title = _("Add Alternative Admission Route")


class RouteUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = AlternativeAdmissionRoute
    form_class = AlternativeAdmissionRouteForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("admissions:route_list")
    success_message = _("Admission route updated successfully")
    error_message = _("Failed to update admission route")
    page_title = _("Update Alternative Admission Route")


class RouteDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = AlternativeAdmissionRoute
    success_url = reverse_lazy("admissions:route_list")
    success_message = _("Admission route removed")
    error_message = _("Failed to remove admission route")


# How to apply

class HowToApplyListView(LoginRequiredMixin, ListView):
    model = HowToApply
    template_name = "admissions/how_to_apply_list.html"
    context_object_name = "steps"


class HowToApplyUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = HowToApply
    form_class = HowToApplyForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("admissions:how_to_apply_list")
    success_message = _("How to apply updated successfully")
    error_message = _("Failed to update how to apply")
    page_title = _("Update How to Apply")


# JSON endpoints

@require_GET
def admissions_api(request):
    return JsonResponse({
        "requirements": [r.as_dict() for r in AdmissionRequirement.objects.order_by("pk")],
        "alternative_routes": [r.as_dict() for r in AlternativeAdmissionRoute.objects.order_by("pk")],
        "how_to_apply": [h.as_dict() for h in HowToApply.objects.order_by("pk")],
    })
