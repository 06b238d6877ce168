from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, MutationMessageMixin

from .forms import StaffForm
from .models import Staff


def get_staff():
    return Staff.objects.select_related("image")


class StaffListView(LoginRequiredMixin, ListView):
    model = Staff
    template_name = "staffs/staff_list.html"
    context_object_name = "staff_members"

    def get_queryset(self):
        return get_staff()


class StaffCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = Staff
    form_class = StaffForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("staffs:staff_list")
    success_message = _("Staff member created successfully!")
    error_message = _("Failed to create staff member")
    page_title = _("Add Staff")


class StaffUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Staff
    form_class = StaffForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("staffs:staff_list")
    success_message = _("Staff member updated successfully!")
    error_message = _("Failed to update staff member")
    page_title = _("Update Staff")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Staff member not found"))


class StaffDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = Staff
    success_url = reverse_lazy("staffs:staff_list")
    success_message = _("Staff member deleted successfully")
    error_message = _("Failed to delete staff member")


@require_GET
def staff_list_api(request):
    return JsonResponse({"staff": [staff.as_dict() for staff in get_staff()]})
