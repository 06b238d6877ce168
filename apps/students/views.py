from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, MutationMessageMixin
from apps.corecode.models import Faculty, ProgramType
from apps.corecode.utils import apply_choice_filter

from .forms import PGStudentForm
from .models import PGStudent


def get_students(faculty=None, course_type=None):
    """Students sorted by name, ignoring case"""
    queryset = apply_choice_filter(PGStudent.objects.all(), "faculty", faculty)
    return apply_choice_filter(queryset, "type", course_type)


class StudentListView(LoginRequiredMixin, ListView):
    model = PGStudent
    template_name = "students/student_list.html"
    context_object_name = "students"

    def get_queryset(self):
        return get_students(
            self.request.GET.get("faculty"),
            self.request.GET.get("type"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["stats"] = PGStudent.statistics()
        context["faculties"] = Faculty.choices
        context["course_types"] = ProgramType.choices
        context["selected_faculty"] = self.request.GET.get("faculty", "all")
        context["selected_type"] = self.request.GET.get("type", "all")
        return context


class StudentCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = PGStudent
    form_class = PGStudentForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("students:student_list")
    success_message = _("%(name)s successfully added.")
    error_message = _("Failed to add student")
    page_title = _("Add Student")


class StudentUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = PGStudent
    form_class = PGStudentForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("students:student_list")
    success_message = _("Record successfully updated.")
    error_message = _("Failed to update student")
    page_title = _("Update Student")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Student not found"))


class StudentDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = PGStudent
    success_url = reverse_lazy("students:student_list")
    success_message = _("Student deleted successfully")
    error_message = _("Failed to delete student")


# JSON endpoints

@require_GET
def student_list_api(request):
    students = get_students(request.GET.get("faculty"), request.GET.get("type"))
    return JsonResponse({"students": [student.as_dict() for student in students]})


@require_GET
def student_by_regno_api(request, regno):
    student = get_object_or_404(PGStudent, regno=regno)
    return JsonResponse(student.as_dict())


@require_GET
def statistics_api(request):
    return JsonResponse(PGStudent.statistics())
