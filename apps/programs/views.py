from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, MutationMessageMixin
from apps.corecode.models import Faculty, ProgramType
from apps.corecode.utils import apply_choice_filter

from .forms import CourseForm, ProgramForm
from .models import Course, Program


def search_programs(search=None):
    queryset = Program.objects.all()
    if search:
        queryset = queryset.filter(program_short_name__icontains=search.strip())
    return queryset


def filter_courses(course_type=None, faculty=None):
    queryset = apply_choice_filter(Course.objects.all(), "type", course_type)
    return apply_choice_filter(queryset, "faculty", faculty)


# Programs

class ProgramListView(LoginRequiredMixin, ListView):
    model = Program
    template_name = "programs/program_list.html"
    context_object_name = "programs"

    def get_queryset(self):
        return search_programs(self.request.GET.get("search"))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["search"] = self.request.GET.get("search", "")
        return context


class ProgramDetailView(LoginRequiredMixin, DetailView):
    model = Program
    template_name = "programs/program_detail.html"
    context_object_name = "program"


class ProgramCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = Program
    form_class = ProgramForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("programs:program_list")
    success_message = _("Program added successfully!")
    error_message = _("Failed to add program")
    page_title = _("Add Program")


class ProgramUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Program
    form_class = ProgramForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("programs:program_list")
    success_message = _("Program updated successfully!")
    error_message = _("Failed to update program")
    page_title = _("Update Program")


class ProgramDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = Program
    success_url = reverse_lazy("programs:program_list")
    success_message = _("Program deleted successfully")
    error_message = _("Failed to delete program")


# Courses

class CourseListView(LoginRequiredMixin, ListView):
    model = Course
    template_name = "programs/course_list.html"
    context_object_name = "courses"

    def get_queryset(self):
        return filter_courses(
            self.request.GET.get("type"),
            self.request.GET.get("faculty"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["course_types"] = ProgramType.choices
        context["faculties"] = Faculty.choices
        context["selected_type"] = self.request.GET.get("type", "all")
        context["selected_faculty"] = self.request.GET.get("faculty", "all")
        return context


class CourseDetailView(LoginRequiredMixin, DetailView):
    model = Course
    template_name = "programs/course_detail.html"
    context_object_name = "course"


class CourseCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = Course
    form_class = CourseForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("programs:course_list")
    success_message = _("Course added successfully!")
    error_message = _("Failed to add course")
    page_title = _("Add Course")

    def get_initial(self):
        initial = super().get_initial()
        # Pre-select the type when coming from a filtered list
        course_type = self.request.GET.get("type")
        if course_type in ProgramType.values:
            initial["type"] = course_type
        return initial


class CourseUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Course
    form_class = CourseForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("programs:course_list")
    success_message = _("Course updated successfully!")
    error_message = _("Failed to update course")
    page_title = _("Update Course")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Course not found"))


class CourseDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = Course
    success_url = reverse_lazy("programs:course_list")
    success_message = _("Course deleted successfully")
    error_message = _("Failed to delete course")


# JSON endpoints

@require_GET
def program_list_api(request):
    programs = search_programs(request.GET.get("search"))
    return JsonResponse({"programs": [program.as_summary() for program in programs]})


@require_GET
def program_detail_api(request, slug):
    program = get_object_or_404(Program, slug=slug)
    return JsonResponse(program.as_dict())


@require_GET
def course_list_api(request):
    courses = filter_courses(request.GET.get("type"), request.GET.get("faculty"))
    return JsonResponse({"courses": [course.as_dict() for course in courses]})


@require_GET
def course_detail_api(request, slug):
    course = get_object_or_404(Course, slug=slug)
    return JsonResponse(course.as_dict())
