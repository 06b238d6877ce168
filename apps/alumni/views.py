from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, DeleteView, ListView, UpdateView

from apps.corecode.mixins import DeleteMessageMixin, FilterQueryMixin, MutationMessageMixin
from apps.corecode.utils import apply_choice_filter, unique_values

from .forms import AlumnusForm
from .models import Alumnus


def filter_alumni(search=None, degree=None, year=None):
    queryset = Alumnus.objects.all()
    if search:
        queryset = queryset.filter(name__icontains=search.strip())
    queryset = apply_choice_filter(queryset, "degree", degree)
    return apply_choice_filter(queryset, "graduated_on", year)


class AlumniListView(LoginRequiredMixin, FilterQueryMixin, ListView):
    """Alumni with name search, degree and year filters"""
    model = Alumnus
    template_name = "alumni/alumni_list.html"
    context_object_name = "alumni"
    paginate_by = 9

    def get_queryset(self):
        return filter_alumni(
            self.request.GET.get("search"),
            self.request.GET.get("degree"),
            self.request.GET.get("year"),
        )

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        everyone = Alumnus.objects.values_list("graduated_on", "degree")
        context["years"] = unique_values((year for year, _degree in everyone), reverse=True)
        context["degrees"] = unique_values(degree for _year, degree in everyone)
        context["search"] = self.request.GET.get("search", "")
        context["selected_degree"] = self.request.GET.get("degree", "all")
        context["selected_year"] = self.request.GET.get("year", "all")
        return context


class AlumnusCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = Alumnus
    form_class = AlumnusForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("alumni:alumni_list")
    success_message = _("Alumnus added successfully")
    error_message = _("Failed to add alumnus")
    page_title = _("Add Alumni")


class AlumnusUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = Alumnus
    form_class = AlumnusForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("alumni:alumni_list")
    success_message = _("Alumnus updated successfully")
    error_message = _("Failed to update Alumnus")
    page_title = _("Update Alumnus")

    def get_object(self, queryset=None):
        try:
            return super().get_object(queryset)
        except Http404:
            raise Http404(_("Alumnus not found"))


class AlumnusDeleteView(LoginRequiredMixin, DeleteMessageMixin, DeleteView):
    model = Alumnus
    success_url = reverse_lazy("alumni:alumni_list")
    success_message = _("Alumnus deleted successfully")
    error_message = _("Failed to delete Alumnus")


@require_GET
def alumni_list_api(request):
    alumni = filter_alumni(
        request.GET.get("search"),
        request.GET.get("degree"),
        request.GET.get("year"),
    )
    return JsonResponse({"alumni": [alumnus.as_dict() for alumnus in alumni]})
