from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import TemplateView, UpdateView

from apps.corecode.mixins import MutationMessageMixin

from .forms import ContactInfoForm
from .models import ContactInfo


class ContactInfoView(LoginRequiredMixin, TemplateView):
    template_name = "contact/contact_info.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["contact"] = ContactInfo.current()
        return context


class ContactInfoUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    """Edit the contact record, creating it on first save"""
    model = ContactInfo
    form_class = ContactInfoForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("contact:contact_info")
    success_message = _("Contact information updated successfully")
    error_message = _("Failed to update contact information")
    page_title = _("Update Contact Information")

    def get_object(self, queryset=None):
        return ContactInfo.current() or ContactInfo()


@require_GET
def contact_info_api(request):
    contact = ContactInfo.current()
    return JsonResponse({"contact": contact.as_dict() if contact else None})
