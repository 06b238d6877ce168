from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.urls import reverse, reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET
from django.views.generic import CreateView, ListView, TemplateView, UpdateView

from apps.corecode.mixins import MutationMessageMixin

from .forms import AdditionalFeeForm, ExtraFeeForm, ExtraFeesAccountForm, ProgramFeeForm
from .models import AdditionalFee, ExtraFee, ExtraFeesAccount, FeeCategory, ProgramFee


def get_fees(category):
    if category not in FeeCategory.values:
        raise Http404(_("Unknown fee category"))
    return ProgramFee.objects.filter(category=category).order_by("created_at", "pk")


# Program fee tables

class FeeListView(LoginRequiredMixin, ListView):
    """Fee table for one category, with tabs for the others"""
    model = ProgramFee
    template_name = "finance/fee_list.html"
    context_object_name = "fees"

    def get_category(self):
        return self.request.GET.get("category") or FeeCategory.PGD

    def get_queryset(self):
        return get_fees(self.get_category())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["categories"] = FeeCategory.choices
        context["category"] = self.get_category()
        context["category_label"] = FeeCategory(self.get_category()).label
        return context


class ProgramFeeMixin:
    model = ProgramFee
    form_class = ProgramFeeForm
    template_name = "corecode/object_form.html"

    def get_success_url(self):
        return f"{reverse('finance:fee_list')}?category={self.object.category}"


class ProgramFeeCreateView(LoginRequiredMixin, ProgramFeeMixin, MutationMessageMixin, CreateView):
    success_message = _("Fee added successfully")
    error_message = _("Failed to add fee")

    def dispatch(self, request, *args, **kwargs):
        if kwargs["category"] not in FeeCategory.values:
            raise Http404(_("Unknown fee category"))
        return super().dispatch(request, *args, **kwargs)

    def get_success_url(self):
        if self.object is None:
            return f"{reverse('finance:fee_list')}?category={self.kwargs['category']}"
        return super().get_success_url()

    def perform_save(self, form):
        form.instance.category = self.kwargs["category"]
        return form.save()

    def get_context_data(self, **kwargs):
        kwargs.setdefault(
            "page_title",
            _("Add %(category)s Fee") % {"category": FeeCategory(self.kwargs["category"]).label},
        )
        return super().get_context_data(**kwargs)


class ProgramFeeUpdateView(LoginRequiredMixin, ProgramFeeMixin, MutationMessageMixin, UpdateView):
    success_message = _("Fee updated successfully")
    error_message = _("Failed to update fee")
    page_title = _("Update Fee")


# Additional fees

class AdditionalFeeListView(LoginRequiredMixin, ListView):
    model = AdditionalFee
    template_name = "finance/additional_fee_list.html"
    context_object_name = "fees"


class AdditionalFeeCreateView(LoginRequiredMixin, MutationMessageMixin, CreateView):
    model = AdditionalFee
    form_class = AdditionalFeeForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("finance:additional_fee_list")
    success_message = _("Additional fee added successfully")
    error_message = _("Failed to add additional fee")
    page_title = _("Add Additional Fee")


class AdditionalFeeUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = AdditionalFee
    form_class = AdditionalFeeForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("finance:additional_fee_list")
    success_message = _("Additional fee updated successfully")
    error_message = _("Failed to update additional fee")
    page_title = _("Update Additional Fee")


# Extra fees

class ExtraFeesView(LoginRequiredMixin, TemplateView):
    template_name = "finance/extra_fees.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["account"] = ExtraFeesAccount.objects.order_by("pk").first()
        context["extra_fees"] = ExtraFee.objects.order_by("pk")
        return context


class ExtraFeesAccountUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = ExtraFeesAccount
    form_class = ExtraFeesAccountForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("finance:extra_fees")
    success_message = _("Account details updated successfully")
    error_message = _("Failed to update account details")
    page_title = _("Update Extra Fees Account")

    def get_object(self, queryset=None):
        return ExtraFeesAccount.get_solo()


class ExtraFeeUpdateView(LoginRequiredMixin, MutationMessageMixin, UpdateView):
    model = ExtraFee
    form_class = ExtraFeeForm
    template_name = "corecode/object_form.html"
    success_url = reverse_lazy("finance:extra_fees")
    success_message = _("Fee updated successfully")
    error_message = _("Failed to update fee")
    page_title = _("Update Extra Fee")


# JSON endpoints

@require_GET
def fee_list_api(request, category):
    return JsonResponse({"fees": [fee.as_dict() for fee in get_fees(category)]})


@require_GET
def additional_fee_list_api(request):
    fees = AdditionalFee.objects.order_by("pk")
    return JsonResponse({"fees": [fee.as_dict() for fee in fees]})


@require_GET
def extra_fees_api(request):
    account = ExtraFeesAccount.objects.order_by("pk").first()
    return JsonResponse({
        "account": account.as_dict() if account else None,
        "fees": [fee.as_dict() for fee in ExtraFee.objects.order_by("pk")],
    })
