import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.http import HttpResponseRedirect
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class MutationMessageMixin:
    """
    Run a create/update form save inside a transaction and report the
    outcome as a toast.

    A failed save rolls back, is logged, and re-renders the form with the
    submitted values so nothing already stored is touched.
    """

    success_message = _("Saved successfully.")
    error_message = _("Operation failed.")
    invalid_message = _("Please correct the errors below.")
    page_title = ""

    def perform_save(self, form):
        return form.save()

    def get_success_message(self, cleaned_data):
        return self.success_message % cleaned_data

    def form_valid(self, form):
        try:
            with transaction.atomic():
                self.object = self.perform_save(form)
        except ValidationError as e:
            logger.error("%s rejected: %s", self.__class__.__name__, "; ".join(e.messages))
            self.discard_new_upload(form)
            form.add_error(None, e.messages)
            messages.error(self.request, self.error_message)
            return super().form_invalid(form)
        except DatabaseError:
            logger.exception("%s failed", self.__class__.__name__)
            self.discard_new_upload(form)
            messages.error(self.request, self.error_message)
            return super().form_invalid(form)

        messages.success(self.request, self.get_success_message(form.cleaned_data))
        return HttpResponseRedirect(self.get_success_url())

    def form_invalid(self, form):
        messages.error(self.request, self.invalid_message)
        return super().form_invalid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault("page_title", self.page_title)
        context.setdefault("cancel_url", self.get_cancel_url())
        return context

    def get_cancel_url(self):
        # Create pages have no object to format the success URL with
        if getattr(self, "object", None) is None and self.success_url:
            return str(self.success_url)
        return self.get_success_url()

    def discard_new_upload(self, form):
        """Remove bytes written for an upload whose row was rolled back"""
        stored = getattr(form, "new_stored_file", None)
        if stored is None or not stored.file.name:
            return
        stored.file.storage.delete(stored.file.name)
        logger.info("Discarded upload %s after rollback", stored.file.name)
        form.new_stored_file = None


class DeleteMessageMixin:
    """Delete-on-confirm with a toast either way"""

    success_message = _("Deleted successfully.")
    error_message = _("Failed to delete.")
    template_name = "corecode/object_confirm_delete.html"

    def form_valid(self, form):
        success_url = self.get_success_url()
        label = str(self.object)
        try:
            with transaction.atomic():
                self.object.delete()
        except DatabaseError:
            logger.exception("Failed to delete %s", label)
            messages.error(self.request, self.error_message)
            return HttpResponseRedirect(success_url)

        logger.info("Deleted %s", label)
        messages.success(self.request, self.success_message)
        return HttpResponseRedirect(success_url)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["cancel_url"] = self.get_success_url()
        return context


class FilterQueryMixin:
    """Expose the active filters so pagination links keep them"""

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        params = self.request.GET.copy()
        params.pop("page", None)
        context["filter_query"] = params.urlencode()
        return context
