from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import ItemListFormMixin
from apps.corecode.validators import email_pattern_validator

from .models import ContactInfo


class EmailPairForm(forms.Form):
    email1 = forms.EmailField(required=False, label=_("Email"), validators=[email_pattern_validator])
    email2 = forms.EmailField(required=False, label=_("Alternative email"), validators=[email_pattern_validator])


class PhonePairForm(forms.Form):
    tel1 = forms.CharField(max_length=20, required=False, label=_("Phone"))
    tel2 = forms.CharField(max_length=20, required=False, label=_("Alternative phone"))


class OfficeHoursForm(forms.Form):
    days = forms.CharField(max_length=100, required=False, help_text=_("e.g. Monday - Friday"))
    time = forms.CharField(max_length=100, required=False, help_text=_("e.g. 8:00am - 4:00pm"))


class OfficeContactForm(forms.Form):
    email = forms.EmailField(required=False, validators=[email_pattern_validator])
    tel = forms.CharField(max_length=20, required=False, label=_("Phone"))


def _formset(form_class):
    return forms.formset_factory(form_class, extra=1, can_delete=True)


class ContactInfoForm(ItemListFormMixin, forms.ModelForm):
    item_formsets = {
        "email": _formset(EmailPairForm),
        "phone": _formset(PhonePairForm),
        "office_hours": _formset(OfficeHoursForm),
        "admission_office": _formset(OfficeContactForm),
        "research_office": _formset(OfficeContactForm),
        "student_support": _formset(OfficeContactForm),
    }

    class Meta:
        model = ContactInfo
        fields = ["address"]
        widgets = {
            "address": forms.Textarea(attrs={"rows": 3}),
        }
