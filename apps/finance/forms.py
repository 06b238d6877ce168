from django import forms
from django.utils.translation import gettext_lazy as _

from apps.corecode.forms import ItemListFormMixin

from .models import AdditionalFee, ExtraFee, ExtraFeesAccount, ProgramFee


class BankDetailForm(forms.Form):
    """One account a program fee can be paid into"""

    bank = forms.CharField(max_length=200, required=False)
    accountNumber = forms.CharField(max_length=30, required=False, label=_("Account Number"))
    accountName = forms.CharField(max_length=200, required=False, label=_("Account Name"))

    def clean(self):
        cleaned_data = super().clean()
        values = [(cleaned_data.get(name) or "").strip() for name in ("bank", "accountNumber", "accountName")]
        if any(values) and not all(values):
            raise forms.ValidationError(_("All bank details must be complete"))
        return cleaned_data


BankDetailFormSet = forms.formset_factory(BankDetailForm, extra=1, can_delete=True)


class ProgramFeeForm(ItemListFormMixin, forms.ModelForm):
    """Fee line; the category comes from the table being edited"""

    item_formsets = {"details": BankDetailFormSet}

    class Meta:
        model = ProgramFee
        fields = ["title", "amount", "description"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }

    def clean(self):
        cleaned_data = super().clean()
        if not (cleaned_data.get("title") or "").strip() or not (cleaned_data.get("amount") or "").strip():
            raise forms.ValidationError(_("Title and amount are required"))
        return cleaned_data


class AdditionalFeeForm(forms.ModelForm):

    class Meta:
        model = AdditionalFee
        fields = ["title", "amount", "description", "bank", "account_number", "account_name"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class ExtraFeesAccountForm(forms.ModelForm):

    class Meta:
        model = ExtraFeesAccount
        fields = ["bank_name", "account_number", "account_name"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = True


class ExtraFeeForm(forms.ModelForm):

    class Meta:
        model = ExtraFee
        fields = ["fee_type", "amount"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["amount"].required = True
