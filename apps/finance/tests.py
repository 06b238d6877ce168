from django.urls import reverse

from apps.corecode.testing import DashboardTestCase, formset_management

from .models import AdditionalFee, ExtraFee, ExtraFeesAccount, ExtraFeeType, FeeCategory, ProgramFee


def fee_data(**overrides):
    data = {
        "title": "School fees",
        "amount": "N250,000",
        "description": "Payable per session",
        **formset_management("details"),
    }
    data.update(overrides)
    return data


class ProgramFeeTest(DashboardTestCase):

    def test_create_fee_in_category(self):
        data = fee_data()
        data.update(formset_management("details", total=1))
        data.update({
            "details-0-bank": "First Bank",
            "details-0-accountNumber": "0123456789",
            "details-0-accountName": "SPGS Fees",
        })
        response = self.client.post(reverse("finance:fee_create", args=[FeeCategory.MASTERS]), data)
        self.assertRedirects(response, reverse("finance:fee_list") + "?category=masters")

        fee = ProgramFee.objects.get()
        self.assertEqual(fee.category, FeeCategory.MASTERS)
        self.assertEqual(
            fee.details,
            [{"bank": "First Bank", "accountNumber": "0123456789", "accountName": "SPGS Fees"}],
        )

    def test_incomplete_bank_details_are_rejected(self):
        data = fee_data()
        data.update(formset_management("details", total=1))
        data.update({"details-0-bank": "First Bank"})
        response = self.client.post(reverse("finance:fee_create", args=[FeeCategory.PGD]), data)
        self.assertEqual(response.status_code, 200)
        details = response.context["form"].formsets["details"]
        self.assertIn("All bank details must be complete", details.forms[0].non_field_errors())
        self.assertFalse(ProgramFee.objects.exists())

    def test_title_and_amount_are_required(self):
        response = self.client.post(reverse("finance:fee_create", args=[FeeCategory.PGD]), fee_data(amount=""))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(ProgramFee.objects.exists())

    def test_unknown_category_is_404(self):
        self.assertEqual(self.client.get(reverse("finance:fee_create", args=["bogus"])).status_code, 404)
        self.assertEqual(self.client.get(reverse("finance:fee_list"), {"category": "bogus"}).status_code, 404)
        self.assertEqual(self.client.get(reverse("finance:fee_list_api", args=["bogus"])).status_code, 404)

    def test_list_is_per_category(self):
        ProgramFee.objects.create(category=FeeCategory.PGD, title="PGD fee", amount="100")
        ProgramFee.objects.create(category=FeeCategory.PHD_EDU, title="PhD fee", amount="300")

        response = self.client.get(reverse("finance:fee_list"))
        self.assertEqual([fee.title for fee in response.context["fees"]], ["PGD fee"])

        data = self.client.get(reverse("finance:fee_list_api", args=[FeeCategory.PHD_EDU])).json()
        self.assertEqual([fee["title"] for fee in data["fees"]], ["PhD fee"])

    def test_update_returns_to_category(self):
        fee = ProgramFee.objects.create(category=FeeCategory.PHD_NATSCI, title="Old", amount="1")
        response = self.client.post(reverse("finance:fee_update", args=[fee.pk]), fee_data(title="New"))
        self.assertRedirects(response, reverse("finance:fee_list") + "?category=phd_natsci")
        fee.refresh_from_db()
        self.assertEqual(fee.title, "New")
        self.assertEqual(fee.category, FeeCategory.PHD_NATSCI)


class AdditionalAndExtraFeeTest(DashboardTestCase):

    def test_additional_fee_create_and_update(self):
        data = {
            "title": "Acceptance fee",
            "amount": "N30,000",
            "description": "",
            "bank": "Union Bank",
            "account_number": "0011223344",
            "account_name": "SPGS",
        }
        self.client.post(reverse("finance:additional_fee_create"), data)
        fee = AdditionalFee.objects.get()

        data["amount"] = "N35,000"
        response = self.client.post(reverse("finance:additional_fee_update", args=[fee.pk]), data)
        self.assertRedirects(response, reverse("finance:additional_fee_list"))
        fee.refresh_from_db()
        self.assertEqual(fee.amount, "N35,000")

        fees = self.client.get(reverse("finance:additional_fee_list_api")).json()["fees"]
        self.assertEqual(fees[0]["bank"], "Union Bank")

    def test_extra_fees_account_is_a_single_record(self):
        data = {"bank_name": "GTBank", "account_number": "9988776655", "account_name": "SPGS Levies"}
        response = self.client.post(reverse("finance:extra_fees_account_update"), data)
        self.assertRedirects(response, reverse("finance:extra_fees"))
        self.client.post(reverse("finance:extra_fees_account_update"), {**data, "account_name": "SPGS"})

        self.assertEqual(ExtraFeesAccount.objects.count(), 1)
        self.assertEqual(ExtraFeesAccount.get_solo().account_name, "SPGS")

    def test_extra_fees_account_fields_are_required(self):
        response = self.client.post(
            reverse("finance:extra_fees_account_update"),
            {"bank_name": "GTBank", "account_number": "", "account_name": ""},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("account_number", response.context["form"].errors)

    def test_extra_fee_amount(self):
        fee = ExtraFee.objects.create(fee_type=ExtraFeeType.EXAMS_LEVY)
        response = self.client.post(
            reverse("finance:extra_fee_update", args=[fee.pk]),
            {"fee_type": ExtraFeeType.EXAMS_LEVY, "amount": "N5,000"},
        )
        self.assertRedirects(response, reverse("finance:extra_fees"))

        data = self.client.get(reverse("finance:extra_fees_api")).json()
        self.assertEqual(data["fees"], [{"id": fee.pk, "fee_type": "Exams Levy", "amount": "N5,000"}])
