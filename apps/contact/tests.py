from django.urls import reverse

from apps.corecode.testing import DashboardTestCase, formset_management

from .models import ContactInfo

LIST_FIELDS = ["email", "phone", "office_hours", "admission_office", "research_office", "student_support"]


def contact_data(**overrides):
    data = {"address": "SPGS Building, Main Campus"}
    for field in LIST_FIELDS:
        data.update(formset_management(field))
    data.update(overrides)
    return data


class ContactInfoTest(DashboardTestCase):

    def test_first_save_creates_the_record(self):
        self.assertIsNone(ContactInfo.current())
        data = contact_data()
        data.update(formset_management("email", total=1))
        data.update({"email-0-email1": "spgs@example.edu", "email-0-email2": ""})
        data.update(formset_management("office_hours", total=1))
        data.update({"office_hours-0-days": "Monday - Friday", "office_hours-0-time": "8am - 4pm"})

        response = self.client.post(reverse("contact:contact_update"), data)
        self.assertRedirects(response, reverse("contact:contact_info"))

        contact = ContactInfo.current()
        self.assertEqual(contact.email, [{"email1": "spgs@example.edu", "email2": ""}])
        self.assertEqual(contact.office_hours, [{"days": "Monday - Friday", "time": "8am - 4pm"}])
        self.assertEqual(contact.phone, [])

    def test_later_saves_update_in_place(self):
        self.client.post(reverse("contact:contact_update"), contact_data())
        self.client.post(reverse("contact:contact_update"), contact_data(address="New Campus Road"))
        self.assertEqual(ContactInfo.objects.count(), 1)
        self.assertEqual(ContactInfo.current().address, "New Campus Road")

    def test_invalid_office_email_is_rejected(self):
        data = contact_data()
        data.update(formset_management("research_office", total=1))
        data.update({"research_office-0-email": "not-an-email", "research_office-0-tel": "+2348012345678"})
        response = self.client.post(reverse("contact:contact_update"), data)
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(ContactInfo.current())

    def test_page_and_api(self):
        response = self.client.get(reverse("contact:contact_info"))
        self.assertIsNone(response.context["contact"])
        self.assertEqual(self.client.get(reverse("contact:contact_info_api")).json(), {"contact": None})

        ContactInfo.objects.create(address="Main Campus", phone=[{"tel1": "+2348012345678", "tel2": ""}])
        data = self.client.get(reverse("contact:contact_info_api")).json()
        self.assertEqual(data["contact"]["phone"][0]["tel1"], "+2348012345678")
