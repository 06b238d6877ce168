import os
from unittest import mock

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.test import override_settings
from django.urls import reverse

from apps.corecode.models import StoredFile
from apps.corecode.storage import store_bytes
from apps.corecode.testing import DashboardTestCase, make_image

from .forms import StaffForm
from .models import Staff


def staff_data(**overrides):
    data = {
        "name": "Dr Amina Bello",
        "role": "Dean, Postgraduate School",
        "email": "amina.bello@example.edu",
        "linkedin": "https://linkedin.com/in/aminabello",
        "profile": "Professor of Economics with twenty years of teaching.",
    }
    data.update(overrides)
    return data


class StaffCreateTest(DashboardTestCase):

    def test_create_with_image(self):
        response = self.client.post(reverse("staffs:staff_create"), staff_data(image=make_image()))
        self.assertRedirects(response, reverse("staffs:staff_list"))

        staff = Staff.objects.get()
        self.assertIsNotNone(staff.image)
        self.assertEqual(staff.image_url, staff.image.url)
        self.assertEqual(staff.format, "image")

    def test_image_is_required_on_create(self):
        response = self.client.post(reverse("staffs:staff_create"), staff_data())
        self.assertEqual(response.status_code, 200)
        self.assertIn("Image is required", response.context["form"].errors["image"])
        self.assertFalse(Staff.objects.exists())

    def test_create_with_storage_id_from_signed_upload(self):
        stored = store_bytes(make_image().read(), "image/png", filename="portrait.png")
        response = self.client.post(reverse("staffs:staff_create"), staff_data(storage_id=str(stored.pk)))
        self.assertRedirects(response, reverse("staffs:staff_list"))
        self.assertEqual(Staff.objects.get().image, stored)

    def test_storage_id_must_be_an_image(self):
        stored = store_bytes(b"%PDF-1.4", "application/pdf", filename="cv.pdf")
        response = self.client.post(reverse("staffs:staff_create"), staff_data(storage_id=str(stored.pk)))
        self.assertIn("Unsupported file type", response.context["form"].errors["image"])

    @override_settings(IMAGE_MAX_UPLOAD_SIZE=10)
    def test_oversized_image_is_rejected(self):
        response = self.client.post(reverse("staffs:staff_create"), staff_data(image=make_image()))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["form"].errors["image"])
        self.assertFalse(StoredFile.objects.exists())

    def test_linkedin_must_be_https(self):
        response = self.client.post(
            reverse("staffs:staff_create"),
            staff_data(linkedin="http://linkedin.com/in/aminabello", image=make_image()),
        )
        self.assertIn("LinkedIn URL must start with 'https://'", response.context["form"].errors["linkedin"])

    def test_short_name_and_role_are_rejected(self):
        response = self.client.post(reverse("staffs:staff_create"), staff_data(name="A", role=" B ", image=make_image()))
        errors = response.context["form"].errors
        self.assertIn("Name must be at least 2 characters", errors["name"])
        self.assertIn("Role must be at least 2 characters", errors["role"])


class StaffUpdateTest(DashboardTestCase):

    def setUp(self):
        super().setUp()
        self.client.post(reverse("staffs:staff_create"), staff_data(image=make_image("first.png")))
        self.staff = Staff.objects.get()

    def test_update_without_image_keeps_current_one(self):
        old_image = self.staff.image
        response = self.client.post(
            reverse("staffs:staff_update", args=[self.staff.pk]),
            staff_data(role="Deputy Dean"),
        )
        self.assertRedirects(response, reverse("staffs:staff_list"))
        self.staff.refresh_from_db()
        self.assertEqual(self.staff.role, "Deputy Dean")
        self.assertEqual(self.staff.image, old_image)

    def test_update_with_new_image_replaces_url(self):
        old_url = self.staff.image_url
        self.client.post(
            reverse("staffs:staff_update", args=[self.staff.pk]),
            staff_data(image=make_image("second.png", color="blue")),
        )
        self.staff.refresh_from_db()
        self.assertNotEqual(self.staff.image_url, old_url)
        self.assertTrue(self.staff.image_url.endswith("second.png"))
        self.assertEqual(self.staff.resolved_image_url, self.staff.image_url)

    def test_delete_removes_member_from_list(self):
        self.client.post(reverse("staffs:staff_delete", args=[self.staff.pk]))
        response = self.client.get(reverse("staffs:staff_list"))
        self.assertEqual(list(response.context["staff_members"]), [])

    def test_missing_staff_is_404(self):
        response = self.client.get(reverse("staffs:staff_update", args=[self.staff.pk + 100]))
        self.assertEqual(response.status_code, 404)

    def test_api_lists_resolved_image(self):
        data = self.client.get(reverse("staffs:staff_list_api")).json()
        self.assertEqual(data["staff"][0]["image_url"], self.staff.image_url)
        self.assertEqual(data["staff"][0]["storage_id"], str(self.staff.image_id))


class StaffSaveFailureTest(DashboardTestCase):

    def setUp(self):
        super().setUp()
        self.client.post(reverse("staffs:staff_create"), staff_data(image=make_image("first.png")))
        self.staff = Staff.objects.get()

    def test_database_error_rolls_back_and_keeps_input(self):
        with mock.patch.object(StaffForm, "save", side_effect=DatabaseError("disk full")):
            response = self.client.post(
                reverse("staffs:staff_update", args=[self.staff.pk]),
                staff_data(role="Deputy Dean"),
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["form"]["role"].value(), "Deputy Dean")
        self.assertIn("Failed to update staff member", self.messages_for(response))
        self.staff.refresh_from_db()
        self.assertEqual(self.staff.role, "Dean, Postgraduate School")

    def test_validation_error_while_saving_is_shown_on_form(self):
        with mock.patch.object(StaffForm, "save", side_effect=ValidationError("Profile is locked")):
            response = self.client.post(
                reverse("staffs:staff_update", args=[self.staff.pk]),
                staff_data(role="Deputy Dean"),
            )
        self.assertIn("Profile is locked", response.context["form"].non_field_errors())
        self.assertIn("Failed to update staff member", self.messages_for(response))
        self.staff.refresh_from_db()
        self.assertEqual(self.staff.role, "Dean, Postgraduate School")

    def test_failed_delete_keeps_row(self):
        with mock.patch.object(Staff, "delete", side_effect=DatabaseError("locked")):
            response = self.client.post(reverse("staffs:staff_delete", args=[self.staff.pk]))
        self.assertRedirects(response, reverse("staffs:staff_list"))
        self.assertIn("Failed to delete staff member", self.messages_for(response))
        self.assertTrue(Staff.objects.filter(pk=self.staff.pk).exists())

    def test_rolled_back_create_removes_uploaded_bytes(self):
        with mock.patch.object(Staff, "save", side_effect=DatabaseError("insert failed")):
            response = self.client.post(
                reverse("staffs:staff_create"),
                staff_data(name="Dr Musa Ali", image=make_image("lost.png")),
            )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Failed to create staff member", self.messages_for(response))
        self.assertEqual(StoredFile.objects.count(), 1)

        written = [name for _root, _dirs, files in os.walk(settings.MEDIA_ROOT) for name in files]
        self.assertIn("first.png", written)
        self.assertNotIn("lost.png", written)
