from django.core.files.storage import default_storage
from django.db.models import ProtectedError
from django.urls import reverse

from apps.corecode.models import Faculty, ProgramType, Semester, StoredFile
from apps.corecode.storage import store_bytes
from apps.corecode.testing import DashboardTestCase, make_image, make_pdf

from .models import CourseMaterial, GPCMaterial


def material_data(**overrides):
    data = {
        "faculty": Faculty.EDUCATION,
        "type": ProgramType.PGD,
        "title": "Research Methods",
        "description": "Lecture notes for the first term",
    }
    data.update(overrides)
    return data


class CourseMaterialTest(DashboardTestCase):

    def test_create_with_pdf(self):
        response = self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        self.assertRedirects(response, reverse("materials:material_list"))
        material = CourseMaterial.objects.get()
        self.assertTrue(material.file.is_pdf)
        self.assertEqual(material.downloads, 0)

    def test_document_is_required_on_create(self):
        response = self.client.post(reverse("materials:material_create"), material_data())
        self.assertIn("Please upload a PDF document", response.context["form"].errors["document"])

    def test_non_pdf_is_rejected(self):
        response = self.client.post(reverse("materials:material_create"), material_data(document=make_image()))
        self.assertIn("document", response.context["form"].errors)
        self.assertFalse(CourseMaterial.objects.exists())

    def test_stored_pdf_can_be_attached_by_id(self):
        stored = store_bytes(b"%PDF-1.4", "application/pdf", filename="syllabus.pdf")
        response = self.client.post(
            reverse("materials:material_create"),
            material_data(storage_id=str(stored.pk)),
        )
        self.assertRedirects(response, reverse("materials:material_list"))
        self.assertEqual(CourseMaterial.objects.get().file, stored)

    def test_update_keeps_blank_fields_and_file(self):
        self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        material = CourseMaterial.objects.get()
        old_file = material.file

        response = self.client.post(
            reverse("materials:material_update", args=[material.pk]),
            {"faculty": "", "type": "", "title": "Advanced Research Methods", "description": ""},
        )
        self.assertRedirects(response, reverse("materials:material_list"))
        material.refresh_from_db()
        self.assertEqual(material.title, "Advanced Research Methods")
        self.assertEqual(material.faculty, Faculty.EDUCATION)
        self.assertEqual(material.description, "Lecture notes for the first term")
        self.assertEqual(material.file, old_file)

    def test_download_counts_and_redirects(self):
        self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        material = CourseMaterial.objects.get()

        for _ in range(3):
            response = self.client.get(reverse("materials:material_download", args=[material.pk]))
            self.assertRedirects(response, material.file.url, fetch_redirect_response=False)

        material.refresh_from_db()
        self.assertEqual(material.downloads, 3)

    def test_download_of_missing_blob_is_404(self):
        self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        material = CourseMaterial.objects.get()
        default_storage.delete(material.file.file.name)

        response = self.client.get(reverse("materials:material_download", args=[material.pk]))
        self.assertEqual(response.status_code, 404)
        material.refresh_from_db()
        self.assertEqual(material.downloads, 0)

    def test_blob_of_a_material_is_protected(self):
        self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        with self.assertRaises(ProtectedError):
            StoredFile.objects.get().delete()

    def test_filters(self):
        self.client.post(reverse("materials:material_create"), material_data(document=make_pdf()))
        self.client.post(
            reverse("materials:material_create"),
            material_data(title="Law Notes", faculty=Faculty.LAW, document=make_pdf("law.pdf")),
        )
        response = self.client.get(reverse("materials:material_list"), {"faculty": Faculty.LAW})
        self.assertEqual([m.title for m in response.context["materials"]], ["Law Notes"])

        data = self.client.get(reverse("materials:material_list_api"), {"type": "phd"}).json()
        self.assertEqual(data["materials"], [])


class GPCMaterialTest(DashboardTestCase):

    def test_grouped_by_semester(self):
        self.client.post(
            reverse("materials:gpc_create"),
            material_data(title="Statistics", semester=Semester.SECOND, document=make_pdf()),
        )
        self.client.post(
            reverse("materials:gpc_create"),
            material_data(title="Philosophy of Science", semester=Semester.FIRST, document=make_pdf("phil.pdf")),
        )
        self.assertEqual(GPCMaterial.objects.count(), 2)

        response = self.client.get(reverse("materials:gpc_list"))
        semesters = {str(label): [m.title for m in items] for label, items in response.context["semesters"]}
        self.assertEqual(semesters["First Semester"], ["Philosophy of Science"])
        self.assertEqual(semesters["Second Semester"], ["Statistics"])

        data = self.client.get(reverse("materials:gpc_list_api")).json()
        self.assertEqual([m["title"] for m in data["first_semester"]], ["Philosophy of Science"])
        self.assertEqual([m["semester"] for m in data["second_semester"]], [2])

    def test_download(self):
        self.client.post(
            reverse("materials:gpc_create"),
            material_data(semester=Semester.FIRST, document=make_pdf()),
        )
        material = GPCMaterial.objects.get()
        self.client.get(reverse("materials:gpc_download", args=[material.pk]))
        material.refresh_from_db()
        self.assertEqual(material.downloads, 1)
