from django.test import TestCase
from django.urls import reverse

from apps.corecode.testing import DashboardTestCase

from .models import AdmissionRequirement, AlternativeAdmissionRoute, HowToApply
from .services import RequirementError, RequirementService


class RequirementServiceTest(TestCase):

    def setUp(self):
        self.requirement = AdmissionRequirement.objects.create(
            title="Masters Degree",
            requirements=["First degree", "Five O'level credits", "NYSC certificate"],
        )

    def test_update_drops_blank_lines(self):
        RequirementService.update_requirements(self.requirement.pk, " Masters ", ["  A ", "", "   ", "B"])
        self.requirement.refresh_from_db()
        self.assertEqual(self.requirement.title, "Masters")
        self.assertEqual(self.requirement.requirements, ["A", "B"])

    def test_remove_line(self):
        removed = RequirementService.remove_requirement_line(self.requirement.pk, 1)
        self.assertEqual(removed, "Five O'level credits")
        self.requirement.refresh_from_db()
        self.assertEqual(self.requirement.requirements, ["First degree", "NYSC certificate"])

    def test_remove_line_out_of_range(self):
        for index in (3, -1):
            with self.assertRaisesMessage(RequirementError, "Requirement line not found"):
                RequirementService.remove_requirement_line(self.requirement.pk, index)
        self.requirement.refresh_from_db()
        self.assertEqual(len(self.requirement.requirements), 3)

    def test_missing_requirement(self):
        with self.assertRaisesMessage(RequirementError, "Requirement not found"):
            RequirementService.remove_requirement_line(self.requirement.pk + 1, 0)


class RequirementViewTest(DashboardTestCase):

    def setUp(self):
        super().setUp()
        self.requirement = AdmissionRequirement.objects.create(
            title="PhD",
            requirements=["Masters degree", "Research proposal"],
        )

    def test_update_from_textarea(self):
        response = self.client.post(
            reverse("admissions:requirement_update", args=[self.requirement.pk]),
            {"title": "Doctor of Philosophy", "requirements": "Masters degree\n\n  Proposal  \r\nInterview"},
        )
        self.assertRedirects(response, reverse("admissions:requirement_list"))
        self.requirement.refresh_from_db()
        self.assertEqual(self.requirement.title, "Doctor of Philosophy")
        self.assertEqual(self.requirement.requirements, ["Masters degree", "Proposal", "Interview"])

    def test_update_form_shows_one_line_per_requirement(self):
        response = self.client.get(reverse("admissions:requirement_update", args=[self.requirement.pk]))
        self.assertEqual(response.context["form"].initial["requirements"], "Masters degree\nResearch proposal")

    def test_remove_line_view(self):
        response = self.client.post(reverse("admissions:requirement_line_remove", args=[self.requirement.pk, 0]))
        self.assertRedirects(response, reverse("admissions:requirement_list"))
        self.assertIn("Removed: Masters degree", self.messages_for(response))
        self.requirement.refresh_from_db()
        self.assertEqual(self.requirement.requirements, ["Research proposal"])

    def test_remove_missing_line_reports_error(self):
        response = self.client.post(reverse("admissions:requirement_line_remove", args=[self.requirement.pk, 5]))
        self.assertRedirects(response, reverse("admissions:requirement_list"))
        self.assertIn("Requirement line not found", self.messages_for(response))

    def test_remove_line_requires_post(self):
        response = self.client.get(reverse("admissions:requirement_line_remove", args=[self.requirement.pk, 0]))
        self.assertEqual(response.status_code, 405)

    def test_delete(self):
        self.client.post(reverse("admissions:requirement_delete", args=[self.requirement.pk]))
        self.assertFalse(AdmissionRequirement.objects.exists())


class RoutesAndHowToApplyTest(DashboardTestCase):

    def test_route_crud(self):
        self.client.post(
            reverse("admissions:route_create"),
            {"title": "Direct entry", "description": "For holders of a PGD."},
        )
        route = AlternativeAdmissionRoute.objects.get()
        self.client.post(
            reverse("admissions:route_update", args=[route.pk]),
            {"title": "Direct entry", "description": "For holders of a PGD with credit."},
        )
        route.refresh_from_db()
        self.assertEqual(route.description, "For holders of a PGD with credit.")

        self.client.post(reverse("admissions:route_delete", args=[route.pk]))
        self.assertFalse(AlternativeAdmissionRoute.objects.exists())

    def test_how_to_apply_link_must_be_a_url(self):
        step = HowToApply.objects.create(text="Apply online", link="https://example.com/apply")
        response = self.client.post(
            reverse("admissions:how_to_apply_update", args=[step.pk]),
            {"text": "Apply online", "link": "not a link"},
        )
        self.assertIn("link", response.context["form"].errors)

    def test_admissions_api(self):
        AdmissionRequirement.objects.create(title="PGD", requirements=["Degree"])
        HowToApply.objects.create(text="Apply online", link="https://example.com/apply")
        data = self.client.get(reverse("admissions:admissions_api")).json()
        self.assertEqual(data["requirements"][0]["requirements"], ["Degree"])
        self.assertEqual(data["alternative_routes"], [])
        self.assertEqual(data["how_to_apply"][0]["link"], "https://example.com/apply")
