from django.urls import reverse

from apps.corecode.models import Faculty, ProgramType
from apps.corecode.testing import DashboardTestCase, formset_management
from apps.corecode.utils import NO_DATE_YET

from .models import Course, Program


def program_data(**overrides):
    data = {
        "program_full_name": "Master of Science in Physics",
        "program_short_name": "M.Sc Physics",
        "program_overview": "<p>An advanced course in physics.</p>",
        "next_intake": "",
        "study_duration": "2 years",
        "delivery_mode": "On campus",
        "study_mode": "Full time",
        "status": "on",
        **formset_management("why_choose"),
    }
    data.update(overrides)
    return data


def course_data(**overrides):
    data = {
        "course": "Educational Management",
        "duration": "18 months",
        "mode": "Part time",
        "overview": "<p>Leadership in schools.</p>",
        "type": ProgramType.MASTERS,
        "faculty": Faculty.EDUCATION,
        **formset_management("why_choose"),
    }
    data.update(overrides)
    return data


class ProgramCreateTest(DashboardTestCase):

    def test_create_program_generates_slug(self):
        response = self.client.post(reverse("programs:program_create"), program_data())
        self.assertRedirects(response, reverse("programs:program_list"))

        program = Program.objects.get()
        self.assertEqual(program.slug, "master-of-science-in-physics")
        self.assertEqual(program.next_intake, NO_DATE_YET)
        self.assertTrue(program.status)
        self.assertIn("Program added successfully!", self.messages_for(response))

    def test_short_program_name_is_rejected(self):
        response = self.client.post(reverse("programs:program_create"), program_data(program_full_name="M"))
        self.assertEqual(response.status_code, 200)
        self.assertIn(
            "Program name must be at least 2 characters",
            response.context["form"].errors["program_full_name"],
        )
        self.assertFalse(Program.objects.exists())

    def test_short_overview_is_rejected(self):
        response = self.client.post(
            reverse("programs:program_create"),
            program_data(program_overview="<script>alert('x')</script><p>Hi</p>"),
        )
        self.assertIn("Overview must be at least 10 characters", response.context["form"].errors["program_overview"])

    def test_duplicate_slug_is_rejected(self):
        self.client.post(reverse("programs:program_create"), program_data())
        response = self.client.post(
            reverse("programs:program_create"),
            program_data(program_full_name="Master of Science in  PHYSICS"),
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("A program with this name already exists", response.context["form"].errors["program_full_name"])
        self.assertEqual(Program.objects.count(), 1)

    def test_name_matching_a_fixed_route_is_rejected(self):
        for name in ["Courses", "Create", "Api"]:
            with self.subTest(name=name):
                response = self.client.post(reverse("programs:program_create"), program_data(program_full_name=name))
                self.assertIn(
                    "This name is reserved, please choose another",
                    response.context["form"].errors["program_full_name"],
                )
        self.assertFalse(Program.objects.exists())

    def test_intake_date_and_reasons_are_saved(self):
        data = program_data(next_intake="2025-09-01")
        data.update(formset_management("why_choose", total=3))
        data.update({
            "why_choose-0-title": "Research",
            "why_choose-0-description": "World class laboratories and staff.",
            "why_choose-1-title": "",
            "why_choose-1-description": "",
            "why_choose-2-title": "Dropped",
            "why_choose-2-description": "This row is marked for deletion.",
            "why_choose-2-DELETE": "on",
        })
        self.client.post(reverse("programs:program_create"), data)

        program = Program.objects.get()
        self.assertEqual(program.next_intake, "2025-09-01")
        self.assertEqual(
            program.why_choose,
            [{"title": "Research", "description": "World class laboratories and staff."}],
        )

    def test_incomplete_reason_is_rejected(self):
        data = program_data()
        data.update(formset_management("why_choose", total=1))
        data.update({"why_choose-0-title": "R", "why_choose-0-description": "Short"})
        response = self.client.post(reverse("programs:program_create"), data)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Program.objects.exists())

    def test_overview_is_sanitized(self):
        self.client.post(
            reverse("programs:program_create"),
            program_data(program_overview='<p onclick="steal()">Advanced physics<script>x()</script></p>'),
        )
        self.assertEqual(Program.objects.get().program_overview, "<p>Advanced physics</p>")


class ProgramUpdateDeleteTest(DashboardTestCase):

    def setUp(self):
        super().setUp()
        self.program = Program.objects.create(
            program_full_name="Doctor of Philosophy in Law",
            program_short_name="PhD Law",
            program_overview="Research in law.",
            study_duration="3 years",
            delivery_mode="On campus",
            study_mode="Full time",
            slug="doctor-of-philosophy-in-law",
        )

    def test_renaming_updates_slug(self):
        data = program_data(program_full_name="Doctor of Philosophy in Public Law")
        self.client.post(reverse("programs:program_update", args=[self.program.pk]), data)
        self.program.refresh_from_db()
        self.assertEqual(self.program.slug, "doctor-of-philosophy-in-public-law")

    def test_update_keeps_own_slug(self):
        data = program_data(program_full_name="Doctor of Philosophy in Law", study_duration="4 years")
        response = self.client.post(reverse("programs:program_update", args=[self.program.pk]), data)
        self.assertRedirects(response, reverse("programs:program_list"))
        self.program.refresh_from_db()
        self.assertEqual(self.program.study_duration, "4 years")

    def test_update_form_shows_intake_date(self):
        self.program.next_intake = "2025-01-15"
        self.program.save()
        response = self.client.get(reverse("programs:program_update", args=[self.program.pk]))
        self.assertEqual(response.context["form"].initial["next_intake"], "2025-01-15")

    def test_delete(self):
        response = self.client.post(reverse("programs:program_delete", args=[self.program.pk]))
        self.assertRedirects(response, reverse("programs:program_list"))
        self.assertFalse(Program.objects.exists())

    def test_detail_by_slug(self):
        response = self.client.get(self.program.get_absolute_url())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["program"], self.program)

    def test_search(self):
        response = self.client.get(reverse("programs:program_list"), {"search": "law"})
        self.assertEqual(list(response.context["programs"]), [self.program])
        response = self.client.get(reverse("programs:program_list"), {"search": "physics"})
        self.assertEqual(list(response.context["programs"]), [])

    def test_apis(self):
        response = self.client.get(reverse("programs:program_list_api"))
        self.assertEqual(response.json()["programs"][0]["slug"], self.program.slug)
        response = self.client.get(reverse("programs:program_detail_api", args=[self.program.slug]))
        self.assertEqual(response.json()["program_full_name"], "Doctor of Philosophy in Law")
        response = self.client.get(reverse("programs:program_detail_api", args=["missing"]))
        self.assertEqual(response.status_code, 404)


class CourseTest(DashboardTestCase):

    def test_create_course(self):
        response = self.client.post(reverse("programs:course_create"), course_data())
        self.assertRedirects(response, reverse("programs:course_list"))
        self.assertEqual(Course.objects.get().slug, "educational-management")

    def test_duplicate_course_is_rejected(self):
        self.client.post(reverse("programs:course_create"), course_data())
        response = self.client.post(reverse("programs:course_create"), course_data())
        self.assertIn("Course with this name already exists", response.context["form"].errors["course"])

    def test_course_named_create_is_rejected(self):
        response = self.client.post(reverse("programs:course_create"), course_data(course="Create"))
        self.assertIn("This name is reserved, please choose another", response.context["form"].errors["course"])
        self.assertFalse(Course.objects.exists())

    def test_slug_follows_name_only_on_rename(self):
        self.client.post(reverse("programs:course_create"), course_data())
        course = Course.objects.get()

        self.client.post(reverse("programs:course_update", args=[course.pk]), course_data(mode="Full time"))
        course.refresh_from_db()
        self.assertEqual(course.slug, "educational-management")

        self.client.post(reverse("programs:course_update", args=[course.pk]), course_data(course="Educational Leadership"))
        course.refresh_from_db()
        self.assertEqual(course.slug, "educational-leadership")

    def test_create_preselects_type(self):
        response = self.client.get(reverse("programs:course_create"), {"type": "phd"})
        self.assertEqual(response.context["form"].initial["type"], "phd")

    def test_filter_by_type_and_faculty(self):
        Course.objects.create(
            course="Law PhD", slug="law-phd", duration="3 years", mode="Full time",
            overview="x", type=ProgramType.PHD, faculty=Faculty.LAW,
        )
        Course.objects.create(
            course="Arts PGD", slug="arts-pgd", duration="1 year", mode="Full time",
            overview="x", type=ProgramType.PGD, faculty=Faculty.ARTS,
        )
        response = self.client.get(reverse("programs:course_list"), {"type": "phd", "faculty": "all"})
        self.assertEqual([c.slug for c in response.context["courses"]], ["law-phd"])

        response = self.client.get(reverse("programs:course_list_api"), {"faculty": Faculty.ARTS})
        self.assertEqual([c["slug"] for c in response.json()["courses"]], ["arts-pgd"])

    def test_missing_course_update_is_404(self):
        response = self.client.get(reverse("programs:course_update", args=[999]))
        self.assertEqual(response.status_code, 404)
