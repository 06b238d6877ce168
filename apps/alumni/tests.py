from django.urls import reverse

from apps.corecode.testing import DashboardTestCase, make_image

from .models import Alumnus


def alumnus_data(**overrides):
    data = {
        "name": "Chinedu Okafor",
        "degree": "M.Sc Computer Science",
        "current_position": "Software Engineer",
        "company": "Acme Ltd",
        "graduated_on": "2019",
        "email": "chinedu@example.com",
        "tel": "+2348012345678",
        "linkedin": "https://linkedin.com/in/chinedu-okafor",
        "testimonial": "The programme gave me a strong research foundation.",
    }
    data.update(overrides)
    return data


def make_alumnus(name, degree="M.Sc Physics", year="2020"):
    return Alumnus.objects.create(
        name=name,
        degree=degree,
        current_position="Analyst",
        testimonial="A great place to study and grow.",
        graduated_on=year,
        tel="+2348012345678",
    )


class AlumnusFormTest(DashboardTestCase):

    def test_create_with_photo(self):
        response = self.client.post(reverse("alumni:alumni_create"), alumnus_data(photo=make_image()))
        self.assertRedirects(response, reverse("alumni:alumni_list"))
        alumnus = Alumnus.objects.get()
        self.assertEqual(alumnus.photo, alumnus.storage.url)

    def test_photo_is_optional(self):
        response = self.client.post(reverse("alumni:alumni_create"), alumnus_data())
        self.assertRedirects(response, reverse("alumni:alumni_list"))
        self.assertEqual(Alumnus.objects.get().photo, "")

    def test_validation_messages(self):
        response = self.client.post(
            reverse("alumni:alumni_create"),
            alumnus_data(name="Ade", tel="08012345678", testimonial="Too short", linkedin="https://example.com/x"),
        )
        errors = response.context["form"].errors
        self.assertIn("Name must be at least 5 characters.", errors["name"])
        self.assertIn("Testimonial must be at least 20 characters.", errors["testimonial"])
        self.assertIn("tel", errors)
        self.assertIn("linkedin", errors)
        self.assertFalse(Alumnus.objects.exists())

    def test_testimonial_upper_bound(self):
        response = self.client.post(reverse("alumni:alumni_create"), alumnus_data(testimonial="x" * 251))
        self.assertIn("Testimonial must not exceed 250 characters.", response.context["form"].errors["testimonial"])

    def test_linkedin_required_only_on_create(self):
        response = self.client.post(reverse("alumni:alumni_create"), alumnus_data(linkedin=""))
        self.assertIn("linkedin", response.context["form"].errors)

        alumnus = make_alumnus("Existing Person")
        response = self.client.post(
            reverse("alumni:alumni_update", args=[alumnus.pk]),
            alumnus_data(name="Existing Person", linkedin=""),
        )
        self.assertRedirects(response, reverse("alumni:alumni_list"))

    def test_linkedin_trailing_slash_is_rejected(self):
        response = self.client.post(
            reverse("alumni:alumni_create"),
            alumnus_data(linkedin="https://linkedin.com/in/chinedu-okafor/"),
        )
        self.assertIn("linkedin", response.context["form"].errors)
        self.assertFalse(Alumnus.objects.exists())

    def test_year_outside_dropdown_stays_editable(self):
        alumnus = make_alumnus("Emeritus Graduate", year="1975")
        response = self.client.post(
            reverse("alumni:alumni_update", args=[alumnus.pk]),
            alumnus_data(name="Emeritus Graduate", graduated_on="1975"),
        )
        self.assertRedirects(response, reverse("alumni:alumni_list"))
        alumnus.refresh_from_db()
        self.assertEqual(alumnus.graduated_on, "1975")
        self.assertEqual(alumnus.company, "Acme Ltd")

        response = self.client.post(reverse("alumni:alumni_create"), alumnus_data(graduated_on="1975"))
        self.assertIn("graduated_on", response.context["form"].errors)


class AlumniListTest(DashboardTestCase):

    def test_pages_are_disjoint_and_sized(self):
        for i in range(20):
            make_alumnus(f"Graduate {i:02d}")

        seen = []
        for page, size in [(1, 9), (2, 9), (3, 2)]:
            response = self.client.get(reverse("alumni:alumni_list"), {"page": page})
            names = [alumnus.name for alumnus in response.context["alumni"]]
            self.assertEqual(len(names), size)
            seen.extend(names)

        self.assertEqual(len(seen), len(set(seen)))
        self.assertEqual(len(seen), 20)

    def test_filters_and_choices(self):
        make_alumnus("Ngozi Adeyemi", degree="PhD Law", year="2015")
        make_alumnus("Tunde Bakare", degree="M.Sc Physics", year="2021")

        response = self.client.get(reverse("alumni:alumni_list"), {"degree": "PhD Law", "year": "all"})
        self.assertEqual([a.name for a in response.context["alumni"]], ["Ngozi Adeyemi"])
        self.assertEqual(response.context["years"], ["2021", "2015"])
        self.assertEqual(response.context["degrees"], ["M.Sc Physics", "PhD Law"])
        self.assertEqual(response.context["filter_query"], "degree=PhD+Law&year=all")

        response = self.client.get(reverse("alumni:alumni_list"), {"search": "tunde"})
        self.assertEqual([a.name for a in response.context["alumni"]], ["Tunde Bakare"])

    def test_deleted_alumnus_vanishes_from_list(self):
        alumnus = make_alumnus("Ngozi Adeyemi")
        make_alumnus("Tunde Bakare")

        response = self.client.post(reverse("alumni:alumni_delete", args=[alumnus.pk]))
        self.assertRedirects(response, reverse("alumni:alumni_list"))
        self.assertIn("Alumnus deleted successfully", self.messages_for(response))

        response = self.client.get(reverse("alumni:alumni_list"))
        self.assertEqual([a.name for a in response.context["alumni"]], ["Tunde Bakare"])
        data = self.client.get(reverse("alumni:alumni_list_api")).json()
        self.assertEqual([a["name"] for a in data["alumni"]], ["Tunde Bakare"])
