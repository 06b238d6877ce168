from django.urls import reverse

from apps.corecode.models import Faculty, ProgramType
from apps.corecode.testing import DashboardTestCase

from .forms import normalize_phone
from .models import PGStudent


def student_data(**overrides):
    data = {
        "name": "Fatima Yusuf",
        "email": "fatima@example.com",
        "phone": "0801 234 5678",
        "regno": " PG/2024/001 ",
        "faculty": Faculty.ARTS,
        "type": ProgramType.MASTERS,
    }
    data.update(overrides)
    return data


class PGStudentFormTest(DashboardTestCase):

    def test_normalize_phone(self):
        self.assertEqual(normalize_phone("08012345678"), "+2348012345678")
        self.assertEqual(normalize_phone("+2348012345678"), "+2348012345678")

    def test_create_normalizes_phone_and_regno(self):
        response = self.client.post(reverse("students:student_create"), student_data())
        self.assertRedirects(response, reverse("students:student_list"))
        student = PGStudent.objects.get()
        self.assertEqual(student.phone, "+2348012345678")
        self.assertEqual(student.regno, "PG/2024/001")
        self.assertIn("Fatima Yusuf successfully added.", self.messages_for(response))

    def test_invalid_phone_is_rejected(self):
        response = self.client.post(reverse("students:student_create"), student_data(phone="12345"))
        self.assertIn("phone", response.context["form"].errors)

    def test_duplicate_regno_is_rejected(self):
        self.client.post(reverse("students:student_create"), student_data())
        response = self.client.post(reverse("students:student_create"), student_data(email="other@example.com"))
        self.assertEqual(response.status_code, 200)
        self.assertIn("regno", response.context["form"].errors)
        self.assertEqual(PGStudent.objects.count(), 1)


class PGStudentListTest(DashboardTestCase):

    def setUp(self):
        super().setUp()
        PGStudent.objects.create(
            name="zainab Musa", email="z@example.com", phone="+2348000000001",
            regno="PG/1", faculty=Faculty.LAW, type=ProgramType.PHD,
        )
        PGStudent.objects.create(
            name="Adamu Garba", email="a@example.com", phone="+2348000000002",
            regno="PG/2", faculty=Faculty.ARTS, type=ProgramType.PGD,
        )
        PGStudent.objects.create(
            name="bola Ade", email="b@example.com", phone="+2348000000003",
            regno="PG/3", faculty=Faculty.ARTS, type=ProgramType.PHD,
        )

    def test_sorted_case_insensitively(self):
        response = self.client.get(reverse("students:student_list"))
        self.assertEqual(
            [s.name for s in response.context["students"]],
            ["Adamu Garba", "bola Ade", "zainab Musa"],
        )

    def test_statistics(self):
        expected = {"pgd": 1, "masters": 0, "phd": 2, "total": 3}
        response = self.client.get(reverse("students:student_list"))
        self.assertEqual(response.context["stats"], expected)
        self.assertEqual(self.client.get(reverse("students:statistics_api")).json(), expected)

    def test_filters(self):
        response = self.client.get(reverse("students:student_list"), {"faculty": Faculty.ARTS, "type": "phd"})
        self.assertEqual([s.regno for s in response.context["students"]], ["PG/3"])

    def test_lookup_by_regno(self):
        response = self.client.get(reverse("students:student_by_regno_api", args=["PG/2"]))
        self.assertEqual(response.json()["name"], "Adamu Garba")
        response = self.client.get(reverse("students:student_by_regno_api", args=["PG/404"]))
        self.assertEqual(response.status_code, 404)

    def test_delete(self):
        student = PGStudent.objects.get(regno="PG/1")
        self.client.post(reverse("students:student_delete", args=[student.pk]))
        self.assertFalse(PGStudent.objects.filter(regno="PG/1").exists())
