from datetime import timedelta
from io import StringIO
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.core.management import CommandError, call_command
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from apps.corecode.models import Hero, Mission, StoredFile, Vision
from apps.corecode.roles import get_user_role, grant_role, is_dashboard_admin
from apps.corecode.storage import (
    generate_upload_url,
    orphaned_files,
    purge_orphaned_files,
    store_bytes,
)
from apps.corecode.testing import DashboardTestCase
from apps.corecode.utils import clean_lines, generate_slug, sanitize_html
from apps.staffs.models import Staff
from tasks.config import TASK_CONFIG
from tasks.storage_tasks import purge_orphaned_uploads_task, schedule_purge

User = get_user_model()


class RoleGateTest(TestCase):
    """Every dashboard page requires a user carrying the admin role claim"""

    def setUp(self):
        self.user = User.objects.create_user(username="viewer", password="viewer-pass-123")

    def test_anonymous_user_is_redirected_to_login(self):
        response = self.client.get(reverse("corecode:home"))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("login"), response["Location"])

    def test_anonymous_api_call_gets_401(self):
        response = self.client.get(reverse("programs:program_list_api"))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "Authentication required")

    def test_user_without_role_sees_access_denied(self):
        self.client.force_login(self.user)
        for name in ["corecode:home", "programs:program_list", "staffs:staff_list", "news:news_list"]:
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, 403)
            self.assertTemplateUsed(response, "corecode/access_denied.html")

    def test_user_with_other_role_is_denied(self):
        grant_role(self.user, "editor")
        self.client.force_login(self.user)
        response = self.client.get(reverse("corecode:home"))
        self.assertEqual(response.status_code, 403)

    def test_user_without_role_gets_403_json_on_api(self):
        self.client.force_login(self.user)
        response = self.client.get(reverse("students:statistics_api"))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "Access denied")

    def test_superuser_without_claim_is_denied(self):
        root = User.objects.create_superuser(username="root", password="root-pass-123", email="root@example.com")
        self.client.force_login(root)
        response = self.client.get(reverse("corecode:home"))
        self.assertEqual(response.status_code, 403)

    def test_admin_role_is_let_through(self):
        grant_role(self.user)
        self.client.force_login(self.user)
        response = self.client.get(reverse("corecode:home"))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "corecode/home.html")

    def test_login_page_is_public(self):
        response = self.client.get(reverse("login"))
        self.assertEqual(response.status_code, 200)

    def test_role_helpers(self):
        self.assertIsNone(get_user_role(self.user))
        self.assertFalse(is_dashboard_admin(self.user))
        grant_role(self.user)
        self.user.refresh_from_db()
        self.assertEqual(get_user_role(self.user), "admin")
        self.assertTrue(is_dashboard_admin(self.user))

    def test_grant_admin_role_command(self):
        out = StringIO()
        call_command("grant_admin_role", "viewer", stdout=out)
        self.user.refresh_from_db()
        self.assertTrue(is_dashboard_admin(self.user))
        self.assertIn("Granted role 'admin' to viewer", out.getvalue())

    def test_grant_admin_role_unknown_user(self):
        with self.assertRaisesMessage(CommandError, "User 'nobody' does not exist"):
            call_command("grant_admin_role", "nobody", stdout=StringIO())


class UtilsTest(TestCase):

    def test_generate_slug(self):
        self.assertEqual(generate_slug("  Master of Science (Physics) "), "master-of-science-physics")
        self.assertEqual(generate_slug("!!!"), "")

    def test_sanitize_html_strips_scripts(self):
        cleaned = sanitize_html('<p onclick="x()">Hello<script>alert(1)</script></p>')
        self.assertIn("<p>Hello", cleaned)
        self.assertNotIn("script", cleaned)
        self.assertNotIn("onclick", cleaned)

    def test_clean_lines(self):
        self.assertEqual(clean_lines(["a", " ", "b "]), ["a", "b"])


class HomeAndAboutViewTest(DashboardTestCase):

    def test_home_shows_counts(self):
        Staff.objects.create(name="Dr Ada", role="Dean", email="ada@example.com", profile="Bio")
        response = self.client.get(reverse("corecode:home"))
        self.assertEqual(response.status_code, 200)
        stats = {str(stat["label"]): stat["count"] for stat in response.context["stats"]}
        self.assertEqual(stats["Staff"], 1)
        self.assertEqual(stats["Programs"], 0)

    def test_update_vision(self):
        vision = Vision.objects.create(title="Vision", desc="Old")
        response = self.client.post(
            reverse("corecode:vision_update", args=[vision.pk]),
            {"title": "Our Vision", "desc": "To lead in research."},
        )
        self.assertRedirects(response, reverse("corecode:about"))
        vision.refresh_from_db()
        self.assertEqual(vision.desc, "To lead in research.")

    def test_blank_mission_is_rejected(self):
        mission = Mission.objects.create(title="Mission", desc="Teach")
        response = self.client.post(
            reverse("corecode:mission_update", args=[mission.pk]),
            {"title": "Mission", "desc": "   "},
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["form"].errors)
        mission.refresh_from_db()
        self.assertEqual(mission.desc, "Teach")

    def test_content_api(self):
        Hero.objects.create(title="Welcome", desc=["Line one"])
        response = self.client.get(reverse("corecode:content_api"))
        data = response.json()
        self.assertEqual(data["hero"][0]["title"], "Welcome")
        self.assertEqual(data["programs"], [])


class StorageUploadTest(DashboardTestCase):

    def test_upload_url_then_upload(self):
        response = self.client.post(reverse("corecode:upload_url"))
        upload_url = response.json()["uploadUrl"]
        self.assertIn("/storage/upload/", upload_url)

        self.client.logout()
        response = self.client.post(
            upload_url,
            data=b"%PDF-1.4 content",
            content_type="application/pdf",
            HTTP_X_FILE_NAME="handbook.pdf",
        )
        self.assertEqual(response.status_code, 200)
        stored = StoredFile.objects.get(pk=response.json()["storageId"])
        self.assertEqual(stored.content_type, "application/pdf")
        self.assertTrue(stored.file.name.endswith("handbook.pdf"))

    def test_upload_url_can_only_be_used_once(self):
        upload_url = generate_upload_url()
        first = self.client.post(upload_url, data=b"abc", content_type="text/plain")
        self.assertEqual(first.status_code, 200)
        second = self.client.post(upload_url, data=b"abc", content_type="text/plain")
        self.assertEqual(second.status_code, 409)

    def test_tampered_upload_url_is_rejected(self):
        response = self.client.post(
            reverse("corecode:storage_upload", args=["not-a-valid-token"]),
            data=b"abc",
            content_type="text/plain",
        )
        self.assertEqual(response.status_code, 403)

    def test_expired_upload_url_is_rejected(self):
        upload_url = generate_upload_url()
        with override_settings(STORAGE_UPLOAD_URL_MAX_AGE=-1):
            response = self.client.post(upload_url, data=b"abc", content_type="text/plain")
        self.assertEqual(response.status_code, 403)

    def test_empty_upload_is_rejected(self):
        response = self.client.post(generate_upload_url(), data=b"", content_type="text/plain")
        self.assertEqual(response.status_code, 400)

    @override_settings(STORAGE_MAX_UPLOAD_SIZE=4)
    def test_oversized_upload_is_rejected(self):
        response = self.client.post(generate_upload_url(), data=b"too large", content_type="text/plain")
        self.assertEqual(response.status_code, 400)
        self.assertFalse(StoredFile.objects.exists())

    def test_file_url_api(self):
        stored = store_bytes(b"hello", "text/plain", filename="hello.txt")
        response = self.client.get(reverse("corecode:file_url", args=[stored.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["url"], stored.file.url)

    def test_file_url_api_for_missing_blob(self):
        stored = store_bytes(b"hello", "text/plain", filename="hello.txt")
        default_storage.delete(stored.file.name)
        response = self.client.get(reverse("corecode:file_url", args=[stored.pk]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "File not found")


class OrphanPurgeTest(DashboardTestCase):

    def make_blob(self, hours_old):
        stored = store_bytes(b"data", "image/png", filename="pic.png")
        StoredFile.objects.filter(pk=stored.pk).update(created_at=timezone.now() - timedelta(hours=hours_old))
        return stored

    def test_only_old_unreferenced_blobs_are_orphans(self):
        old_orphan = self.make_blob(48)
        self.make_blob(1)
        referenced = self.make_blob(48)
        Staff.objects.create(name="Dr Ada", role="Dean", email="ada@example.com", profile="Bio", image=referenced)

        self.assertEqual(list(orphaned_files(24)), [old_orphan])

    def test_purge_removes_rows_and_bytes(self):
        orphan = self.make_blob(48)
        name = orphan.file.name
        with self.captureOnCommitCallbacks(execute=True):
            purged = purge_orphaned_files(24)
        self.assertEqual(purged, 1)
        self.assertFalse(StoredFile.objects.filter(pk=orphan.pk).exists())
        self.assertFalse(default_storage.exists(name))

    def test_purge_task(self):
        self.make_blob(48)
        result = purge_orphaned_uploads_task.apply(args=(24,)).get()
        self.assertEqual(result, {"status": "success", "purged": 1})

    def test_purge_command_sync(self):
        self.make_blob(48)
        out = StringIO()
        call_command("purge_orphaned_uploads", "--sync", "--older-than", "24", stdout=out)
        self.assertIn("Removed 1 orphaned upload(s)", out.getvalue())

    def test_schedule_runs_inline_on_cpanel(self):
        self.make_blob(48)
        with mock.patch.dict(TASK_CONFIG, {"USE_CELERY": False, "ENV_TYPE": "CPANEL"}):
            result = schedule_purge(24)
        self.assertEqual(result, {"status": "success", "purged": 1})

    def test_schedule_queues_on_worker_hosts(self):
        with mock.patch.dict(TASK_CONFIG, {"USE_CELERY": True}):
            with mock.patch("tasks.storage_tasks.purge_orphaned_uploads_task") as task:
                schedule_purge(24)
        task.delay.assert_called_once_with(24)


class CreatePageTest(DashboardTestCase):

    def test_every_create_page_renders_with_cancel_link(self):
        pages = {
            reverse("programs:program_create"): reverse("programs:program_list"),
            reverse("programs:course_create"): reverse("programs:course_list"),
            reverse("staffs:staff_create"): reverse("staffs:staff_list"),
            reverse("alumni:alumni_create"): reverse("alumni:alumni_list"),
            reverse("news:news_create"): reverse("news:news_list"),
            reverse("materials:material_create"): reverse("materials:material_list"),
            reverse("materials:gpc_create"): reverse("materials:gpc_list"),
            reverse("admissions:route_create"): reverse("admissions:route_list"),
            reverse("finance:additional_fee_create"): reverse("finance:additional_fee_list"),
            reverse("finance:fee_create", args=["pgd"]): reverse("finance:fee_list") + "?category=pgd",
            reverse("students:student_create"): reverse("students:student_list"),
        }
        for url, cancel_url in pages.items():
            with self.subTest(url=url):
                response = self.client.get(url)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.context["cancel_url"], cancel_url)


class SeedSiteContentTest(TestCase):

    def test_seed_is_idempotent(self):
        call_command("seed_site_content", stdout=StringIO())
        self.assertEqual(Hero.objects.count(), 1)
        out = StringIO()
        call_command("seed_site_content", stdout=out)
        self.assertIn("already seeded", out.getvalue())
        self.assertEqual(Hero.objects.count(), 1)


class DeleteStoredFileTest(DashboardTestCase):

    def test_deleting_row_removes_bytes_after_commit(self):
        stored = StoredFile()
        stored.file.save("note.txt", ContentFile(b"bytes"), save=False)
        stored.save()
        name = stored.file.name
        with self.captureOnCommitCallbacks(execute=True):
            stored.delete()
        self.assertFalse(default_storage.exists(name))
