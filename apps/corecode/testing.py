"""
Helpers shared by the app test suites
"""
import shutil
import tempfile
from io import BytesIO

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from PIL import Image

from .roles import grant_role

User = get_user_model()


def make_image(name="photo.png", color="red", size=(8, 8)):
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


def make_pdf(name="notes.pdf"):
    return SimpleUploadedFile(name, b"%PDF-1.4\n%test document\n%%EOF\n", content_type="application/pdf")


def formset_management(prefix, total=0, initial=0):
    return {
        f"{prefix}-TOTAL_FORMS": str(total),
        f"{prefix}-INITIAL_FORMS": str(initial),
        f"{prefix}-MIN_NUM_FORMS": "0",
        f"{prefix}-MAX_NUM_FORMS": "1000",
    }


class DashboardTestCase(TestCase):
    """Signed in as a dashboard admin, with uploads written to a scratch MEDIA_ROOT"""

    @classmethod
    def setUpClass(cls):
        cls._media_root = tempfile.mkdtemp()
        cls._media_override = override_settings(MEDIA_ROOT=cls._media_root)
        cls._media_override.enable()
        super().setUpClass()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        cls._media_override.disable()
        shutil.rmtree(cls._media_root, ignore_errors=True)

    def setUp(self):
        self.admin = User.objects.create_user(username="admin", password="admin-pass-123")
        grant_role(self.admin)
        self.client.force_login(self.admin)

    def messages_for(self, response):
        return [str(message) for message in get_messages(response.wsgi_request)]
