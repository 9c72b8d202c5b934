import io
import shutil
import tempfile

from PIL import Image
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings

from website.models import AdminUser
from website.permissions import AUTH_SESSION_KEY


def make_image(name="photo.png", size=(400, 300), color=(200, 30, 30), fmt="PNG", content_type="image/png"):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return SimpleUploadedFile(name, buf.getvalue(), content_type=content_type)


class TempMediaMixin:
    """Point MEDIA_ROOT at a throwaway directory for the duration of each test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp(prefix="ouma-media-")
        media_override = override_settings(MEDIA_ROOT=self.media_root)
        media_override.enable()
        self.addCleanup(media_override.disable)
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)


class AdminClientMixin:
    def login_admin(self):
        session = self.client.session
        session[AUTH_SESSION_KEY] = True
        session.save()

    def create_admin(self, username="admin", password="admin123"):
        user = AdminUser(username=username)
        user.set_password(password)
        user.save()
        return user
