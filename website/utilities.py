# Standard Library
import os
import time
import logging

# Third-party
from PIL import Image as PILImage, ImageOps

# Django
from django.conf import settings
from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)

IMAGES = "images"
VIDEOS = "videos"
DOCS = "docs"

_RESAMPLE = PILImage.Resampling.LANCZOS


# ---- Upload routing ----

def upload_folder(content_type: str | None) -> str:
    """Media sub-folder for a declared MIME type."""
    content_type = (content_type or "").lower()
    if content_type.startswith("video/"):
        return VIDEOS
    if content_type == "application/pdf":
        return DOCS
    return IMAGES


def generate_filename(original_name: str | None) -> str:
    # Millisecond timestamp + original extension; the original name is dropped
    _, ext = os.path.splitext(original_name or "")
    return f"{int(time.time() * 1000)}{ext}"


def store_upload(uploaded_file) -> str:
    """
    Save an uploaded file under MEDIA_ROOT/<folder>/ and return its
    root-relative path ("/images/1700000000000.jpg"). Name collisions get
    a storage-generated suffix.
    """
    folder = upload_folder(getattr(uploaded_file, "content_type", ""))
    storage = FileSystemStorage(location=os.path.join(settings.MEDIA_ROOT, folder))
    name = storage.save(generate_filename(uploaded_file.name), uploaded_file)
    return f"/{folder}/{name}"


def media_path(public_path: str | None) -> str | None:
    """Filesystem path of a root-relative media path, or None if it escapes MEDIA_ROOT."""
    if not public_path:
        return None
    root = os.path.abspath(settings.MEDIA_ROOT)
    full = os.path.abspath(os.path.join(root, public_path.lstrip("/")))
    if os.path.commonpath([root, full]) != root:
        return None
    return full


# ---- Image post-processing ----

def parse_dimension(value) -> int | None:
    """Positive int from form input; blank, invalid or non-positive values give None."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _resized(img, width, height, scale_percent):
    if scale_percent:
        size = (
            max(1, round(img.width * scale_percent / 100)),
            max(1, round(img.height * scale_percent / 100)),
        )
        return img.resize(size, _RESAMPLE)
    if width and height:
        return ImageOps.fit(img, (width, height), method=_RESAMPLE, centering=(0.5, 0.5))
    if width:
        return img.resize((width, max(1, round(img.height * width / img.width))), _RESAMPLE)
    return img.resize((max(1, round(img.width * height / img.height)), height), _RESAMPLE)


def resize_image(path, width=None, height=None, scale_percent=None) -> bool:
    """
    Resize the image at `path` in place.

    scale_percent wins over explicit sizes; with both width and height the
    image is cropped to fit around its centre, with one of them it is scaled
    proportionally. The result is written next to the original and renamed
    over it. Returns False (after logging) when nothing was done.
    """
    if not path or not (width or height or scale_percent):
        return False

    tmp_path = f"{path}.tmp"
    try:
        with PILImage.open(path) as img:
            img.load()
            image_format = img.format or "PNG"
            result = _resized(img, width, height, scale_percent)

        if image_format == "JPEG" and result.mode not in ("RGB", "L"):
            result = result.convert("RGB")
        result.save(tmp_path, format=image_format)
        os.replace(tmp_path, path)
        return True
    except Exception as e:
        logger.exception("Resize failed for %s: %s", path, e)
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        return False
