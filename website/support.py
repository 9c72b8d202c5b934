# Standard Library
import logging

# Django
from django.db import DatabaseError
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST, require_http_methods

# Local Imports
from .models import SupportResource
from .permissions import admin_required
from .utilities import DOCS, VIDEOS, store_upload, upload_folder

logger = logging.getLogger(__name__)

SUPPORT_URL = "/admin/support"


def services(request):
    try:
        resources = list(SupportResource.objects.order_by("-id"))
    except DatabaseError:
        logger.exception("Loading support resources failed")
        resources = []
    return render(request, "website/services.html", {"resources": resources})


@admin_required
def admin_support(request):
    try:
        resources = SupportResource.objects.order_by("-id")
        return render(request, "admin_console/support.html", {
            "resources": resources,
            "types": SupportResource.TYPE_CHOICES,
        })
    except DatabaseError:
        logger.exception("Loading support resources failed")
        return HttpResponseServerError("Error loading resources")


@admin_required
@require_POST
def support_add(request):
    data = request.POST
    file_path = ""
    video_path = ""

    # Videos land in video_path, PDFs in file_path; other uploads are ignored
    uploaded = request.FILES.get("file")
    if uploaded:
        folder = upload_folder(uploaded.content_type)
        if folder == VIDEOS:
            video_path = store_upload(uploaded)
        elif folder == DOCS:
            file_path = store_upload(uploaded)

    resource_type = data.get("type") or (SupportResource.TYPE_VIDEO if video_path else SupportResource.TYPE_MANUAL)
    try:
        SupportResource.objects.create(
            type=resource_type,
            title_zh=data.get("title_zh", ""),
            title_en=data.get("title_en", ""),
            description_zh=data.get("description_zh", ""),
            description_en=data.get("description_en", ""),
            file_path=file_path,
            video_path=video_path,
        )
    except DatabaseError:
        logger.exception("Adding support resource failed")
        return HttpResponseServerError("Error adding resource")
    return redirect(SUPPORT_URL)


@admin_required
@require_http_methods(["GET", "POST"])
def support_delete(request, pk):
    try:
        SupportResource.objects.filter(pk=pk).delete()
    except DatabaseError:
        logger.exception("Deleting support resource %s failed", pk)
        return HttpResponseServerError("Error deleting resource")
    return redirect(SUPPORT_URL)
