# Standard Library
import logging

# Django
from django.db import DatabaseError
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST, require_http_methods

# Local Imports
from .models import CarouselImage, Product
from .permissions import admin_required
from .utilities import IMAGES, media_path, parse_dimension, resize_image, store_upload, upload_folder

logger = logging.getLogger(__name__)

FEATURED_PRODUCT_COUNT = 3
HOME_CAROUSEL_COUNT = 6
MAX_CAROUSEL_UPLOADS = 10
CAROUSEL_URL = "/admin/carousel"


def _resize_options(data):
    return {
        "width": parse_dimension(data.get("target_width")),
        "height": parse_dimension(data.get("target_height")),
        "scale_percent": parse_dimension(data.get("scale_percent")),
    }


# ---- Public ----

def home(request):
    try:
        products = list(Product.objects.all()[:FEATURED_PRODUCT_COUNT])
        carousel_images = list(CarouselImage.objects.order_by("-id")[:HOME_CAROUSEL_COUNT])
    except DatabaseError:
        logger.exception("Home page query failed")
        return HttpResponseServerError("Server Error")
    return render(request, "website/index.html", {
        "products": products,
        "carousel_images": carousel_images,
    })


# ---- Admin: carousel ----

@admin_required
def admin_carousel(request):
    try:
        items = CarouselImage.objects.order_by("-id")
        return render(request, "admin_console/carousel.html", {"items": items})
    except DatabaseError:
        logger.exception("Loading carousel failed")
        return HttpResponseServerError("Error loading carousel")


@admin_required
@require_POST
def carousel_add(request):
    title = request.POST.get("title", "")
    caption = request.POST.get("caption", "")
    options = _resize_options(request.POST)

    files = [f for f in request.FILES.getlist("images") if upload_folder(f.content_type) == IMAGES]
    try:
        for uploaded in files[:MAX_CAROUSEL_UPLOADS]:
            path = store_upload(uploaded)
            if any(options.values()):
                resize_image(media_path(path), **options)
            CarouselImage.objects.create(image=path, title=title, caption=caption)
    except DatabaseError:
        logger.exception("Adding carousel image failed")
        return HttpResponseServerError("Error adding carousel image")
    return redirect(CAROUSEL_URL)


@admin_required
def carousel_edit(request, pk):
    item = CarouselImage.objects.filter(pk=pk).first()
    if item is None:
        return redirect(CAROUSEL_URL)
    return render(request, "admin_console/carousel_edit.html", {"item": item})


@admin_required
@require_POST
def carousel_resize(request, pk):
    """Update title/caption and optionally resize the stored image in place."""
    try:
        item = CarouselImage.objects.filter(pk=pk).first()
        if item is None:
            return redirect(CAROUSEL_URL)
        item.title = request.POST.get("title", "")
        item.caption = request.POST.get("caption", "")
        item.save(update_fields=["title", "caption"])
    except DatabaseError:
        logger.exception("Updating carousel item %s failed", pk)
        return HttpResponseServerError("Error resizing item")

    options = _resize_options(request.POST)
    if item.image and any(options.values()):
        resize_image(media_path(item.image), **options)
    return redirect(CAROUSEL_URL)


@admin_required
@require_http_methods(["GET", "POST"])
def carousel_delete(request, pk):
    try:
        CarouselImage.objects.filter(pk=pk).delete()
    except DatabaseError:
        logger.exception("Deleting carousel item %s failed", pk)
    return redirect(CAROUSEL_URL)
