# Standard Library
import logging

# Django
from django.db import DatabaseError, transaction
from django.db.models import Count, Q
from django.http import HttpResponseServerError
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods

# Local Imports
from .models import Category, Product, ProductImage
from .permissions import admin_required
from .translator import safe_translate
from .utilities import media_path, parse_dimension, resize_image, store_upload

logger = logging.getLogger(__name__)

FEATURE_PHOTO_HTML = '<p><img src="{src}" class="img-fluid"></p>'


# -----------------------
# Helpers
# -----------------------

def _clean(value):
    return (value or "").strip()


def fill_english(native, english, stored=""):
    """
    Explicit English wins; otherwise a filled native value is translated;
    otherwise the stored English value is kept.
    """
    if _clean(english):
        return english
    if _clean(native):
        return safe_translate(native)
    return stored or ""


def resolve_category_en(category, category_en, stored=""):
    """Like fill_english(), but an existing Category's English name is reused before translating."""
    if _clean(category_en):
        return category_en
    category = _clean(category)
    if category:
        existing = Category.objects.filter(name=category).exclude(name_en__isnull=True).exclude(name_en="").first()
        if existing:
            return existing.name_en
        return safe_translate(category)
    return stored or ""


def append_feature_photos(features, photo_paths):
    features = features or ""
    for path in photo_paths:
        features += FEATURE_PHOTO_HTML.format(src=path)
    return features


def reconcile_main_image(product):
    """
    Keep a single is_main row per product: the newest row whose image
    equals product.image, else the newest main row. Returns the kept row.
    """
    mains = list(product.images.filter(is_main=True).order_by("-id"))
    if not mains:
        return None
    keep = next((row for row in mains if row.image == product.image), mains[0])
    product.images.filter(is_main=True).exclude(pk=keep.pk).delete()
    return keep


def _resize_main_image(path, data):
    width = parse_dimension(data.get("target_width"))
    height = parse_dimension(data.get("target_height"))
    scale = parse_dimension(data.get("scale_percent"))
    if width or height or scale:
        resize_image(media_path(path), width=width, height=height, scale_percent=scale)


def _store_uploads(files):
    """Persist the product form uploads; returns the stored paths per logical field."""
    main = files.get("image")
    video = files.get("video")
    manual = files.get("manual")
    return {
        "image": store_upload(main) if main else "",
        "video": store_upload(video) if video else "",
        "manual": store_upload(manual) if manual else "",
        "gallery": [store_upload(f) for f in files.getlist("gallery")],
        "features_photos": [store_upload(f) for f in files.getlist("features_photos")],
    }


# -----------------------
# Save Functions
# -----------------------

def save_product(data, files, existing_product=None):
    """
    Create (existing_product=None) or update a Product from form data and
    uploads. English fields are filled before anything is written; the
    product row and its image rows are written in one transaction.
    """
    is_edit = existing_product is not None
    product = existing_product or Product()

    name = _clean(data.get("name")) or (product.name if is_edit else "")
    category = _clean(data.get("category")) or (product.category if is_edit else "")
    description = data.get("description", "")
    features = data.get("features", "")

    name_en = fill_english(name, data.get("name_en"), product.name_en if is_edit else "")
    category_en = resolve_category_en(category, data.get("category_en"), product.category_en if is_edit else "")
    description_en = fill_english(description, data.get("description_en"), product.description_en if is_edit else "")
    features_en = fill_english(features, data.get("features_en"), product.features_en if is_edit else "")

    uploads = _store_uploads(files)
    if uploads["image"]:
        _resize_main_image(uploads["image"], data)

    with transaction.atomic():
        product.name = name
        product.category = category
        product.description = description
        product.features = append_feature_photos(features, uploads["features_photos"])
        product.name_en = name_en
        product.category_en = category_en
        product.description_en = description_en
        product.features_en = features_en

        if uploads["image"]:
            product.image = uploads["image"]
        if uploads["video"]:
            product.video = uploads["video"]
        if uploads["manual"]:
            product.manual = uploads["manual"]
        if is_edit:
            if "video_url" in data:
                product.video_url = data.get("video_url") or None
        else:
            product.video_url = data.get("video_url", "")
        product.save()

        if uploads["image"]:
            ProductImage.objects.create(product=product, image=uploads["image"], is_main=True)
        for path in uploads["gallery"]:
            ProductImage.objects.create(product=product, image=path, is_main=False)

        if is_edit:
            reconcile_main_image(product)

    logger.info("Product %s %s", product.pk, "updated" if is_edit else "created")
    return product


# -----------------------
# Public Views
# -----------------------

def product_list(request):
    selected = request.GET.get("category") or request.GET.get("cat") or None
    try:
        products = Product.objects.all()
        if selected:
            products = products.filter(Q(category=selected) | Q(category_en=selected))

        counts = dict(
            Product.objects.order_by().values("category").annotate(count=Count("id")).values_list("category", "count")
        )
        categories = [
            {"name": cat.name, "name_en": cat.name_en, "count": counts.get(cat.name, 0)}
            for cat in Category.objects.all()
        ]
        return render(request, "website/products.html", {
            "products": list(products),
            "categories": categories,
            "selected_category": selected,
        })
    except DatabaseError:
        logger.exception("Product list failed")
        return HttpResponseServerError("Server Error")


def product_detail(request, pk):
    product = get_object_or_404(Product, pk=pk)
    try:
        main_images = list(product.images.filter(is_main=True))
        gallery_images = list(product.images.filter(is_main=False))
    except DatabaseError:
        logger.exception("Product images lookup failed for %s", pk)
        return HttpResponseServerError("Server Error")
    return render(request, "website/product_detail.html", {
        "product": product,
        "main_images": main_images,
        "gallery_images": gallery_images,
    })


# -----------------------
# Admin Views
# -----------------------

@admin_required
def admin_products(request):
    try:
        products = Product.objects.order_by("-id")
        return render(request, "admin_console/products.html", {
            "products": products,
            "upload_success": request.GET.get("upload_success") == "1",
        })
    except DatabaseError:
        logger.exception("Admin product list failed")
        return HttpResponseServerError("Error loading products")


def _form_context(product=None):
    return {
        "product": product,
        "categories": Category.objects.all(),
        "main_images": product.images.filter(is_main=True) if product else [],
        "gallery_images": product.images.filter(is_main=False) if product else [],
    }


@admin_required
@require_http_methods(["GET", "POST"])
def product_add(request):
    if request.method == "GET":
        return render(request, "admin_console/product_form.html", _form_context())

    if not _clean(request.POST.get("name")) or not _clean(request.POST.get("category")):
        return redirect("/admin/product/add")
    try:
        save_product(request.POST, request.FILES)
    except DatabaseError:
        logger.exception("Adding product failed")
        return HttpResponseServerError("Error adding product")
    return redirect("/admin/products?upload_success=1")


@admin_required
@require_http_methods(["GET", "POST"])
def product_edit(request, pk):
    product = Product.objects.filter(pk=pk).first()
    if product is None:
        return redirect("/admin/products")

    if request.method == "GET":
        return render(request, "admin_console/product_form.html", _form_context(product))

    try:
        save_product(request.POST, request.FILES, existing_product=product)
    except DatabaseError:
        logger.exception("Updating product %s failed", pk)
        return HttpResponseServerError("Error updating product")
    return redirect("/admin/dashboard")


@admin_required
@require_http_methods(["GET", "POST"])
def product_delete(request, pk):
    try:
        deleted, _ = Product.objects.filter(pk=pk).delete()
        if deleted:
            logger.info("Product %s deleted", pk)
    except DatabaseError:
        logger.exception("Deleting product %s failed", pk)
    return redirect("/admin/dashboard")


@admin_required
@require_http_methods(["GET", "POST"])
def product_image_delete(request, pk):
    try:
        ProductImage.objects.filter(pk=pk).delete()
    except DatabaseError:
        logger.exception("Deleting product image %s failed", pk)
    referer = request.META.get("HTTP_REFERER", "")
    if not url_has_allowed_host_and_scheme(referer, allowed_hosts={request.get_host()}):
        referer = "/admin/products"
    return redirect(referer)
