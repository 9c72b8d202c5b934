# Standard Library
import logging

# Django
from django.db import DatabaseError
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST, require_http_methods

# Local Imports
from .models import Category, Product
from .permissions import admin_required

logger = logging.getLogger(__name__)

CATEGORIES_URL = "/admin/categories"


@admin_required
def admin_categories(request):
    try:
        return render(request, "admin_console/categories.html", {
            "categories": Category.objects.all(),
            "products": Product.objects.order_by("-id"),
        })
    except DatabaseError:
        logger.exception("Loading categories failed")
        return HttpResponseServerError("Error loading categories")


@admin_required
@require_POST
def category_add(request):
    name = (request.POST.get("name") or "").strip()
    if not name:
        return redirect(CATEGORIES_URL)
    try:
        Category.objects.create(name=name, name_en=(request.POST.get("name_en") or "").strip())
    except DatabaseError:
        logger.exception("Adding category %r failed", name)
        return HttpResponseServerError("Error adding category")
    return redirect(CATEGORIES_URL)


@admin_required
@require_POST
def category_update(request, pk):
    name = (request.POST.get("name") or "").strip()
    try:
        category = Category.objects.filter(pk=pk).first()
        if category and name:
            category.name = name
            category.name_en = (request.POST.get("name_en") or "").strip()
            category.save(update_fields=["name", "name_en"])
    except DatabaseError:
        logger.exception("Updating category %s failed", pk)
    return redirect(CATEGORIES_URL)


@admin_required
@require_http_methods(["GET", "POST"])
def category_delete(request, pk):
    try:
        Category.objects.filter(pk=pk).delete()
    except DatabaseError:
        logger.exception("Deleting category %s failed", pk)
    return redirect(CATEGORIES_URL)
