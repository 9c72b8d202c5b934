# ---- SITE CONTENT (contact / about / services) ----
import logging

from django.db import DatabaseError
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from .models import SiteConfig
from .permissions import admin_required

logger = logging.getLogger(__name__)


def about(request):
    return render(request, "website/about.html")


def contact(request):
    return render(request, "website/contact.html", {
        "message_success": request.GET.get("message_success", ""),
    })


def _config_form(request, key, template, url, label):
    """GET renders the stored record (or an empty form); POST upserts exactly the key's fields."""
    if request.method == "POST":
        try:
            SiteConfig.upsert(key, request.POST)
        except DatabaseError:
            logger.exception("Updating %s failed", key)
            return HttpResponseServerError(f"Error updating {label}")
        logger.info("Site config %s updated", key)
        return redirect(url)

    try:
        config = SiteConfig.objects.filter(key=key).first() or SiteConfig(key=key)
    except DatabaseError:
        logger.exception("Loading %s failed", key)
        return HttpResponseServerError(f"Error loading {label}")
    return render(request, template, {
        "config": config,
        "fields": SiteConfig.FIELDS_BY_KEY[key],
    })


@admin_required
@require_http_methods(["GET", "POST"])
def admin_contact(request):
    return _config_form(request, SiteConfig.CONTACT, "admin_console/contact_form.html", "/admin/contact", "contact info")


@admin_required
@require_http_methods(["GET", "POST"])
def admin_about(request):
    return _config_form(request, SiteConfig.ABOUT, "admin_console/about_form.html", "/admin/about", "about info")


@admin_required
@require_http_methods(["GET", "POST"])
def admin_services(request):
    return _config_form(request, SiteConfig.SERVICES, "admin_console/services_form.html", "/admin/services", "services info")
