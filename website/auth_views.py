# Standard Library
import logging

# Django
from django.db import DatabaseError
from django.http import HttpResponseServerError
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

# Local Imports
from .models import AdminUser
from .permissions import AUTH_SESSION_KEY, LOGIN_URL, admin_required, is_admin

logger = logging.getLogger(__name__)

LOGIN_TEMPLATE = "admin_console/login.html"
INVALID_CREDENTIALS = "Invalid credentials"


def admin_root(request):
    if is_admin(request):
        return redirect("/admin/products?upload_success=1")
    return redirect(LOGIN_URL)


@require_http_methods(["GET", "POST"])
def login(request):
    if request.method == "GET":
        return render(request, LOGIN_TEMPLATE, {"error": None})

    username = (request.POST.get("username") or "").strip()
    password = request.POST.get("password") or ""
    try:
        user = AdminUser.objects.filter(username=username).first()
    except DatabaseError:
        logger.exception("Admin login lookup failed")
        return render(request, LOGIN_TEMPLATE, {"error": "Server error"})

    if user is None or not user.check_password(password):
        logger.warning("Failed admin login for %r", username)
        return render(request, LOGIN_TEMPLATE, {"error": INVALID_CREDENTIALS})

    request.session.cycle_key()
    request.session[AUTH_SESSION_KEY] = True
    logger.info("Admin %s logged in", user.username)
    return redirect("/admin/dashboard")


def logout(request):
    request.session.flush()
    return redirect("/")


@admin_required
@require_http_methods(["GET", "POST"])
def account(request):
    """The single admin account: rename it and, when a password is given, change it."""
    try:
        user = AdminUser.objects.order_by("id").first()
        if request.method == "GET":
            return render(request, "admin_console/account.html", {"user": user})

        username = (request.POST.get("username") or "").strip()
        password = request.POST.get("password") or ""
        if user is None:
            if not username or not password:
                return redirect("/admin/account")
            user = AdminUser(username=username)
        elif username:
            user.username = username
        if password:
            user.set_password(password)
        user.save()
    except DatabaseError:
        logger.exception("Updating admin account failed")
        return HttpResponseServerError("Error updating account")
    logger.info("Admin account %s updated", user.username)
    return redirect("/admin/account")
