from functools import wraps

from django.shortcuts import redirect
from rest_framework.permissions import BasePermission

AUTH_SESSION_KEY = "is_authenticated"
LOGIN_URL = "/admin/login"


def is_admin(request):
    session = getattr(request, "session", None)
    return bool(session and session.get(AUTH_SESSION_KEY))


def admin_required(view_func):
    """Redirect anonymous visitors of admin views to the login page."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request):
            return redirect(LOGIN_URL)
        return view_func(request, *args, **kwargs)
    return _wrapped


class AdminSessionPermission(BasePermission):
    def has_permission(self, request, view):
        return is_admin(request)
