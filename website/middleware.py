# Standard Library
import logging

# Django
from django.conf import settings
from django.db import DatabaseError

# Local Imports
from . import geo
from .localization import RequestContext, resolve_language
from .models import AccessLog
from .permissions import is_admin

logger = logging.getLogger(__name__)


def is_logged_path(path: str) -> bool:
    # Prefixes match whole path segments, so /administrator is still logged
    return not any(
        path == prefix or path.startswith(prefix + "/")
        for prefix in settings.ACCESS_LOG_EXCLUDED_PREFIXES
    )


class AccessLogMiddleware:
    """Append one AccessLog row per page request; never fails the request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if is_logged_path(request.path):
            self._record(request)
        return self.get_response(request)

    def _record(self, request):
        ip = geo.client_ip(request)
        country, city = geo.lookup_location(ip)
        try:
            AccessLog.objects.create(
                ip=ip,
                country=country,
                city=city,
                path=request.path[:2048],
                method=request.method,
                user_agent=request.META.get("HTTP_USER_AGENT", "")[:512],
            )
        except DatabaseError as e:
            logger.warning("Access logging failed for %s: %s", request.path, e)


class LocaleMiddleware:
    """Resolve the active language and attach `request.site_context`."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        lang = resolve_language(
            request.session,
            query_lang=request.GET.get("lang"),
            ip=geo.client_ip(request),
        )
        request.site_context = RequestContext(lang, is_authenticated=is_admin(request))
        return self.get_response(request)
