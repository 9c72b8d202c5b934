# Standard Library
import logging

# Django
from django.db import DatabaseError

# Local Imports
from .localization import RequestContext, FALLBACK_LANGUAGE
from .models import SiteConfig

logger = logging.getLogger(__name__)

DEFAULT_WHATSAPP = "+8613800000000"


def _load_config(key):
    try:
        return SiteConfig.load(key)
    except DatabaseError as e:
        logger.error("Failed to load site config %s: %s", key, e)
        return SiteConfig(key=key, **SiteConfig.DEFAULTS[key])


def site(request):
    """Shared template context: language, UI strings, admin flag and site content."""
    ctx = getattr(request, "site_context", None) or RequestContext(FALLBACK_LANGUAGE)

    contact = _load_config(SiteConfig.CONTACT)
    if not contact.whatsapp:
        contact.whatsapp = DEFAULT_WHATSAPP

    return {
        "site_context": ctx,
        "lang": ctx.lang,
        "t": ctx.strings,
        "is_authenticated": ctx.is_authenticated,
        "site_config": contact,
        "about_config": _load_config(SiteConfig.ABOUT),
        "services_config": _load_config(SiteConfig.SERVICES),
    }
