# Standard Library
import logging
from collections.abc import Mapping

# Django
from django.conf import settings

# Local Imports
from . import geo
from .locales import LOCALES

logger = logging.getLogger(__name__)

LANG_SESSION_KEY = "lang"
FALLBACK_LANGUAGE = "en"


class RequestContext:
    """Per-request language and admin state, attached as `request.site_context`."""

    def __init__(self, lang, is_authenticated=False):
        self.lang = lang
        self.is_authenticated = is_authenticated

    @property
    def strings(self):
        return LOCALES.get(self.lang) or LOCALES[FALLBACK_LANGUAGE]

    def l(self, obj, field):
        return localized(obj, field, self.lang)

    def __repr__(self):
        return f"RequestContext(lang={self.lang!r}, is_authenticated={self.is_authenticated!r})"


def country_language(country: str | None) -> str:
    if country and country.upper() in settings.ZH_COUNTRIES:
        return "zh"
    return FALLBACK_LANGUAGE


def resolve_language(session, query_lang=None, ip="") -> str:
    """
    Pick the active language and keep it in `session`.

    Order: explicit query value (always stored), stored session value,
    then the geo-IP country. Lookup errors give the configured fallback
    without storing it; unsupported values are replaced by English.
    """
    if query_lang:
        session[LANG_SESSION_KEY] = query_lang

    lang = session.get(LANG_SESSION_KEY)
    if not lang:
        try:
            country, _ = geo.lookup(ip)
            lang = country_language(country)
            session[LANG_SESSION_KEY] = lang
        except Exception as e:
            logger.warning("Language detection from IP %r failed: %s", ip, e)
            lang = settings.DEFAULT_LANGUAGE_ON_GEO_ERROR

    if lang not in settings.SUPPORTED_LANGUAGES:
        lang = FALLBACK_LANGUAGE
        session[LANG_SESSION_KEY] = lang
    return lang


# ---- Bilingual field access ----

def _has_field(obj, name):
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def _field(obj, name):
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def localized(obj, field, lang):
    """
    English value of `field` when `lang` is "en" and `<field>_en` is filled,
    otherwise the native value. Records whose native column is `<field>_zh`
    (site config, support resources) are handled as well.
    """
    if obj is None:
        return ""
    if lang == "en":
        english = _field(obj, f"{field}_en")
        if english:
            return english
    native = field if _has_field(obj, field) else f"{field}_zh"
    value = _field(obj, native)
    return "" if value is None else value
