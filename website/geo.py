# Standard Library
import logging
from functools import lru_cache

# Third-party
import geoip2.database
from geoip2.errors import AddressNotFoundError

# Django
from django.conf import settings

logger = logging.getLogger(__name__)

IPV4_MAPPED_PREFIX = "::ffff:"


@lru_cache(maxsize=4)
def _reader(path: str):
    return geoip2.database.Reader(path)


def normalize_ip(ip: str | None) -> str:
    ip = (ip or "").strip()
    if ip.startswith(IPV4_MAPPED_PREFIX):
        ip = ip[len(IPV4_MAPPED_PREFIX):]
    return ip


def client_ip(request) -> str:
    """First X-Forwarded-For entry, else REMOTE_ADDR, without the ::ffff: prefix."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return normalize_ip(forwarded.split(",")[0])
    return normalize_ip(request.META.get("REMOTE_ADDR", ""))


def lookup(ip: str) -> tuple[str, str]:
    """
    Return (country_iso_code, city_name) for `ip`.

    An unconfigured database, an empty address or an address missing from
    the database all give ("", ""). Reader failures (unreadable database,
    malformed address) are raised to the caller.
    """
    path = getattr(settings, "GEOIP_DATABASE", "")
    if not path or not ip:
        return "", ""
    try:
        response = _reader(path).city(ip)
    except AddressNotFoundError:
        return "", ""
    return response.country.iso_code or "", response.city.name or ""


def lookup_location(ip: str) -> tuple[str, str]:
    """Same as lookup(), but failures are logged and give ("", "")."""
    try:
        return lookup(ip)
    except Exception as e:
        logger.warning("Geo-IP lookup failed for %r: %s", ip, e)
        return "", ""
