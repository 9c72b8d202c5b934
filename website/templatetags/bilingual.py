from django import template

from ..localization import localized, FALLBACK_LANGUAGE

register = template.Library()


@register.simple_tag(takes_context=True)
def l(context, obj, field):
    """{% l product "name" %} -> English or native value for the active language."""
    return localized(obj, field, context.get("lang", FALLBACK_LANGUAGE))
