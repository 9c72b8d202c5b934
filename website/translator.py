# Standard Library
import logging

# Third-party
from deep_translator import GoogleTranslator

logger = logging.getLogger(__name__)


def safe_translate(text, target="en", source="auto"):
    """Machine-translate `text`; on any failure the original text is returned."""
    if not text:
        return ""
    try:
        translated = GoogleTranslator(source=source, target=target).translate(text)
    except Exception as e:
        logger.warning("Auto-translation failed: %s", e)
        return text
    return translated or text
