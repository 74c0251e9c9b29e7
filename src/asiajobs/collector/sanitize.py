"""Free-text cleanup for job descriptions."""

import re

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 280
ELLIPSIS = "…"

_TAG_RE = re.compile(r"<[^>]*>")
_NBSP_RE = re.compile(r"&nbsp;|&#160;")
_OTHER_ENTITY_RE = re.compile(r"&#\d+;|&[a-z]+;", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_PUNCTUATION_ONLY_RE = re.compile(r"^[.\-–—•·\s]+$")


def clean_text(raw) -> str:
    """Strip markup and entities, collapse whitespace."""
    if not raw:
        return ""
    text = _TAG_RE.sub(" ", str(raw))
    text = _NBSP_RE.sub(" ", text)
    text = text.replace("&amp;", "&").replace("&lt;", "<").replace("&gt;", ">")
    text = _OTHER_ENTITY_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def sanitize_description(raw) -> str:
    """Clean a description for display.

    Returns "" for near-empty or punctuation-only text. Anything longer than
    DESCRIPTION_MAX_LENGTH is cut to 277 characters plus an ellipsis.
    """
    text = clean_text(raw)
    if len(text) < DESCRIPTION_MIN_LENGTH or _PUNCTUATION_ONLY_RE.match(text):
        return ""
    if len(text) > DESCRIPTION_MAX_LENGTH:
        return text[: DESCRIPTION_MAX_LENGTH - 3] + ELLIPSIS
    return text
