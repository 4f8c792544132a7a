"""
Routing of values into output contexts.

At each interpolation point the escaper asks one question: does the value
carry a kind accepted where this context is required? If so its text is
spliced verbatim, otherwise it goes through the context's escaper.
"""

import logging
import re
from urllib.parse import quote

import cython

from django.utils.html import escape as _escape_html
from django.utils.html import escapejs
from django.utils.safestring import SafeData

from .conf import get_config
from .content import (
    CONTENT_KIND_CSS,
    CONTENT_KIND_HTML,
    CONTENT_KIND_HTML_ATTR,
    CONTENT_KIND_JS,
    CONTENT_KIND_JS_STR_CHARS,
    CONTENT_KIND_URL,
    content_kind,
    kind_from_name,
    kind_name,
)

__all__ = [
    "accepts",
    "compatible_kinds",
    "escape_css_value",
    "escape_for",
    "escape_html",
    "escape_js_str",
    "escape_js_value",
    "escape_url",
    "escaper_for",
    "filter_html_attribute",
]

logger = logging.getLogger("django_safe_content")

# An attribute name that cannot carry script or a URL, or a text direction.
_HTML_ATTRIBUTE = re.compile(
    r"(?i)\A(?!style|on|action|archive|background|cite|classid|codebase|data"
    r"|dsync|formaction|href|longdesc|src|usemap)"
    r"(?:[a-z0-9_$:-]+|dir=(?:ltr|rtl))\Z"
)

# Identifiers, keywords, numbers with an optional unit, and hex colours.
_CSS_VALUE = re.compile(
    r"\A(?:[-+]?(?:\d+\.?\d*|\.\d+)(?:[A-Za-z]+|%)?"
    r"|-?[A-Za-z_][A-Za-z0-9_\-]*"
    r"|#[0-9A-Fa-f]{3,8})\Z"
)

# Identifiers that browsers have historically evaluated as code.
_CSS_IDENT_DISALLOWED = re.compile(r"(?i)\A-?(?:expression|(?:moz-?)?binding)")


def escape_html(value):
    return _escape_html(str(value))


def filter_html_attribute(value):
    """
    Pass an attribute name that cannot carry script or a URL, or a dir=
    setting. Empty text passes. Replace anything else with the innocuous
    output.
    """
    value = str(value)
    if not value or _HTML_ATTRIBUTE.match(value):
        return value
    return get_config()["INNOCUOUS_OUTPUT"]


def escape_css_value(value):
    """
    Pass a CSS identifier, keyword, quantity or hex colour, or empty text.
    Replace anything else with the innocuous output.
    """
    value = str(value)
    if not value or (
        _CSS_VALUE.match(value) and not _CSS_IDENT_DISALLOWED.match(value)
    ):
        return value
    return get_config()["INNOCUOUS_OUTPUT"]


def escape_js_value(value):
    """Encode a value as a quoted JavaScript string literal."""
    return '"%s"' % escapejs(str(value))


def escape_js_str(value):
    return str(escapejs(str(value)))


def escape_url(value):
    """Percent encode everything outside the URL unreserved set."""
    return quote(str(value), safe="")


_DEFAULT_ESCAPERS = {
    CONTENT_KIND_HTML: escape_html,
    CONTENT_KIND_HTML_ATTR: filter_html_attribute,
    CONTENT_KIND_CSS: escape_css_value,
    CONTENT_KIND_JS: escape_js_value,
    CONTENT_KIND_JS_STR_CHARS: escape_js_str,
    CONTENT_KIND_URL: escape_url,
}


@cython.ccall
def compatible_kinds(kind):
    """Return the kinds whose values are spliced verbatim where kind is required."""
    return get_config()["COMPATIBLE_KINDS"][kind_from_name(kind)]


@cython.ccall
def escaper_for(kind):
    kind = kind_from_name(kind)
    return get_config()["ESCAPERS"].get(kind, _DEFAULT_ESCAPERS[kind])


@cython.cfunc
def _value_kind(value):
    kind = content_kind(value)
    if kind is None and isinstance(value, SafeData):
        return CONTENT_KIND_HTML
    return kind


@cython.ccall
def accepts(value, kind) -> cython.bint:
    """Return whether value is trusted verbatim where kind is required."""
    value_kind = _value_kind(value)
    return value_kind is not None and value_kind in compatible_kinds(kind)


def escape_for(value, kind):
    """
    Render value for a context that requires kind.

    Safe values of an accepted kind come out verbatim. Everything else,
    including safe values of other kinds, is escaped for the context.
    """
    kind = kind_from_name(kind)
    if value is None:
        return ""
    if accepts(value, kind):
        return str(value)
    value_kind = _value_kind(value)
    if value_kind is not None:
        logger.debug(
            "Escaping %s value for %s context.",
            kind_name(value_kind),
            kind_name(kind),
        )
    return str(escaper_for(kind)(value))
