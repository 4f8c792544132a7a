"""
Producers for safe values.

Re-exports Django's SafeData/SafeString types for isinstance compatibility
and provides kind-aware variants of mark_safe().
"""

import cython

from django.utils.safestring import SafeData, SafeString

from .content import CONTENT_KIND_HTML, SafeHTML, content_kind, kind_from_name, safe_content

__all__ = ["SafeData", "SafeString", "mark_safe", "mark_safe_as"]


@cython.ccall
def mark_safe_as(s, kind):
    """
    Mark a string as safe for the given content kind.

    A value already carrying that kind is returned unchanged.
    """
    kind = kind_from_name(kind)
    if content_kind(s) == kind:
        return s
    if kind == CONTENT_KIND_HTML and hasattr(s, "__html__"):
        return SafeHTML(str(s.__html__()))
    return safe_content(kind, str(s))


@cython.ccall
def mark_safe(s):
    """Mark a string as safe for HTML output."""
    return mark_safe_as(s, CONTENT_KIND_HTML)
