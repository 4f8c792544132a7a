"""Template filters for producing and consuming safe values."""

from django import template
from django.utils.safestring import mark_safe

from django_safe_content.content import (
    CONTENT_KIND_CSS,
    CONTENT_KIND_HTML,
    CONTENT_KIND_HTML_ATTR,
    CONTENT_KIND_JS,
    CONTENT_KIND_JS_STR_CHARS,
    CONTENT_KIND_URL,
    content_kind as _content_kind,
    kind_from_name,
    kind_name,
)
from django_safe_content.escaping import escape_for as _escape_for
from django_safe_content.safestring import mark_safe_as

register = template.Library()


# --- producers: the template author vouches for the value ---


@register.filter
def safe_html(value):
    return mark_safe_as(value, CONTENT_KIND_HTML)


@register.filter
def safe_html_attr(value):
    return mark_safe_as(value, CONTENT_KIND_HTML_ATTR)


@register.filter
def safe_css(value):
    return mark_safe_as(value, CONTENT_KIND_CSS)


@register.filter
def safe_js(value):
    return mark_safe_as(value, CONTENT_KIND_JS)


@register.filter
def safe_js_str(value):
    return mark_safe_as(value, CONTENT_KIND_JS_STR_CHARS)


@register.filter
def safe_url(value):
    return mark_safe_as(value, CONTENT_KIND_URL)


# --- consumers ---


@register.filter
def escape_for(value, kind):
    """
    Render value for the given context: {{ value|escape_for:"css" }}.

    Output for html and html_attr is complete and marked safe. Output for
    the other contexts is still subject to the template's autoescaping.
    """
    try:
        kind = kind_from_name(kind)
    except ValueError as exc:
        raise template.TemplateSyntaxError(
            "escape_for: %s. Must be one of: html, html_attr, css, js, "
            "js_str, url." % exc
        ) from exc
    result = _escape_for(value, kind)
    if kind in (CONTENT_KIND_HTML, CONTENT_KIND_HTML_ATTR):
        return mark_safe(result)
    return result


@register.filter
def content_kind(value):
    """Return the kind name of a safe value, or "" for anything else."""
    kind = _content_kind(value)
    if kind is None:
        return ""
    return kind_name(kind)
