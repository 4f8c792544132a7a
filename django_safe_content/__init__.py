from .content import (
    CONTENT_KIND_CSS,
    CONTENT_KIND_HTML,
    CONTENT_KIND_HTML_ATTR,
    CONTENT_KIND_JS,
    CONTENT_KIND_JS_STR_CHARS,
    CONTENT_KIND_URL,
    CONTENT_KINDS,
    SafeContent,
    SafeCSS,
    SafeHTML,
    SafeHTMLAttr,
    SafeJS,
    SafeJSStr,
    SafeURL,
    content_kind,
    is_safe_content,
    kind_from_name,
    kind_name,
    safe_content,
)

__version__ = "0.1.0"
