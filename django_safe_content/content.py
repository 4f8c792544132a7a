"""
Trust-tagged string wrappers for contextual autoescaping.

Each wrapper marks text that its producer vouches for in one output
context. The escaper splices a wrapper verbatim where its kind is required
and treats everything else as untrusted text.
"""

import cython

from django.utils.safestring import SafeData

__all__ = [
    "CONTENT_KIND_CSS",
    "CONTENT_KIND_HTML",
    "CONTENT_KIND_HTML_ATTR",
    "CONTENT_KIND_JS",
    "CONTENT_KIND_JS_STR_CHARS",
    "CONTENT_KIND_URL",
    "CONTENT_KINDS",
    "SafeCSS",
    "SafeContent",
    "SafeHTML",
    "SafeHTMLAttr",
    "SafeJS",
    "SafeJSStr",
    "SafeURL",
    "content_kind",
    "is_safe_content",
    "kind_from_name",
    "kind_name",
    "safe_content",
]

# text/html
# A snippet of HTML that does not start or end inside a tag, comment, entity,
# or DOCTYPE; and that does not contain any executable code from a different
# trust domain.
CONTENT_KIND_HTML = 1

# An HTML attribute like name=value.
CONTENT_KIND_HTML_ATTR = 2

# text/css
# A string in one of the CSS (stylesheet, rule, value) productions, or a
# semicolon separated list of CSS properties.
CONTENT_KIND_CSS = 3

# text/javascript
# A JS expression.
CONTENT_KIND_JS = 4

# A sequence of code units that can appear between quotes (either kind) in a
# JS program without causing a parse error and without side effects.
# Must not end inside an escape sequence.
CONTENT_KIND_JS_STR_CHARS = 5

# A properly encoded URL or portion of a URL.
CONTENT_KIND_URL = 6

CONTENT_KINDS = (
    CONTENT_KIND_HTML,
    CONTENT_KIND_HTML_ATTR,
    CONTENT_KIND_CSS,
    CONTENT_KIND_JS,
    CONTENT_KIND_JS_STR_CHARS,
    CONTENT_KIND_URL,
)

# Short names used in settings and template filter arguments.
_KIND_NAMES = {
    CONTENT_KIND_HTML: "html",
    CONTENT_KIND_HTML_ATTR: "html_attr",
    CONTENT_KIND_CSS: "css",
    CONTENT_KIND_JS: "js",
    CONTENT_KIND_JS_STR_CHARS: "js_str",
    CONTENT_KIND_URL: "url",
}
_KINDS_BY_NAME = {name: kind for kind, name in _KIND_NAMES.items()}


def kind_name(kind):
    """Return the short name of a content kind constant."""
    if type(kind) is not int:
        raise ValueError("Unknown content kind: %r" % (kind,))
    try:
        return _KIND_NAMES[kind]
    except (KeyError, TypeError):
        raise ValueError("Unknown content kind: %r" % (kind,)) from None


def kind_from_name(name):
    """
    Return the content kind constant for a short name such as "css".
    Kind constants are accepted as-is.
    """
    try:
        if type(name) is int and name in _KIND_NAMES:
            return name
        return _KINDS_BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError("Unknown content kind: %r" % (name,)) from None


class SafeContent(str):
    """
    A string whose text is known to be safe in one particular context.

    Subclasses fix ``kind``. Two values are equal only when they are of the
    same kind and carry the same text, so a stylesheet never compares equal
    to markup with identical characters. Any str operation on a value
    returns a plain, untrusted str.

    Equality is kind-aware whenever a wrapper is on the left, or a plain str
    is on the left. A Django SafeString on the left is not a SafeContent
    subclass, so Python uses its str equality and compares text only.
    """

    __slots__ = ()

    kind = None

    def __new__(cls, content=""):
        if cls.kind is None:
            raise TypeError("SafeContent cannot be instantiated directly.")
        if not isinstance(content, str):
            raise TypeError(
                "%s content must be str, not %s"
                % (cls.__name__, type(content).__name__)
            )
        return str.__new__(cls, content)

    def __eq__(self, other):
        if not isinstance(other, SafeContent) or other.kind != self.kind:
            return False
        return str.__eq__(self, other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.kind, str.__str__(self)))

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, str.__repr__(self))

    def __getnewargs__(self):
        return (str.__str__(self),)


class SafeHTML(SafeContent, SafeData):
    """
    A known safe HTML document fragment.

    It should not be used for HTML from a third-party, or HTML with unclosed
    tags or comments. The outputs of a sound HTML sanitizer and of an
    autoescaped template are fine for use here. Django's autoescaping treats
    it like any other SafeData.
    """

    __slots__ = ()

    kind = CONTENT_KIND_HTML

    def __html__(self):
        return self


class SafeHTMLAttr(SafeContent):
    """An HTML attribute from a trusted source, for example ` dir="ltr"`."""

    __slots__ = ()

    kind = CONTENT_KIND_HTML_ATTR


class SafeCSS(SafeContent):
    """
    Known safe content that matches any of:
      1. The CSS3 stylesheet production, such as `p { color: purple }`.
      2. The CSS3 rule production, such as `a[href=~"https:"].foo#bar`.
      3. CSS3 declaration productions, such as `color: red; margin: 2px`.
      4. The CSS3 value production, such as `rgba(0, 0, 255, 127)`.
    """

    __slots__ = ()

    kind = CONTENT_KIND_CSS


class SafeJS(SafeContent):
    """
    A known safe EcmaScript5 Expression, for example `(x + y * z())`.

    Template authors are responsible for ensuring that typed expressions do
    not break the intended precedence and that there is no
    statement/expression ambiguity as when passing an expression like
    "{ foo: bar() }\\n['foo']()", which is both a valid Expression and a
    valid Program with a very different meaning.
    """

    __slots__ = ()

    kind = CONTENT_KIND_JS


class SafeJSStr(SafeContent):
    """
    A sequence of characters meant to be embedded between quotes in a
    JavaScript expression. LineContinuations are not allowed:
    SafeJSStr("foo\\\\nbar") is fine, but SafeJSStr("foo\\\\\\nbar") is not.
    """

    __slots__ = ()

    kind = CONTENT_KIND_JS_STR_CHARS


class SafeURL(SafeContent):
    """
    A known safe URL or URL substring (RFC 3986).

    A URL like `javascript:checkThatFormNotEditedBeforeLeavingPage()` from a
    trusted source may go in the page, but dynamic `javascript:` URLs are a
    frequently exploited injection vector.
    """

    __slots__ = ()

    kind = CONTENT_KIND_URL


_KIND_TYPES = {
    CONTENT_KIND_HTML: SafeHTML,
    CONTENT_KIND_HTML_ATTR: SafeHTMLAttr,
    CONTENT_KIND_CSS: SafeCSS,
    CONTENT_KIND_JS: SafeJS,
    CONTENT_KIND_JS_STR_CHARS: SafeJSStr,
    CONTENT_KIND_URL: SafeURL,
}


def safe_content(kind, content):
    """
    Wrap content under the given kind (a constant or a short name).

    The caller vouches for the content; nothing about it is checked here.
    """
    return _KIND_TYPES[kind_from_name(kind)](content)


@cython.ccall
def is_safe_content(value) -> cython.bint:
    return isinstance(value, SafeContent)


@cython.ccall
def content_kind(value):
    """Return the kind of a safe value, or None for anything else."""
    if isinstance(value, SafeContent):
        return value.kind
    return None
