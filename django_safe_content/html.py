"""
HTML escaping that respects content kinds.

Only SafeHTML (and Django's own SafeData) is trusted in HTML text. Safe
values of any other kind are escaped like plain text.
"""

import cython
import html as _html

from django.utils.safestring import SafeData

from .content import SafeContent, SafeHTML

__all__ = ["conditional_escape", "escape", "format_html"]


@cython.ccall
def escape(text):
    """
    Return the given text with ampersands, quotes and angle brackets encoded
    for use in HTML. Always escape input, even if already marked safe.
    """
    return SafeHTML(_html.escape(str(text)))


@cython.cfunc
def _fast_escape_str(s: str):
    """
    Scan string chars for <, >, &, ", '.
    If none found, return the original string unchanged.
    """
    c: cython.Py_UCS4
    for c in s:
        if c == "<" or c == ">" or c == "&" or c == '"' or c == "'":
            return _html.escape(s)
    return s


@cython.ccall
def conditional_escape(text):
    """
    Similar to escape(), except that it doesn't operate on pre-escaped strings.

    SafeHTML and Django SafeData pass through. Safe values of other kinds
    are not HTML and get escaped.
    """
    if isinstance(text, SafeContent):
        if isinstance(text, SafeHTML):
            return text
        return SafeHTML(_fast_escape_str(str(text)))
    if isinstance(text, SafeData):
        return text
    if hasattr(text, "__html__"):
        return SafeHTML(str(text.__html__()))
    return SafeHTML(_fast_escape_str(str(text)))


def format_html(format_string, *args, **kwargs):
    """
    Similar to str.format, but pass all arguments through conditional_escape(),
    and wrap the result as SafeHTML. This function should be used instead
    of str.format or % interpolation to build up small HTML fragments.
    """
    args_safe = [conditional_escape(arg) for arg in args]
    kwargs_safe = {k: conditional_escape(v) for k, v in kwargs.items()}
    return SafeHTML(format_string.format(*args_safe, **kwargs_safe))
