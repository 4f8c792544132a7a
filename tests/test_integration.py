"""Integration tests rendering a realistic page that mixes safe values of
every kind with untrusted data.
"""

import pytest
from django.template import engines

from django_safe_content import SafeCSS, SafeHTML, SafeHTMLAttr, SafeJS, SafeJSStr, SafeURL


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_books():
    return [
        {
            # Produced by a trusted sanitizer.
            "title": "Dune",
            "blurb": SafeHTML("A <em>desert</em> planet."),
            "cover": SafeURL("https://img.example.com/dune.png"),
            "accent": SafeCSS("#c2b280"),
            "direction": SafeHTMLAttr(' dir="ltr"'),
            "on_buy": SafeJS("cart.add(1)"),
            "slug": SafeJSStr("dune"),
        },
        {
            # Straight from user input.
            "title": "<script>alert(1)</script>",
            "blurb": "<em>mine</em>",
            "cover": "javascript:alert(1)",
            "accent": "red;background:url(x)",
            "direction": " onmouseover=alert(1)",
            "on_buy": "alert(1)",
            "slug": "x');alert('",
        },
    ]


BOOK_TEMPLATE = (
    "{% load safe_content %}"
    "{% for book in books %}"
    "<div{{ book.direction|escape_for:'html_attr' }}"
    " style=\"color: {{ book.accent|escape_for:'css' }}\">"
    "<h2>{{ book.title }}</h2>"
    "<p>{{ book.blurb }}</p>"
    "<img src=\"/proxy?u={{ book.cover|escape_for:'url' }}\">"
    "<button data-kind=\"{{ book.on_buy|content_kind }}\""
    " onclick=\"{{ book.on_buy|escape_for:'js' }}\">Buy</button>"
    "<span data-slug=\"{{ book.slug|escape_for:'js_str' }}\"></span>"
    "</div>"
    "{% endfor %}"
)


@pytest.fixture
def stock():
    return engines["django"]


# ---------------------------------------------------------------------------
# Integration tests
# ---------------------------------------------------------------------------

class TestCatalogPage:
    def test_trusted_book(self, stock):
        result = stock.from_string(BOOK_TEMPLATE).render({"books": _make_books()[:1]})
        assert result == (
            '<div dir="ltr" style="color: #c2b280">'
            "<h2>Dune</h2>"
            "<p>A <em>desert</em> planet.</p>"
            '<img src="/proxy?u=https://img.example.com/dune.png">'
            '<button data-kind="js" onclick="cart.add(1)">Buy</button>'
            '<span data-slug="dune"></span>'
            "</div>"
        )

    def test_untrusted_book(self, stock):
        result = stock.from_string(BOOK_TEMPLATE).render({"books": _make_books()[1:]})
        assert result == (
            '<divzSafehtmlz style="color: zSafehtmlz">'
            "<h2>&lt;script&gt;alert(1)&lt;/script&gt;</h2>"
            "<p>&lt;em&gt;mine&lt;/em&gt;</p>"
            '<img src="/proxy?u=javascript%3Aalert%281%29">'
            '<button data-kind="" onclick="&quot;alert(1)&quot;">Buy</button>'
            '<span data-slug="x\\u0027)\\u003Balert(\\u0027"></span>'
            "</div>"
        )

    def test_no_untrusted_markup_survives(self, stock):
        result = stock.from_string(BOOK_TEMPLATE).render({"books": _make_books()})
        assert "<script>" not in result
        assert "javascript:" not in result
        assert "onmouseover" not in result
        assert result.count("<em>") == 1
