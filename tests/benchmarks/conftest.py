import pytest

from django_safe_content import SafeCSS


@pytest.fixture
def css_values():
    """Half trusted stylesheet values, half untrusted text."""
    return [
        SafeCSS(f"rgba({i % 256}, 0, 0, 1)") if i % 2 else f"{i}px"
        for i in range(1000)
    ]
