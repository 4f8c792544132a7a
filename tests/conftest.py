import importlib.util
from pathlib import Path

import pytest
from django.template import engines

import django_safe_content


@pytest.fixture
def django_template():
    return engines["django"].from_string


@pytest.fixture
def assert_render(django_template):
    """Render with the stock engine and assert the output."""

    def _assert(template_string, context, expected):
        result = django_template(
            "{% load safe_content %}" + template_string
        ).render(context)
        assert result == expected

    return _assert


@pytest.fixture
def source_module():
    """
    Load a package module from its .py source, so the pure-Python code path
    is exercised even when a compiled extension is installed.
    """

    def _load(name):
        path = Path(django_safe_content.__file__).with_name(name + ".py")
        spec = importlib.util.spec_from_file_location(
            "django_safe_content._source_" + name, path
        )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
