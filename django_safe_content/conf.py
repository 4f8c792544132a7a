"""
Settings for contextual escaping of safe values.

Reads the SAFE_CONTENT dict from Django settings once, validates it, and
caches the result until setting_changed reports a new value.
"""

import cython

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .content import CONTENT_KINDS, kind_from_name

__all__ = ["DEFAULTS", "get_config"]

DEFAULTS = {
    # required kind name -> names of other kinds accepted verbatim there
    "COMPATIBLE_KINDS": {},
    # kind name -> dotted path of the escaper for untrusted values
    "ESCAPERS": {},
    # emitted in place of untrusted values that cannot be made safe
    "INNOCUOUS_OUTPUT": "zSafehtmlz",
}

# Cached merged configuration: None = not yet loaded.
_config: object = None


def _kind(name, key):
    try:
        return kind_from_name(name)
    except ValueError:
        raise ImproperlyConfigured(
            "SAFE_CONTENT[%r] refers to unknown content kind %r." % (key, name)
        ) from None


@cython.cfunc
def _load():
    user = getattr(settings, "SAFE_CONTENT", None) or {}
    unknown = set(user) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            "Unknown SAFE_CONTENT keys: %s" % ", ".join(sorted(unknown))
        )

    compatible = {kind: frozenset((kind,)) for kind in CONTENT_KINDS}
    for required, accepted in user.get("COMPATIBLE_KINDS", {}).items():
        if isinstance(accepted, str):
            accepted = [accepted]
        kind = _kind(required, "COMPATIBLE_KINDS")
        compatible[kind] = compatible[kind] | frozenset(
            _kind(name, "COMPATIBLE_KINDS") for name in accepted
        )

    escapers = {}
    for name, path in user.get("ESCAPERS", {}).items():
        kind = _kind(name, "ESCAPERS")
        if callable(path):
            escapers[kind] = path
            continue
        try:
            escapers[kind] = import_string(path)
        except ImportError as exc:
            raise ImproperlyConfigured(
                "SAFE_CONTENT['ESCAPERS'][%r] could not be imported: %s"
                % (name, exc)
            ) from exc

    innocuous = user.get("INNOCUOUS_OUTPUT", DEFAULTS["INNOCUOUS_OUTPUT"])
    if not isinstance(innocuous, str):
        raise ImproperlyConfigured("SAFE_CONTENT['INNOCUOUS_OUTPUT'] must be a str.")

    return {
        "COMPATIBLE_KINDS": compatible,
        "ESCAPERS": escapers,
        "INNOCUOUS_OUTPUT": innocuous,
    }


@cython.ccall
def get_config():
    """Return the validated SAFE_CONTENT configuration."""
    global _config
    if _config is None:
        _config = _load()
    return _config


@receiver(setting_changed)
def reset_config(*, setting, **kwargs):
    global _config
    if setting == "SAFE_CONTENT":
        _config = None
