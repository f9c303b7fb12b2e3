"""Locale files: flat ``key -> string`` JSON mappings under ``locales/``."""
import json
from dataclasses import dataclass, field
from pathlib import Path

FALLBACK_LOCALE = "en-US"


@dataclass
class Locale:
    name: str
    strings: dict = field(default_factory=dict)


def load_locale(locales_dir, name):
    """Return the mapping in ``<locales_dir>/<name>.json``, or None if absent."""
    path = Path(locales_dir) / f"{name}.json"
    if not path.exists():
        return None
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def merge_locales(default, active):
    """Active strings override default ones; either side may be None."""
    return {**(default or {}), **(active or {})}


def load_active_locale(locales_dir, name):
    """Load ``name`` on top of the fallback locale.

    Keys missing from the requested locale keep their fallback text, and a
    missing locale file behaves like an empty one.
    """
    default = load_locale(locales_dir, FALLBACK_LOCALE)
    active = default if name == FALLBACK_LOCALE else load_locale(locales_dir, name)
    return Locale(name, merge_locales(default, active))
