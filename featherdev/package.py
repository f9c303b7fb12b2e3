"""Project descriptor (package.json) loading and dotted-path lookups."""
import json
from pathlib import Path


def read_package(path):
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def _step(value, segment):
    if isinstance(value, dict):
        return value.get(segment)
    if isinstance(value, list) and segment.isdigit():
        index = int(segment)
        return value[index] if index < len(value) else None
    return None


def render_value(value):
    """Render a JSON value the way it reads once injected into a page.

    Mirrors how the browser stringifies values: ``true``/``false`` for
    booleans, ``3`` rather than ``3.0``, comma-joined lists.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(render_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def resolve_path(package, dotted_path):
    """Look up ``a.b.c`` in the descriptor.

    Never raises: a missing segment or a null anywhere along the way
    resolves to an empty string.
    """
    value = package
    for segment in dotted_path.split("."):
        value = _step(value, segment)
        if value is None:
            return ""
    return render_value(value)
