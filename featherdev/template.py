"""Template markers: ``{{localeName}}``, ``{{translate: key}}``,
``{{package.json: dotted.path}}``, ``{{cssOutput}}`` and ``{{jsOutput}}``.

Markers are found by a small scanner and replaced by splicing at the offsets
it reports. Replacement text is inserted verbatim: bundled scripts are full of
``$1`` and backslashes, and a regex-based replace would mangle them.
"""
from typing import Iterator, NamedTuple

from .package import render_value, resolve_path

OPEN = "{{"
CLOSE = "}}"

LOCALE_NAME = "localeName"
TRANSLATE = "translate"
PACKAGE_JSON = "package.json"
CSS_OUTPUT = "cssOutput"
JS_OUTPUT = "jsOutput"

_BARE_MARKERS = (LOCALE_NAME, CSS_OUTPUT, JS_OUTPUT)


class Marker(NamedTuple):
    kind: str
    payload: str
    start: int
    end: int


def _parse_body(body):
    """Return ``(kind, payload)`` for a marker body, or None if it isn't one."""
    if "\n" in body or "\r" in body or OPEN in body:
        return None
    if body in _BARE_MARKERS:
        return body, ""
    prefix = TRANSLATE + ":"
    if body.startswith(prefix):
        key = body[len(prefix):]
        if key.startswith(" "):
            key = key[1:]
        return (TRANSLATE, key) if key else None
    prefix = PACKAGE_JSON + ":"
    if body.startswith(prefix) and len(body) > len(prefix):
        return PACKAGE_JSON, body[len(prefix):].strip()
    return None


def scan_markers(text) -> Iterator[Marker]:
    """Yield every marker in ``text``, left to right.

    A marker body runs to the first ``}}`` and never crosses a line break.
    When a ``{{`` doesn't open a known marker, scanning resumes one character
    later so that ``{{{package.json:x}}`` still finds the marker.
    """
    pos = 0
    while True:
        start = text.find(OPEN, pos)
        if start < 0:
            return
        end = text.find(CLOSE, start + len(OPEN))
        if end < 0:
            return
        parsed = _parse_body(text[start + len(OPEN):end])
        if parsed is None:
            pos = start + 1
            continue
        kind, payload = parsed
        yield Marker(kind, payload, start, end + len(CLOSE))
        pos = end + len(CLOSE)


def splice(text, render):
    """Replace markers for which ``render(marker)`` returns a string.

    Markers where ``render`` returns None are kept as written.
    """
    pieces = []
    pos = 0
    for marker in scan_markers(text):
        replacement = render(marker)
        if replacement is None:
            continue
        pieces.append(text[pos:marker.start])
        pieces.append(replacement)
        pos = marker.end
    if not pieces:
        return text
    pieces.append(text[pos:])
    return "".join(pieces)


def localize(text, locale):
    """Fill in the locale name and translated strings.

    Unknown translation keys are left in place.
    """
    def render(marker):
        if marker.kind == LOCALE_NAME:
            return locale.name
        if marker.kind == TRANSLATE:
            if marker.payload in locale.strings:
                return render_value(locale.strings[marker.payload])
        return None

    return splice(text, render)


def inject_package_fields(text, package):
    def render(marker):
        if marker.kind == PACKAGE_JSON:
            return resolve_path(package, marker.payload)
        return None

    return splice(text, render)


def substitute(text, locale, package):
    """Locale pass, then package.json pass."""
    return inject_package_fields(localize(text, locale), package)
