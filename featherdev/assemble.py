"""Splice bundles into the HTML shell and write the development page."""
import os
from pathlib import Path

from .template import CSS_OUTPUT, JS_OUTPUT, splice, substitute

KILOBYTES_PER_BYTE = 0.000977


def format_size(num_bytes):
    return f"{num_bytes * KILOBYTES_PER_BYTE:.3f} kilobytes"


def _slot_for(path):
    if path.endswith(".css"):
        return CSS_OUTPUT
    if path.endswith(".js"):
        return JS_OUTPUT
    return None


def assemble_html(shell, output_files):
    """Put the first .css output at ``{{cssOutput}}`` and the first .js
    output at ``{{jsOutput}}``.

    Marker offsets come from the shell as read, so bundle text that happens
    to contain ``{{jsOutput}}`` is inserted as-is.
    """
    slots = {}
    for out in output_files:
        print(out.path, format_size(len(out.contents)))
        slot = _slot_for(out.path)
        if slot and slot not in slots:
            slots[slot] = out.text

    def render(marker):
        return slots.pop(marker.kind, None)

    return splice(shell, render)


def render_document(config, output_files):
    """Read the shell fresh, splice the bundles in and resolve every marker."""
    shell = config.shell_path.read_text(encoding="utf-8")
    html = assemble_html(shell, output_files)
    return substitute(html, config.locale, config.package)


def write_output(path, html):
    """Overwrite ``path`` with ``html``.

    The page is written to a sibling file first and moved into place, so the
    server never sees a half-written page.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = html.encode("utf-8")
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_bytes(data)
    os.replace(tmp, path)
    print(path, format_size(len(data)))
