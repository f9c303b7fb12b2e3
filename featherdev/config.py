"""Project layout and settings, loaded once at startup."""
import os
from dataclasses import dataclass
from pathlib import Path

from .locales import Locale, load_active_locale
from .package import read_package

# ─────────────────────────────────────────────────────────────────────────────
# SETTINGS
# Paths are relative to the project root (the working directory by default).
# ─────────────────────────────────────────────────────────────────────────────
HOST           = "localhost"
PORT           = 3000
DEFAULT_LOCALE = "en-US"
LOCALE_ENV     = "FEATHERWIKI_LOCALE"   # e.g. FEATHERWIKI_LOCALE=fr-FR

PACKAGE_FILE   = "package.json"
LOCALES_DIR    = "locales"
SHELL_FILE     = "index.html"
STYLE_ENTRY    = "index.css"
SCRIPT_ENTRY   = "index.js"
OUTPUT_DIR     = "develop"
OUTPUT_FILE    = "index.html"
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class Config:
    root: Path
    locale: Locale
    package: dict
    host: str = HOST
    port: int = PORT

    @property
    def shell_path(self):
        return self.root / SHELL_FILE

    @property
    def style_entry(self):
        return self.root / STYLE_ENTRY

    @property
    def script_entry(self):
        return self.root / SCRIPT_ENTRY

    @property
    def output_dir(self):
        return self.root / OUTPUT_DIR

    @property
    def output_path(self):
        return self.output_dir / OUTPUT_FILE

    @property
    def url(self):
        return f"http://{self.host}:{self.port}"


def load_config(root=None, environ=None):
    """Read the locale selection, the locale files and package.json.

    A missing or malformed package.json raises; missing locale files don't.
    """
    environ = os.environ if environ is None else environ
    root = Path(root or os.getcwd()).resolve()
    locale_name = environ.get(LOCALE_ENV) or DEFAULT_LOCALE
    return Config(
        root=root,
        locale=load_active_locale(root / LOCALES_DIR, locale_name),
        package=read_package(root / PACKAGE_FILE),
    )
