"""
Development server: builds the wiki into develop/index.html and serves it
at http://localhost:3000, rebuilding whenever a source file changes.

Usage:
    featherwiki-develop                          # en-US
    FEATHERWIKI_LOCALE=fr-FR featherwiki-develop # another locale
    python -m featherdev

Run from the project root (the directory holding package.json).
"""
import asyncio
import sys
import traceback

from .bundler import Esbuild
from .config import load_config
from .watch import DevSession


async def develop(config):
    session = DevSession(config, Esbuild(config.root))
    await session.run()


def main():
    try:
        config = load_config()
        print(f"Locale: {config.locale.name}")
        asyncio.run(develop(config))
    except KeyboardInterrupt:
        print("\nDev server stopped.")
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
