"""Build once, serve, then rebuild on every source change."""
import asyncio
import sys
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .assemble import render_document, write_output
from .bundler import BuildFailed
from .server import make_server

WATCHED_SUFFIXES = {".js", ".mjs", ".css", ".html"}
IGNORED_DIRS = {"develop", "build", "node_modules"}
CHANGE_EVENTS = {"created", "modified", "deleted", "moved"}


def is_source_change(root, path):
    """True for a source file under ``root`` outside output and vendor dirs."""
    try:
        parts = Path(path).relative_to(root).parts
    except ValueError:
        return False
    if not parts or Path(path).suffix not in WATCHED_SUFFIXES:
        return False
    return not any(p in IGNORED_DIRS or p.startswith(".") for p in parts[:-1])


class ChangeHandler(FileSystemEventHandler):
    """Forward source changes from the observer thread to the event loop.

    The queue holds at most one pending rebuild: changes that land while a
    rebuild is running collapse into the next one.
    """

    def __init__(self, loop, queue, root):
        self.loop = loop
        self.queue = queue
        self.root = Path(root)

    def on_any_event(self, event):
        if event.is_directory or event.event_type not in CHANGE_EVENTS:
            return
        path = getattr(event, "dest_path", "") or event.src_path
        if is_source_change(self.root, path):
            self.loop.call_soon_threadsafe(self.enqueue, path)

    def enqueue(self, path):
        try:
            self.queue.put_nowait(path)
        except asyncio.QueueFull:
            pass


class DevSession:
    def __init__(self, config, bundler):
        self.config = config
        self.bundler = bundler
        self.httpd = None
        self.observer = None

    async def rebuild(self, fatal=False):
        """Bundle, assemble and write the page.

        Returns False when the script bundle has errors; the page on disk is
        left as it was. With ``fatal`` those errors raise BuildFailed
        instead. Anything else that goes wrong propagates.
        """
        result = await self.bundler.build_script(self.config.script_entry)
        if result.errors:
            if fatal:
                raise BuildFailed(result.errors)
            print("watch build failed:", result.errors, file=sys.stderr)
            return False
        styles = self.bundler.build_styles(self.config.style_entry)
        html = render_document(self.config, styles.output_files + result.output_files)
        write_output(self.config.output_path, html)
        return True

    async def watch(self):
        loop = asyncio.get_running_loop()
        queue = asyncio.Queue(maxsize=1)
        handler = ChangeHandler(loop, queue, self.config.root)
        observer = Observer()
        observer.schedule(handler, str(self.config.root), recursive=True)
        observer.start()
        self.observer = observer
        print(f"Watching: {self.config.root}/")
        try:
            while True:
                path = await queue.get()
                print(f"\nChanged: {path}")
                await self.rebuild()
        finally:
            observer.stop()
            observer.join()

    async def run(self):
        """Initial build, then serve and watch until cancelled.

        A failing initial build is fatal: there would be no page to serve.
        """
        await self.rebuild(fatal=True)

        httpd = self.httpd = make_server(self.config)
        loop = asyncio.get_running_loop()
        serving = loop.run_in_executor(None, httpd.serve_forever)
        print(f"Dev server running at {self.config.url}")
        try:
            await self.watch()
        finally:
            httpd.shutdown()
            httpd.server_close()
            await serving
