"""Local dev server: every request gets the last built page.

The browser only ever needs ``develop/index.html``, so there is no routing:
``/``, ``/foo/bar`` and a POST all receive the same bytes.
"""
import http.server


class PageHandler(http.server.BaseHTTPRequestHandler):
    page_path = None  # set by make_server

    def _drain_body(self):
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            return
        if length > 0:
            self.rfile.read(length)

    def _send_page(self, body=True):
        self._drain_body()
        data = self.page_path.read_bytes()
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if body:
            self.wfile.write(data)

    def do_GET(self):
        self._send_page()

    do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = do_TRACE = do_CONNECT = do_GET

    def do_HEAD(self):
        self._send_page(body=False)

    def log_message(self, format, *args):
        pass  # Suppress request logging


def make_server(config):
    handler = type("Handler", (PageHandler,), {"page_path": config.output_path})
    return http.server.ThreadingHTTPServer((config.host, config.port), handler)
