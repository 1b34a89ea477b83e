from __future__ import annotations

import functools
import http.server
import pathlib

from .config import XML_CONTENT_TYPE


class SiteHandler(http.server.SimpleHTTPRequestHandler):
    extensions_map = {
        **http.server.SimpleHTTPRequestHandler.extensions_map,
        ".xml": XML_CONTENT_TYPE,
    }


def make_server(site_dir: pathlib.Path, port: int, host: str = "localhost"):
    handler = functools.partial(SiteHandler, directory=str(site_dir))
    return http.server.ThreadingHTTPServer((host, port), handler)


def serve(site_dir: pathlib.Path, port: int) -> None:
    httpd = make_server(site_dir, port)
    print(f"+ serving http://localhost:{port}/ [dir={site_dir}]")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("- shutting down")
    finally:
        httpd.server_close()
