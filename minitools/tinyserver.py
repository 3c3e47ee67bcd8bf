"""A minimal multi-threaded HTTP server with a single home page."""

from __future__ import annotations

import signal
import socket
import sys
import threading
from collections.abc import Sequence
from typing import TextIO

PORT = 8080
BUFFER_SIZE = 4096
MAX_PENDING_CONNECTIONS = 10

# Widths of the method and path fields read from the request line.
METHOD_WIDTH = 15
PATH_WIDTH = 255

_WHITESPACE = " \t\n\v\f\r"
_POLL_INTERVAL = 0.5

HOME_PAGE = (
    "<!DOCTYPE html>"
    '<html lang="en">'
    '<head><meta charset="UTF-8"><title>Tiny Server</title>'
    "<style>body{font-family:sans-serif;background-color:#f0f0f0;"
    "text-align:center;} h1{color:#333;}</style>"
    "</head><body>"
    "<h1>Welcome!</h1><p>This page is served by a tiny server.</p>"
    "</body></html>"
)


def build_response(status: str, content_type: str, body: str) -> bytes:
    """Build a complete HTTP response, cut to at most BUFFER_SIZE - 1 bytes."""
    payload = body.encode("utf-8")
    head = (
        f"HTTP/1.1 {status}\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {len(payload)}\r\n"
        "Connection: close\r\n\r\n"
    ).encode("utf-8")
    return (head + payload)[: BUFFER_SIZE - 1]


def _scan_token(text: str, pos: int, width: int) -> tuple[str, int]:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    end = pos
    while end < len(text) and end - pos < width and text[end] not in _WHITESPACE:
        end += 1
    return text[pos:end], end


def parse_request_line(data: bytes | str) -> tuple[str, str] | None:
    """Read the method and path from the start of a request.

    Returns None when the request does not hold both fields. Fields longer
    than their width are split, as a width-limited scan would do.
    """
    text = data.decode("latin-1") if isinstance(data, bytes) else data
    text = text.split("\0", 1)[0]
    method, pos = _scan_token(text, 0, METHOD_WIDTH)
    if not method:
        return None
    path, _ = _scan_token(text, pos, PATH_WIDTH)
    if not path:
        return None
    return method, path


def handle_request(data: bytes | str) -> bytes:
    """Return the response to send for the raw request ``data``."""
    request = parse_request_line(data)
    if request is None:
        return build_response("400 Bad Request", "text/plain", "Bad Request")
    method, path = request
    if method != "GET":
        return build_response(
            "405 Method Not Allowed", "text/plain", "Method Not Allowed"
        )
    if path == "/":
        return build_response("200 OK", "text/html", HOME_PAGE)
    return build_response("404 Not Found", "text/plain", "Not Found")


def _report(label: str, exc: OSError) -> None:
    print(f"{label}: {exc.strerror or exc}", file=sys.stderr)


class TinyServer:
    """An HTTP server that answers each connection in its own thread."""

    def __init__(
        self,
        port: int = PORT,
        host: str = "",
        *,
        backlog: int = MAX_PENDING_CONNECTIONS,
        log: TextIO | None = None,
    ) -> None:
        self.log = log if log is not None else sys.stdout
        self._stopped = threading.Event()
        self._lock = threading.Lock()
        self._log_lock = threading.Lock()
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen(backlog)
            sock.settimeout(_POLL_INTERVAL)
        except OSError:
            sock.close()
            raise
        self._socket: socket.socket | None = sock
        self.server_address: tuple[str, int] = sock.getsockname()

    def __enter__(self) -> TinyServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _write(self, message: str) -> None:
        with self._log_lock:
            print(message, file=self.log, flush=True)

    def serve_forever(self) -> None:
        """Accept connections until shutdown() is called."""
        while not self._stopped.is_set():
            listener = self._socket
            if listener is None:
                break
            try:
                client, address = listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if self._stopped.is_set():
                    break
                _report("accept failed", exc)
                continue
            client.settimeout(None)
            worker = threading.Thread(
                target=self._handle_client, args=(client, address[0]), daemon=True
            )
            try:
                worker.start()
            except RuntimeError as exc:
                print(f"thread creation failed: {exc}", file=sys.stderr)
                client.close()

    def shutdown(self) -> None:
        """Stop accepting connections and close the listening socket."""
        self._stopped.set()
        with self._lock:
            listener, self._socket = self._socket, None
        if listener is None:
            return
        try:
            listener.shutdown(socket.SHUT_RD)
        except OSError:
            pass
        listener.close()

    def _handle_client(self, client: socket.socket, ip: str) -> None:
        with client:
            self._write(f"Accepted connection from {ip}")
            try:
                data = client.recv(BUFFER_SIZE - 1)
            except OSError as exc:
                _report("recv failed", exc)
                data = b""
            if data:
                request = parse_request_line(data)
                if request is not None:
                    self._write(f"Request from {ip}: {request[0]} {request[1]}")
                try:
                    client.sendall(handle_request(data))
                except OSError as exc:
                    _report("send failed", exc)
            self._write(f"Closing connection for {ip}")


def main(argv: Sequence[str] | None = None) -> int:
    """Serve on PORT until interrupted; return the exit code."""
    try:
        server = TinyServer(PORT)
    except OSError as exc:
        _report("socket setup failed", exc)
        return 1

    def _stop(signum: int, frame: object) -> None:
        server.shutdown()

    previous = {
        sig: signal.signal(sig, _stop) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    print(
        f"Server listening on http://localhost:{PORT}. Press Ctrl+C to shut down.",
        flush=True,
    )
    try:
        server.serve_forever()
    finally:
        server.shutdown()
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    print("\nServer shutting down gracefully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())