"""A small chat: a threaded server that prints what clients send, and a client."""

from __future__ import annotations

import getopt
import socket
import sys
import threading
from typing import Callable, Optional, Sequence, TextIO

from kitbag.cmdparser import CommandParser

BUF_SIZE = 512
WELCOME_MSG = "欢迎"
PROG = "chat"
EXIT_COMMAND = "/exit"
_POLL_SECONDS = 0.2

_USAGE_TAIL = (
    "\t [--server <port> | -s <port>] \trunning in server mode\n"
    "\t [--connect <ip address>| -c <ip address>] \tconnect to ip address.\n"
)


def encode_message(text: str) -> bytes:
    """Encode *text* as the wire format: four little-endian bytes per character."""
    return text.encode("utf-32-le")


def decode_message(data: bytes) -> str:
    """Decode wire bytes, stopping at a NUL character; a trailing partial character is dropped."""
    usable = len(data) - len(data) % 4
    text = data[:usable].decode("utf-32-le", errors="replace")
    return text.split("\0", 1)[0]


def program_name(path: str) -> str:
    """Return the part of *path* after the last slash."""
    return path.rsplit("/", 1)[-1]


def _usage(name: str) -> None:
    print("Usage:")
    print(program_name(name) + _USAGE_TAIL)


def _read_console(console: TextIO, on_word: Callable[[str], bool], on_eof: Callable[[], None]) -> None:
    for line in console:
        for word in line.split():
            if not on_word(word):
                return
    on_eof()


def _serve_client(conn: socket.socket) -> None:
    with conn:
        tag = f"{conn.fileno():x}"
        try:
            conn.sendall(encode_message(WELCOME_MSG))
            while True:
                data = conn.recv(BUF_SIZE)
                if not data:
                    break
                print(f"[{tag}]{decode_message(data)}", flush=True)
        except OSError:
            pass
    print("connection is properly shutdown!", flush=True)


def _port_number(port: str | int) -> int:
    try:
        return int(port)
    except (TypeError, ValueError):
        raise ValueError(f"bad port {port!r}") from None


def run_server(port: str | int, console: TextIO) -> None:
    """Serve on *port* until ``/exit`` is read from *console* or it ends.

    Each client gets a welcome message and its messages are printed.
    Raises OSError when the port cannot be bound.
    """
    stop = threading.Event()

    def on_word(word: str) -> bool:
        if word == EXIT_COMMAND:
            stop.set()
            return False
        return True

    listener = socket.create_server(("", _port_number(port)), backlog=10)
    with listener:
        listener.settimeout(_POLL_SECONDS)
        threading.Thread(target=_read_console, args=(console, on_word, stop.set), daemon=True).start()
        count = 0
        while not stop.is_set():
            try:
                conn, _ = listener.accept()
            except socket.timeout:
                continue
            conn.setblocking(True)
            print("connection request coming", flush=True)
            count += 1
            threading.Thread(target=_serve_client, args=(conn,), daemon=True).start()
            print(f"connection:{count}", flush=True)


def connect_to(address: str, port: str | int, console: TextIO) -> None:
    """Connect to *address*:*port*, send words read from *console* and print replies.

    Ends when ``/exit`` is read or the server closes the connection.
    Raises ConnectionError when the connection cannot be made.
    """
    infos = socket.getaddrinfo(address, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
    family, kind, proto, _, sockaddr = next(
        (info for info in infos if info[0] == socket.AF_INET), infos[0]
    )
    sock = socket.socket(family, kind, proto)
    try:
        sock.connect(sockaddr)
    except OSError as exc:
        sock.close()
        raise ConnectionError("connect failure") from exc

    stop = threading.Event()

    def on_word(word: str) -> bool:
        if word == EXIT_COMMAND:
            stop.set()
            return False
        try:
            sock.sendall(encode_message(word))
        except OSError:
            stop.set()
            return False
        return True

    with sock:
        sock.settimeout(_POLL_SECONDS)
        # End of console input only ends sending; replies are still shown.
        threading.Thread(target=_read_console, args=(console, on_word, lambda: None), daemon=True).start()
        print("]", end="", flush=True)
        while not stop.is_set():
            try:
                data = sock.recv(BUF_SIZE)
            except socket.timeout:
                continue
            except OSError:
                break
            if not data:
                break
            print(f"S :{decode_message(data)}", flush=True)
            print("]", end="", flush=True)
        stop.set()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run as client (``-c <address> <port>``) or server (``-s <port>``)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _usage(PROG)
        return 0
    try:
        parsed = CommandParser("c:s:").parse(args)
    except getopt.GetoptError:
        _usage(PROG)
        return 0
    server_addr: Optional[str] = None
    port: Optional[str] = None
    as_client = True
    for flag, value in parsed.options:
        if flag == "c":
            server_addr, as_client = value, True
        elif flag == "s":
            port, as_client = value, False

    error: Optional[str] = None
    try:
        if as_client:
            if not parsed.args:
                error = "no port specified"
            elif server_addr is None:
                error = "no server address specified"
            else:
                connect_to(server_addr, parsed.args[0], sys.stdin)
        else:
            run_server(port if port is not None else "", sys.stdin)
    except (OSError, ValueError) as exc:
        error = str(exc)
    if error:
        print(f"error:{error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())