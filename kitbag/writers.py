"""Write the same formatted text to several streams at once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Any, Optional


@dataclass
class _Sink:
    stream: Optional[IO[str]]
    name: Optional[str]
    owned: bool


class Writers:
    """A fan-out writer over open streams and files opened by name."""

    def __init__(self) -> None:
        self._sinks: list[_Sink] = []

    def add_handle(self, stream: Optional[IO[str]]) -> None:
        """Add an already open stream; ``None`` is ignored."""
        if stream is None:
            return
        self._sinks.append(_Sink(stream, None, False))

    def add_name(self, name: str) -> None:
        """Add a file to be opened for writing by :meth:`open`."""
        self._sinks.append(_Sink(None, name, True))

    def open(self) -> None:
        """Open every named file that is not yet open."""
        for sink in self._sinks:
            if sink.stream is None and sink.name is not None:
                sink.stream = open(sink.name, "w", encoding="utf-8")

    def printf(self, fmt: str, *args: Any) -> int:
        """Write ``fmt % args`` to every open stream; return its length."""
        text = fmt % args if args else fmt
        for sink in self._sinks:
            if sink.stream is not None:
                sink.stream.write(text)
        return len(text)

    def close(self) -> None:
        """Close the files this object opened and forget all streams."""
        for sink in self._sinks:
            if sink.owned and sink.stream is not None:
                sink.stream.close()
        self._sinks.clear()

    def __enter__(self) -> "Writers":
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()