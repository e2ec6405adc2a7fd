from __future__ import annotations
import io
import logging
from typing import Any, Iterable, Iterator, Optional, Protocol, Union

from .errors import StreamError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class LineSource(Protocol):
    def readline(self) -> Union[str, bytes]:
        """Return the next line, or an empty string at end of input."""
        ...


class IterableSource:
    """LineSource over any iterable of lines (a list in tests, a generator, ...)."""

    def __init__(self, lines: Iterable[Union[str, bytes]]) -> None:
        self._it: Iterator[Union[str, bytes]] = iter(lines)
        self.exhausted = False

    def readline(self) -> Union[str, bytes]:
        if self.exhausted:
            return ""
        try:
            line = next(self._it)
        except StopIteration:
            self.exhausted = True
            return ""
        # an empty element is a blank line, not end of input
        return line if line else "\n"


class DecodingSource:
    """
    Reads a text file object through its binary buffer.

    Undecodable bytes become U+FFFD instead of failing the whole read, so one
    bad line cannot end a session. Text already buffered by the wrapper is not
    seen; wrap the stream before reading from it.
    """

    def __init__(self, stream: io.TextIOWrapper) -> None:
        self.stream = stream
        self.encoding = stream.encoding or ENCODING

    def readline(self) -> str:
        return self.stream.buffer.readline().decode(self.encoding, errors="replace")


def as_line_source(obj: Any) -> LineSource:
    if isinstance(obj, io.TextIOWrapper) and getattr(obj, "buffer", None) is not None:
        return DecodingSource(obj)
    if callable(getattr(obj, "readline", None)):
        return obj
    if isinstance(obj, (str, bytes)):
        raise TypeError("input must be a stream or an iterable of lines, not a single string")
    try:
        return IterableSource(obj)
    except TypeError:
        raise TypeError(f"cannot read lines from {type(obj).__name__}") from None


def read_line(source: LineSource) -> Optional[str]:
    """
    Read one line as text; None at end of input.

    A line the source cannot decode comes back blank (and is logged); any
    other failure of the source raises StreamError.
    """
    try:
        line = source.readline()
    except UnicodeDecodeError as e:
        logger.warning("skipping undecodable input: %s", e)
        return "\n"
    except (OSError, ValueError) as e:
        raise StreamError(f"failed on read: {e}") from e
    if not line:
        return None
    if isinstance(line, bytes):
        line = line.decode(ENCODING, errors="replace")
    return line


def _is_binary(sink: Any) -> bool:
    return isinstance(sink, (io.RawIOBase, io.BufferedIOBase))


class Output:
    """
    The sink handlers write to.

    Wraps any object with a write() method. Text goes to text sinks as-is and to
    binary sinks (BytesIO, sys.stdout.buffer, socket files opened 'wb') as UTF-8.
    Characters a sink cannot encode are replaced rather than raised. Failures of
    the underlying sink surface as StreamError so the loop can tell them apart
    from a handler's own errors.
    """

    def __init__(self, sink: Any) -> None:
        if not callable(getattr(sink, "write", None)):
            raise TypeError(f"output sink {type(sink).__name__} has no write() method")
        self.sink = sink
        self._binary = _is_binary(sink)

    def _write(self, data: Union[str, bytes]) -> None:
        try:
            self.sink.write(data)
        except (OSError, ValueError) as e:
            raise StreamError(f"failed on write: {e}") from e

    def write(self, text: str) -> None:
        if self._binary:
            self._write(text.encode(ENCODING, errors="replace"))
            return
        try:
            self.sink.write(text)
        except UnicodeEncodeError as e:
            # TextIOWrapper encodes before writing, so nothing went out yet
            self._write(text.encode(e.encoding, errors="replace").decode(e.encoding))
        except (OSError, ValueError) as e:
            raise StreamError(f"failed on write: {e}") from e

    def writeln(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as e:
            raise StreamError(f"failed on flush: {e}") from e
