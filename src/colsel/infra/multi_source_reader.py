"""Infrastructure: one readable byte stream over several input sources.

:class:`MultiSourceReader` reads its sources strictly in order and
behaves like a single raw stream, so the CLI can wrap it in an
:class:`io.BufferedReader` and iterate over lines without caring where
one file ends and the next begins.

Rules
-----
* Every named file is opened before the first byte is read, so a
  missing or unreadable file aborts the run up front.
* A single read never returns bytes from two sources.
* An exhausted source is closed and dropped; it is never read again.
* A failing source is never skipped: the error is raised and the next
  read tries the same source again.
"""

from __future__ import annotations

import contextlib
import errno as errno_codes
import io
import logging
import sys
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import BinaryIO

from colsel.core.protocols import ByteSource
from colsel.exceptions import SourceOpenError, SourceReadError

LOGGER = logging.getLogger(__name__)

STDIN_MARKER: str = "-"
"""Filename that stands for standard input."""


# ---------------------------------------------------------------------------
# Standard input
# ---------------------------------------------------------------------------

class StandardInput:
    """Byte source bound to the process's standard input.

    Closing it does **not** close the underlying stream: standard input
    belongs to the process, and may be named more than once on the
    command line.
    """

    name: str = "<stdin>"

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream: BinaryIO = stream if stream is not None else sys.stdin.buffer

    def read(self, size: int = -1, /) -> bytes | None:
        """Return whatever is available, blocking only until some data arrives."""
        read1 = getattr(self._stream, "read1", None)
        if read1 is not None:
            return read1(size)
        return self._stream.read(size)

    def close(self) -> None:
        pass


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

def _describe(source: ByteSource) -> str:
    return str(getattr(source, "name", type(source).__name__))


def _open_hint(exc: OSError) -> str | None:
    if exc.errno == errno_codes.ENOENT:
        return "Check the path; use '-' to read from standard input."
    if exc.errno in (errno_codes.EACCES, errno_codes.EPERM):
        return "Check the file's permissions."
    if exc.errno == errno_codes.EISDIR:
        return "Directories cannot be read as input."
    return None


def _open_file(filename: str) -> BinaryIO:
    try:
        handle = open(filename, "rb")
    except OSError as exc:
        raise SourceOpenError(
            f"Cannot open {filename}: {exc.strerror or exc}",
            filename=filename,
            errno=exc.errno,
            hint=_open_hint(exc),
        ) from exc
    LOGGER.debug("Opened %s", filename)
    return handle


class MultiSourceReader(io.RawIOBase):
    """Raw byte stream that concatenates *sources* in order.

    This constructor accepts sources that are already open (files,
    sockets, :class:`io.BytesIO`, test doubles) and takes ownership of
    them: each one is closed when it is exhausted or when the reader is
    closed.  Use :meth:`from_filenames` to open files by name.

    Usage::

        with io.BufferedReader(MultiSourceReader.from_filenames(names)) as stream:
            for line in stream:
                ...
    """

    def __init__(self, sources: Iterable[ByteSource]) -> None:
        super().__init__()
        self._sources: deque[ByteSource] = deque()
        self._sources.extend(sources)
        self._surplus: bytes = b""
        """Bytes the current source returned beyond what was requested."""

    # ------------------------------------------------------------------
    # Construction from filenames
    # ------------------------------------------------------------------

    @classmethod
    def from_filenames(
        cls,
        filenames: Sequence[str],
        *,
        stdin_opener: Callable[[], ByteSource] = StandardInput,
    ) -> MultiSourceReader:
        """Open every file in *filenames* and return a reader over them.

        ``"-"`` stands for standard input and is bound by calling
        *stdin_opener*; with no filenames at all, standard input is the
        only source.

        Raises
        ------
        SourceOpenError
            As soon as one file cannot be opened.  Sources opened before
            it are closed and no reader is returned.
        """
        if not filenames:
            LOGGER.debug("No filenames given; reading standard input")
            filenames = [STDIN_MARKER]

        opened: list[ByteSource] = []
        with contextlib.ExitStack() as cleanup:
            for filename in filenames:
                source = stdin_opener() if filename == STDIN_MARKER else _open_file(filename)
                cleanup.callback(source.close)
                opened.append(source)
            # Every source opened: the reader owns them from here on.
            cleanup.pop_all()

        return cls(opened)

    # ------------------------------------------------------------------
    # RawIOBase interface
    # ------------------------------------------------------------------

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int | None:  # type: ignore[override]
        """Fill *buffer* from the current source.

        Returns the number of bytes stored, ``0`` once every source is
        exhausted, or ``None`` if a non-blocking source has no data yet.

        Raises
        ------
        SourceReadError
            When the current source fails.  The source stays current.
        """
        if self.closed:
            raise ValueError("I/O operation on closed reader.")
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0
        if self._surplus:
            return self._drain_surplus(view)

        while self._sources:
            source = self._sources[0]
            try:
                read1 = getattr(source, "read1", None)
                data = read1(len(view)) if read1 is not None else source.read(len(view))
            except OSError as exc:
                raise SourceReadError(
                    f"Error reading {_describe(source)}: {exc}",
                ) from exc

            if data is None:
                return None
            if data:
                # A source may hand back more than was asked for; the rest
                # is served by the following reads.
                self._surplus = bytes(data)
                return self._drain_surplus(view)

            self._discard_head()

        return 0

    def close(self) -> None:
        """Close every source that has not been exhausted yet.

        Every source is closed even when closing an earlier one fails;
        the last such failure is raised once all of them are closed.
        """
        if self.closed:
            return
        self._surplus = b""
        with contextlib.ExitStack() as cleanup:
            cleanup.callback(super().close)
            while self._sources:
                # Callbacks run last-in first-out, so push in reverse.
                cleanup.callback(self._sources.pop().close)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def pending_sources(self) -> int:
        """Number of sources not yet exhausted, the current one included."""
        return len(self._sources)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _drain_surplus(self, view: memoryview) -> int:
        count = min(len(view), len(self._surplus))
        view[:count] = self._surplus[:count]
        self._surplus = self._surplus[count:]
        return count

    def _discard_head(self) -> None:
        source = self._sources.popleft()
        source.close()
        LOGGER.debug(
            "Finished %s; %d source(s) remaining",
            _describe(source),
            len(self._sources),
        )
