"""Protocols (interfaces) consumed across layers.

These define the contracts that byte sources must satisfy.  The reader
in ``infra`` depends ONLY on this protocol, never on concrete file
types, so files, standard input, sockets and test doubles are
interchangeable.
"""

from __future__ import annotations

from typing import Protocol


class ByteSource(Protocol):
    """Contract for anything the multi-source reader can consume.

    Binary file objects, :class:`io.BytesIO` and ``socket.makefile("rb")``
    satisfy this protocol structurally (no explicit inheritance
    required).
    """

    def read(self, size: int = -1, /) -> bytes | None:
        """Return up to *size* bytes.

        ``b""`` means end of stream.  ``None`` means no data is
        available yet on a non-blocking source.

        Raises
        ------
        OSError
            When the underlying source fails.
        """
        ...  # pragma: no cover

    def close(self) -> None:
        """Release the underlying resource."""
        ...  # pragma: no cover
