"""Infrastructure layer — input sources.

This layer wraps all interaction with the operating system: opening
files, binding standard input and reading bytes.  Every raw ``OSError``
must be caught here and re-raised as a
:class:`~colsel.exceptions.ColselError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from colsel.infra.multi_source_reader import STDIN_MARKER, MultiSourceReader, StandardInput

__all__: list[str] = [
    "MultiSourceReader",
    "STDIN_MARKER",
    "StandardInput",
]
