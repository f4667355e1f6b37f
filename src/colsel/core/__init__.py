"""Core / service layer — pure parsing, selection and line processing.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from colsel.core.argument_splitter import split_arguments
from colsel.core.extractor import extract_columns
from colsel.core.line_processor import LineProcessor, split_fields
from colsel.core.models import ColumnRange, ExtractionOptions
from colsel.core.protocols import ByteSource
from colsel.core.range_parser import parse_column_range

__all__: list[str] = [
    "ByteSource",
    "ColumnRange",
    "ExtractionOptions",
    "LineProcessor",
    "extract_columns",
    "parse_column_range",
    "split_arguments",
    "split_fields",
]
