"""colsel — extract columns from text streams.

Splits each input line on a delimiter regex and prints the selected
fields, addressed by position, negative position, or inclusive range.
"""

from colsel.version import __version__

__all__: list[str] = ["__version__"]
