"""Allow ``python -m colsel`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m colsel`` behaves identically to the ``colsel`` console
script.
"""

from __future__ import annotations

from colsel.cli.app import cli

if __name__ == "__main__":
    cli()
