"""Public package surface for yal.

Exports ``main`` for programmatic CLI invocation.
The listing pipeline lives in ``yal.entry_model`` and ``yal.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
