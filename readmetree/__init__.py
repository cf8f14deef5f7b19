"""Public package surface for readmetree.

Exports ``main`` for programmatic CLI invocation.
Tree building and README updating live in submodules under ``readmetree``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
