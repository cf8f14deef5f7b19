"""Interactive ignore-list gate run before the tree is built.

Performs no filesystem writes; a non-affirmative answer cancels the run.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .ignore import build_ignore_set, format_ignore_set, parse_ignore_input

IGNORE_QUESTION = "Enter additional names to ignore (comma separated, blank for none): "
CONFIRM_QUESTION = "Proceed? (y/N): "
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def _ask(input_fn: Callable[[str], str], question: str) -> str | None:
    """Read one line from the operator, ``None`` on end of input."""
    try:
        return input_fn(question)
    except EOFError:
        return None


def is_affirmative(answer: str | None) -> bool:
    return answer is not None and answer.strip().lower() in AFFIRMATIVE_ANSWERS


def prompt_for_ignores(
    base: Iterable[str],
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> frozenset[str] | None:
    """Ask for extra ignored names and confirm the merged list.

    ``base`` is the already-resolved ignore set. Returns the merged set, or
    ``None`` when the operator does not confirm.
    """
    stream = out if out is not None else sys.stdout
    raw = _ask(input_fn, IGNORE_QUESTION)
    if raw is None:
        return None
    merged = build_ignore_set([*base, *parse_ignore_input(raw)], include_defaults=False)
    stream.write(f"Ignoring: {format_ignore_set(merged) or '(nothing)'}\n")
    stream.flush()
    if not is_affirmative(_ask(input_fn, CONFIRM_QUESTION)):
        return None
    return merged
