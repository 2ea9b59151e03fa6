from __future__ import annotations

from typing import Callable

# Destructive prompts accept only a literal y/Y.
_YES = {"y", "Y"}


def confirm(question: str, *, default: bool = False, input_fn: Callable[[str], str] = input) -> bool:
    """Ask a y/N question on the terminal."""

    suffix = "(Y/n)" if default else "(y/N)"
    try:
        answer = input_fn(f"{question} {suffix}: ")
    except EOFError:
        return default

    answer = answer.strip()
    if not answer:
        return default
    return answer in _YES
