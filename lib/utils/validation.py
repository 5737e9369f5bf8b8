"""Validation helpers."""
from typing import Any, Sequence, Tuple


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_word_list(name: str, values: Any) -> Tuple[str, ...]:
    """Return ``values`` as a tuple after checking it is a non-empty list of strings."""

    ensure(
        isinstance(values, Sequence) and not isinstance(values, (str, bytes)),
        f"{name}: expected a list of strings",
    )
    ensure(len(values) > 0, f"{name}: word list must not be empty")
    for v in values:
        ensure(isinstance(v, str), f"{name}: {v!r} is not a string")
    return tuple(values)
