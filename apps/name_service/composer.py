"""Random name composition.

A composed name is built by drawing a template id and one entry from each of
the four word lists, then rendering the template with the caller's base name.
The template table is plain data so that every arrangement can be exercised
on its own; :class:`NameComposer` only performs the draws and the lookup.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Sequence, Tuple

from lib.telemetry.logger import get_logger

from . import words

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Word lists and randomness
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WordLists:
    """The four filler sequences shared by every request."""

    prefixes: Tuple[str, ...] = words.PREFIXES
    types: Tuple[str, ...] = words.TYPES
    suffixes: Tuple[str, ...] = words.SUFFIXES
    nicknames: Tuple[str, ...] = words.NICKNAMES

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, Sequence[str]] | None) -> "WordLists":
        """Return the built-in lists with any list named in ``overrides`` replaced."""

        return cls(**{k: tuple(v) for k, v in (overrides or {}).items()})


class RandomSource:
    """Lock-guarded wrapper around :class:`random.Random`.

    One instance is shared by all request threads; each draw holds the lock so
    concurrent callers never interleave inside the generator.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(seed)
        self._lock = threading.Lock()

    def randint(self, a: int, b: int) -> int:
        with self._lock:
            return self._rng.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        with self._lock:
            return self._rng.choice(seq)


# ---------------------------------------------------------------------------
# Template table
# ---------------------------------------------------------------------------

class Fillers(NamedTuple):
    base: str
    prefix: str
    type: str
    suffix: str
    nickname: str


Renderer = Callable[[Fillers], str]

TEMPLATES: Tuple[Tuple[int, Renderer], ...] = (
    (1, lambda f: f"{f.prefix} {f.type}"),
    (2, lambda f: f"{f.prefix} {f.base}"),
    (3, lambda f: f"{f.base} {f.nickname}, {f.prefix} {f.type}"),
    (4, lambda f: f"{f.base}, {f.type} {f.suffix}"),
    (5, lambda f: f"{f.base} {f.suffix}"),
    (6, lambda f: f"{f.base} {f.nickname} {f.suffix}"),
    (7, lambda f: f"{f.prefix} {f.type} {f.base}"),
    (8, lambda f: f"{f.prefix} {f.base} {f.nickname}"),
    (9, lambda f: f"{f.prefix} {f.base}, {f.type} {f.suffix}"),
    (10, lambda f: f"{f.base}, {f.nickname} {f.type}"),
    (11, lambda f: f"{f.type} {f.base}"),
)

_RENDERERS: Dict[int, Renderer] = dict(TEMPLATES)
MIN_TEMPLATE_ID = TEMPLATES[0][0]
MAX_TEMPLATE_ID = TEMPLATES[-1][0]


def render(template_id: int, fillers: Fillers) -> str:
    """Render ``fillers`` with the given template; unknown ids return the base."""

    renderer = _RENDERERS.get(template_id)
    if renderer is None:
        return fillers.base
    return renderer(fillers)


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

@dataclass
class NameComposer:
    """Compose randomised names around a base name.

    Parameters
    ----------
    words: the filler lists; defaults to the built-in lists.
    source: randomness provider.  Inject a seeded :class:`RandomSource` for
        reproducible output.
    """

    words: WordLists = field(default_factory=WordLists)
    source: RandomSource = field(default_factory=RandomSource)

    def draw(self, base: str) -> Tuple[int, Fillers]:
        """Draw a template id and the four fillers.

        All four fillers are drawn on every call, whichever template wins, so
        each composition consumes the same amount of randomness.
        """

        template_id = self.source.randint(MIN_TEMPLATE_ID, MAX_TEMPLATE_ID)
        fillers = Fillers(
            base=base,
            prefix=self.source.choice(self.words.prefixes),
            type=self.source.choice(self.words.types),
            suffix=self.source.choice(self.words.suffixes),
            nickname=self.source.choice(self.words.nicknames),
        )
        return template_id, fillers

    def compose(self, base: str) -> str:
        template_id, fillers = self.draw(base)
        name = render(template_id, fillers)
        log.debug("composed %r from template %d", name, template_id)
        return name


_default_composer = NameComposer()


def compose(base: str) -> str:
    """Compose a name with the process-wide default composer."""

    return _default_composer.compose(base)


__all__ = [
    "Fillers",
    "NameComposer",
    "RandomSource",
    "TEMPLATES",
    "WordLists",
    "compose",
    "render",
]
