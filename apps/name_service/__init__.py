"""Name service.

:class:`NameHandler` turns the three kinds of request the HTTP layer accepts
into :class:`~lib.contracts.envelope.NameResponse` envelopes.  It knows
nothing about FastAPI: the routes hand it either nothing, a mapping of route
parameters, or the raw request body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from pydantic import ValidationError

from lib.config.name_service_loader import NameServiceConfig
from lib.contracts.envelope import NameRequest, NameResponse
from lib.telemetry.logger import get_logger

from .composer import NameComposer, RandomSource, WordLists

log = get_logger(__name__)

DEFAULT_NAME = "Brian"
MISSING_PATH_NAME = "/"
PATH_PARAM = "name"


@dataclass
class NameHandler:
    """Build response envelopes for the name routes."""

    composer: NameComposer = field(default_factory=NameComposer)
    default_base: str = DEFAULT_NAME
    missing_path_name: str = MISSING_PATH_NAME

    @classmethod
    def from_config(cls, cfg: NameServiceConfig) -> "NameHandler":
        composer = NameComposer(
            words=WordLists.with_overrides(cfg.words),
            source=RandomSource(seed=cfg.seed),
        )
        return cls(
            composer=composer,
            default_base=cfg.default_name,
            missing_path_name=cfg.missing_path_name,
        )

    def default_name(self) -> NameResponse:
        return NameResponse.ok(self.composer.compose(self.default_base))

    def named_from_path(self, params: Mapping[str, str]) -> NameResponse:
        """Compose around the ``name`` route parameter.

        A missing parameter is not an error; ``missing_path_name`` is used as
        the base instead.
        """

        base = params.get(PATH_PARAM, self.missing_path_name)
        return NameResponse.ok(self.composer.compose(base))

    def named_from_body(self, raw: Union[bytes, str]) -> NameResponse:
        """Compose around the ``name`` field of a JSON body.

        A body that is not valid JSON, or lacks a string ``name``, produces an
        error envelope instead of raising.
        """

        try:
            req = NameRequest.model_validate_json(raw)
        except ValidationError as exc:
            log.warning("rejected request body: %s", exc)
            return NameResponse.error(f"Error parsing JSON: {exc}")
        return NameResponse.ok(self.composer.compose(req.name))


__all__ = ["NameHandler", "DEFAULT_NAME", "MISSING_PATH_NAME"]
