import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from lib.utils.validation import ensure, ensure_word_list

from .yaml_loader import load_yaml

CONFIG_PATH_ENV = "NAME_SERVICE_CONFIG"
DEFAULT_CONFIG_PATH = "config/name_service.yaml"
WORD_LIST_KEYS = ("prefixes", "types", "suffixes", "nicknames")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class NameServiceConfig:
    """Typed view over ``name_service.yaml``.

    Every key is optional; a missing file or section leaves the defaults in
    place.  ``words`` only holds the lists that the file overrides.
    """

    host: str = "localhost"
    port: int = 3009
    default_name: str = "Brian"
    missing_path_name: str = "/"
    seed: Optional[int] = None
    log_level: str = "INFO"
    words: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


def config_path_from_env() -> str:
    return os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH


def load_name_service_config(path: Optional[str] = None) -> NameServiceConfig:
    """Load ``name_service.yaml`` and return a :class:`NameServiceConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML file.  Defaults to the
        ``NAME_SERVICE_CONFIG`` environment variable, then
        ``config/name_service.yaml``.  A missing file is not an error.
    """

    raw = load_yaml(path or config_path_from_env(), missing_ok=True)
    return parse_name_service_config(raw)


def parse_name_service_config(raw: Dict[str, Any]) -> NameServiceConfig:
    section = raw.get("name_service") or {}
    ensure(isinstance(section, dict), "name_service: expected a mapping")
    cfg = NameServiceConfig()

    for key in ("host", "default_name", "missing_path_name", "log_level"):
        if key in section:
            ensure(isinstance(section[key], str), f"{key}: expected a string")
            setattr(cfg, key, section[key])
    ensure(cfg.log_level.upper() in LOG_LEVELS, f"log_level: unknown level {cfg.log_level!r}")
    if "port" in section:
        port = section["port"]
        ensure(isinstance(port, int) and 0 < port < 65536, f"port: invalid value {port!r}")
        cfg.port = port
    if section.get("seed") is not None:
        ensure(isinstance(section["seed"], int), "seed: expected an integer")
        cfg.seed = section["seed"]

    words = section.get("words") or {}
    ensure(isinstance(words, dict), "words: expected a mapping")
    for key, values in words.items():
        ensure(key in WORD_LIST_KEYS, f"words: unknown list {key!r}")
        cfg.words[key] = ensure_word_list(f"words.{key}", values)
    return cfg
