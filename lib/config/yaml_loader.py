"""Safe YAML loader."""
from pathlib import Path
from typing import Union

import yaml


def load_yaml(path: Union[str, Path], missing_ok: bool = False) -> dict:
    """Return the mapping stored at ``path``.

    A missing file yields an empty mapping when ``missing_ok`` is set.  A
    document whose top level is not a mapping is rejected.
    """

    p = Path(path)
    if missing_ok and not p.exists():
        return {}
    with p.open(encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at the top level")
    return data
