from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
import tomllib
from typing import Any

from luvatrix_itemchart.errors import ConfigurationError


_OPTION_KEYS = {
    "min_columns": ("minColumns", "min_columns"),
    "max_columns": ("maxColumns", "max_columns"),
}


@dataclass(frozen=True)
class SeriesConfig:
    min_columns: int = 1
    max_columns: int = 1

    def __post_init__(self) -> None:
        for name in ("min_columns", "max_columns"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.min_columns < 1:
            raise ConfigurationError(f"min_columns must be >= 1, got {self.min_columns}")
        if self.max_columns < self.min_columns:
            raise ConfigurationError(
                f"max_columns must be >= min_columns, got {self.max_columns} < {self.min_columns}"
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SeriesConfig":
        """Build a config from chart options (``minColumns``/``maxColumns`` or snake_case)."""
        kwargs: dict[str, int] = {}
        for field_name, keys in _OPTION_KEYS.items():
            for key in keys:
                if key in options and options[key] is not None:
                    kwargs[field_name] = _coerce_int(options[key], key)
                    break
        return cls(**kwargs)


def load_series_config(path: str | Path) -> SeriesConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"series config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"invalid series config {config_path}: {exc}") from exc
    table = raw.get("columnitem", raw)
    if not isinstance(table, dict):
        raise ConfigurationError("columnitem must be a table")
    return SeriesConfig.from_options(table)


def _coerce_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ConfigurationError(f"{key} must be an integer, got {value!r}")
