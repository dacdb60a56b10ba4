"""YAML config file loading and validation."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml
from jsonschema import Draft7Validator

from seqtest.core.errors import ConfigError

DEFAULT_CONFIG_NAME = "seqtest.yaml"

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "paths": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "reporter": {"type": "string", "minLength": 1},
        "report_path": {"type": ["string", "null"]},
        "color": {"type": "boolean"},
        "names": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "plugins": {"type": "array", "items": {"type": "string", "minLength": 1}},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class RunConfig:
    paths: Sequence[str] = field(default_factory=tuple)
    reporter: str = "terminal"
    report_path: Optional[str] = None
    color: bool = True
    names: Sequence[str] = field(default_factory=tuple)
    plugins: Sequence[str] = field(default_factory=tuple)

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every override that is not None/empty applied."""

        values = {key: value for key, value in overrides.items() if value is not None and value != ()}
        return replace(self, **values)


def load_config(path: Optional[str] = None) -> RunConfig:
    """Load ``path`` or ``./seqtest.yaml`` when present; defaults otherwise."""

    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.is_file():
            return RunConfig()
        config_path = candidate
    else:
        config_path = Path(path).expanduser().resolve()
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    base = config_path.parent
    return RunConfig(
        paths=tuple(_resolve_path(item, base) for item in raw.get("paths", [])),
        reporter=raw.get("reporter", "terminal"),
        report_path=raw.get("report_path"),
        color=bool(raw.get("color", True)),
        names=tuple(raw.get("names", [])),
        plugins=tuple(raw.get("plugins", [])),
    )


def _resolve_path(value: str, base: Path) -> str:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base / path
    return str(path)
