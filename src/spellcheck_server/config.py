from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

SEVERITIES = ("error", "warning", "information", "hint")


@dataclass(slots=True)
class SpellcheckConfig:
    """Configuration options for the spell-checking language server."""

    backend: str = "hunspell"
    affix_path: str = "./index.aff"
    dictionary_path: str = "./index.dic"
    language: str = "en_US"
    personal_word_list: str | None = None
    case_sensitive: bool = False
    diagnostic_message: str = "Incorrect spelling"
    severity: str = "error"
    log_level: str = "DEBUG"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(SpellcheckConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    severity = kwargs.get("severity")
    if severity is not None and str(severity).lower() not in SEVERITIES:
        raise ValueError(
            f"Unknown severity '{severity}'; expected one of {', '.join(SEVERITIES)}."
        )
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> SpellcheckConfig:
    """Build a SpellcheckConfig from a dictionary-like input."""
    if data is None:
        return SpellcheckConfig()
    return SpellcheckConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> SpellcheckConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SpellcheckConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SpellcheckConfig()
    return config_from_yaml(path)
