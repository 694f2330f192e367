"""Run configuration for documentation extraction.

Configuration is read from a YAML or JSON file (chosen by suffix). Example::

    interesting_base_types:
      - com.berray.GameObject
      - com.berray.components.core.Component
    lookup_paths:
      - ../berray/src/main/java
    external_types:
      com.example.Vendor: [java.lang.Object]
    include_interfaces: true
    output_path: doc/doc.json

In non-strict mode malformed optional sections are logged and replaced by
defaults; in strict mode they raise ``ConfigValidationError``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from docgen.config import (
    DEFAULT_INCLUDE_INTERFACES,
    DEFAULT_INTERESTING_BASE_TYPES,
    DEFAULT_OUTPUT_PATH,
)

logger = logging.getLogger(__name__)

STRICT_ENV_VAR = "DOCGEN_STRICT_CONFIG"


class ConfigValidationError(RuntimeError):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class DocgenConfig:
    """Settings of one documentation run."""

    interesting_base_types: frozenset[str] = DEFAULT_INTERESTING_BASE_TYPES
    lookup_paths: tuple[str, ...] = ()
    external_types: dict[str, tuple[str, ...]] = field(default_factory=dict)
    include_interfaces: bool = DEFAULT_INCLUDE_INTERFACES
    output_path: str = DEFAULT_OUTPUT_PATH

    def with_overrides(
        self,
        interesting_base_types: Optional[Iterable[str]] = None,
        lookup_paths: Optional[Iterable[str]] = None,
        include_interfaces: Optional[bool] = None,
        output_path: Optional[str] = None,
    ) -> "DocgenConfig":
        """Return a copy with command-line values applied.

        Lookup paths are appended to the configured ones; the other values
        replace them.
        """
        changes: dict[str, Any] = {}
        if interesting_base_types:
            changes["interesting_base_types"] = frozenset(interesting_base_types)
        if lookup_paths:
            changes["lookup_paths"] = self.lookup_paths + tuple(lookup_paths)
        if include_interfaces is not None:
            changes["include_interfaces"] = include_interfaces
        if output_path:
            changes["output_path"] = output_path
        return replace(self, **changes)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_strict_config(default: bool = False) -> bool:
    """Resolve strict validation mode from the ``DOCGEN_STRICT_CONFIG`` env."""
    return _env_flag(STRICT_ENV_VAR, default=default)


def _invalid(msg: str, strict: bool) -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; using default", msg)


def _load_payload(path: str) -> dict[str, Any]:
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigValidationError(f"Config file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    try:
        if config_path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Failed to parse config {config_path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigValidationError(
            f"Config {config_path} must be a mapping, got {type(payload).__name__}"
        )
    return payload


def _string_list(payload: dict[str, Any], key: str, strict: bool) -> Optional[list[str]]:
    raw = payload.get(key)
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(item, str) and item.strip() for item in raw):
        _invalid(f"'{key}' must be a list of non-empty strings", strict)
        return None
    return [item.strip() for item in raw]


def _parse_external_types(payload: dict[str, Any], strict: bool) -> dict[str, tuple[str, ...]]:
    raw = payload.get("external_types")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        _invalid("'external_types' must map type names to supertype lists", strict)
        return {}

    external: dict[str, tuple[str, ...]] = {}
    for name, supertypes in raw.items():
        if supertypes is None:
            supertypes = []
        if not isinstance(supertypes, list) or not all(isinstance(s, str) for s in supertypes):
            _invalid(f"external type '{name}' must list its supertypes", strict)
            continue
        external[str(name).strip()] = tuple(s.strip() for s in supertypes)
    return external


def load_docgen_config(path: Optional[str] = None, strict: Optional[bool] = None) -> DocgenConfig:
    """Load configuration from ``path``, or return defaults when path is None.

    Raises:
        ConfigValidationError: If the file is missing, unparsable, not a
            mapping, or (in strict mode) has malformed sections.
    """
    if strict is None:
        strict = resolve_strict_config()
    if path is None:
        return DocgenConfig()

    payload = _load_payload(path)
    config = DocgenConfig()

    interesting = _string_list(payload, "interesting_base_types", strict)
    if interesting is not None:
        if interesting:
            config = replace(config, interesting_base_types=frozenset(interesting))
        else:
            _invalid("'interesting_base_types' is empty", strict)

    lookup_paths = _string_list(payload, "lookup_paths", strict)
    if lookup_paths:
        base = Path(path).resolve().parent
        resolved = tuple(
            str(p) if Path(p).is_absolute() else str(base / p) for p in lookup_paths
        )
        config = replace(config, lookup_paths=resolved)

    external = _parse_external_types(payload, strict)
    if external:
        config = replace(config, external_types=external)

    include_interfaces = payload.get("include_interfaces")
    if include_interfaces is not None:
        if isinstance(include_interfaces, bool):
            config = replace(config, include_interfaces=include_interfaces)
        else:
            _invalid("'include_interfaces' must be a boolean", strict)

    output_path = payload.get("output_path")
    if output_path is not None:
        if isinstance(output_path, str) and output_path.strip():
            config = replace(config, output_path=output_path.strip())
        else:
            _invalid("'output_path' must be a non-empty string", strict)

    logger.debug("Loaded config from %s: %s", path, config)
    return config
