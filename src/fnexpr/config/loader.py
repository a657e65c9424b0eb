"""Config loading and normalization for fnexpr."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fnexpr.config.model import ExpressionDefinition, FnexprConfig
from fnexpr.constants.config import (
    ALLOWED_CACHE_KEYS,
    ALLOWED_EXPRESSION_KEYS,
    ALLOWED_TOP_KEYS,
    CONFIG_FILENAME,
    DEFAULT_RESULT_TYPE_NAME,
    REQUIRED_EXPRESSION_KEYS,
)
from fnexpr.exceptions import ConfigError, InvalidArgumentError
from fnexpr.types.result import ResultType, parse_type_name

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> FnexprConfig:
    """Load and validate config from ``fnexpr.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return FnexprConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    config = parse_config(raw)
    logger.debug("Loaded %d expression(s) from %s", len(config.expressions), path)
    return config


def parse_config(raw: dict[str, Any]) -> FnexprConfig:
    """Validate a raw config mapping and build an :class:`FnexprConfig`."""
    unknown = set(raw) - ALLOWED_TOP_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level config keys: {sorted(unknown)}")

    cache_raw = raw.get("cache", {})
    if cache_raw is None:
        cache_raw = {}
    if not isinstance(cache_raw, dict):
        raise ConfigError("cache must be a mapping")
    unknown_cache = set(cache_raw) - ALLOWED_CACHE_KEYS
    if unknown_cache:
        raise ConfigError(f"Unknown cache keys: {sorted(unknown_cache)}")

    max_entries = cache_raw.get("max_entries")
    if max_entries is not None and (isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0):
        raise ConfigError("cache.max_entries must be a positive integer")

    expressions_raw = raw.get("expressions", {})
    if expressions_raw is None:
        expressions_raw = {}
    if not isinstance(expressions_raw, dict):
        raise ConfigError("expressions must be a mapping of name to definition")

    return FnexprConfig(
        cache_max_entries=max_entries,
        expressions=tuple(_parse_expression(name, value) for name, value in expressions_raw.items()),
    )


def _parse_expression(name: object, raw: object) -> ExpressionDefinition:
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"Expression names must be non-empty strings, got {name!r}")
    if isinstance(raw, str):
        raw = {"expr": raw}
    if not isinstance(raw, dict):
        raise ConfigError(f"expressions.{name} must be a mapping or an expression string")

    unknown = set(raw) - ALLOWED_EXPRESSION_KEYS
    if unknown:
        raise ConfigError(f"expressions.{name}: unknown keys {sorted(unknown)}")
    for key in REQUIRED_EXPRESSION_KEYS:
        if key not in raw:
            raise ConfigError(f"expressions.{name}: missing required key '{key}'")

    source = raw["expr"]
    if not isinstance(source, str):
        raise ConfigError(f"expressions.{name}.expr must be a string")

    params = raw.get("params", [])
    if params is None:
        params = []
    if not isinstance(params, list):
        raise ConfigError(f"expressions.{name}.params must be a list")

    return ExpressionDefinition(
        name=name,
        source=source,
        result_type=_resolve_type(name, raw.get("type", DEFAULT_RESULT_TYPE_NAME)),
        parameters=tuple(params),
    )


def _resolve_type(name: str, type_name: object) -> ResultType:
    if not isinstance(type_name, str):
        raise ConfigError(f"expressions.{name}.type must be a string")
    try:
        return parse_type_name(type_name)
    except InvalidArgumentError as exc:
        raise ConfigError(f"expressions.{name}.type: {exc}") from exc
