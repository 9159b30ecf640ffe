"""Configuration loading and management for modgraph.

Configuration sources are merged in priority order:
    1. Defaults (defined in RenderConfig / ClassifierConfig)
    2. Project config (./modgraph.toml)
    3. Explicit config file (--config)
    4. Environment variables (MODGRAPH_* prefix, render options only)
    5. CLI overrides (passed as kwargs)

A config file has two optional tables::

    [render]
    show_exports = false
    max_service_length = 30

    [classifier]
    infra_keywords = ["db", "cache"]
    domain_keywords = ["order"]

Example:
    >>> config = load_config(max_service_length=30)
    >>> config.render.max_service_length
    30
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .semantics import DEFAULT_DOMAIN_KEYWORDS, DEFAULT_INFRA_KEYWORDS, ModuleClassifier

PROJECT_CONFIG_NAME = "modgraph.toml"
ENV_PREFIX = "MODGRAPH_"

# Shortest limit that still leaves one character before the ellipsis
MIN_SERVICE_LENGTH = 4


@dataclass(frozen=True)
class RenderConfig:
    """Renderer options.

    Attributes:
        show_exports: Show exported services on module nodes
        show_services: Label edges with imported services
        max_service_length: Truncate edge labels longer than this
        title: Timeline title (empty string hides it)
        show_counts: Show export/import counts in the timeline
    """

    show_exports: bool = True
    show_services: bool = True
    max_service_length: int = 50
    title: str = "Module initialization timeline"
    show_counts: bool = True

    def __post_init__(self) -> None:
        type_hints = get_type_hints(RenderConfig)
        for f in fields(self):
            _check_type(f.name, getattr(self, f.name), type_hints[f.name])

        if self.max_service_length < MIN_SERVICE_LENGTH:
            raise InvalidConfigError(
                "max_service_length",
                self.max_service_length,
                f"must be at least {MIN_SERVICE_LENGTH}",
            )

    def renderer_options(self, renderer: str) -> dict[str, Any]:
        """Constructor arguments for the named renderer."""
        if renderer == "timeline":
            return {"title": self.title, "show_counts": self.show_counts}
        return {
            "show_exports": self.show_exports,
            "show_services": self.show_services,
            "max_service_length": self.max_service_length,
        }


@dataclass(frozen=True)
class ClassifierConfig:
    """Keyword vocabularies for the module classifier.

    Empty tuples are valid and turn keyword scoring off.
    """

    infra_keywords: tuple[str, ...] = DEFAULT_INFRA_KEYWORDS
    domain_keywords: tuple[str, ...] = DEFAULT_DOMAIN_KEYWORDS

    def __post_init__(self) -> None:
        for name in ("infra_keywords", "domain_keywords"):
            value = getattr(self, name)
            if isinstance(value, str) or not all(isinstance(kw, str) for kw in value):
                raise InvalidConfigError(name, value, "must be a list of strings")
            object.__setattr__(self, name, tuple(value))

    def build_classifier(self) -> ModuleClassifier:
        return ModuleClassifier(self.infra_keywords, self.domain_keywords)


@dataclass(frozen=True)
class ModgraphConfig:
    """Complete configuration."""

    render: RenderConfig = field(default_factory=RenderConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)


def load_config(config_file: Path | None = None, **overrides: Any) -> ModgraphConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Render option overrides (typically from CLI flags).
            None values are ignored so unset flags keep lower layers.

    Returns:
        Validated ModgraphConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    render: dict[str, Any] = {}
    classifier: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        _merge_file(project_config, render, classifier)

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge_file(config_file, render, classifier)

    render.update(_load_env_vars())
    render.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ModgraphConfig(
            render=RenderConfig(**render),
            classifier=ClassifierConfig(**classifier),
        )
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def with_overrides(config: ModgraphConfig, **overrides: Any) -> ModgraphConfig:
    """Return a copy of ``config`` with render options replaced."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, render=replace(config.render, **changes))


def _merge_file(path: Path, render: dict[str, Any], classifier: dict[str, Any]) -> None:
    try:
        data = _load_toml_file(path)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    unknown = set(data) - {"render", "classifier"}
    if unknown:
        raise ConfigurationError(
            f"Unknown section(s) in '{path}': {', '.join(sorted(unknown))}"
        )
    for section, target in (("render", render), ("classifier", classifier)):
        values = data.get(section, {})
        if not isinstance(values, dict):
            raise ConfigurationError(f"[{section}] in '{path}' must be a table")
        target.update(values)


def _load_env_vars() -> dict[str, Any]:
    """Load render options from MODGRAPH_* environment variables.

    Supported environment variables:
        MODGRAPH_SHOW_EXPORTS: bool (true/false/1/0)
        MODGRAPH_SHOW_SERVICES: bool
        MODGRAPH_MAX_SERVICE_LENGTH: int
        MODGRAPH_TITLE: str
        MODGRAPH_SHOW_COUNTS: bool

    Returns:
        Dict of field_name -> parsed_value for any MODGRAPH_* vars found.
    """
    type_hints = get_type_hints(RenderConfig)
    result: dict[str, Any] = {}

    for f in fields(RenderConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")
    if type_hint is int:
        return int(value)
    return value


def _check_type(key: str, value: Any, type_hint: Any) -> None:
    """Reject values whose type does not match the field.

    Raises:
        InvalidConfigError: If value is not of the declared type
    """
    if type_hint is bool:
        valid = type(value) is bool
    elif type_hint is int:
        # bool is an int subclass
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, type_hint)
    if not valid:
        raise InvalidConfigError(key, value, f"must be {type_hint.__name__}")


def _load_toml_file(path: Path) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)
