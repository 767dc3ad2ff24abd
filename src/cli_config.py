"""Runtime configuration for registry lookups.

Defaults come from Constants and are overridden, in increasing precedence,
by a YAML config file, environment variables and CLI flags. The resulting
ResolverConfig is passed explicitly to the resolver.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a config file cannot be read or holds invalid values."""


@dataclass
class ResolverConfig:
    """Settings consumed by the fetcher and the multi-registry lookup."""
    registry_urls: List[str] = field(default_factory=lambda: list(Constants.DEFAULT_REGISTRY_URLS))
    registry_strategy: str = Constants.DEFAULT_REGISTRY_STRATEGY
    request_timeout: float = Constants.REQUEST_TIMEOUT
    retry_max: int = Constants.HTTP_RETRY_MAX
    retry_delay: float = Constants.HTTP_RETRY_BASE_DELAY_SEC

    def __post_init__(self) -> None:
        if self.registry_strategy not in Constants.STRATEGIES:
            raise ConfigError(
                f"Unknown registry strategy '{self.registry_strategy}'. "
                f"Expected one of: {', '.join(Constants.STRATEGIES)}"
            )
        if not self.registry_urls:
            raise ConfigError("At least one registry URL is required")


_KEYS = {
    "registry_urls": list,
    "registry_strategy": str,
    "request_timeout": float,
    "retry_max": int,
    "retry_delay": float,
}


def _coerce(values: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in values.items():
        caster = _KEYS.get(key)
        if caster is None:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        if value is None:
            continue
        try:
            if caster is list:
                out[key] = [str(v) for v in value] if isinstance(value, (list, tuple)) else [str(value)]
            else:
                out[key] = caster(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid value for {key}: {value!r}") from exc
    return out


def load_config_file(path: str) -> Dict[str, Any]:
    """Read settings from a YAML (or JSON) file.

    Settings may sit at the top level or under an ``sbt_releases`` section.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a mapping")
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{Constants.CONFIG_SECTION}' in {path} must be a mapping")
    return _coerce(section)


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Settings taken from SBT_RELEASES_* environment variables."""
    environ = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    urls = environ.get(Constants.ENV_REGISTRY_URLS)
    if urls and urls.strip():
        out["registry_urls"] = [u.strip() for u in urls.split(",") if u.strip()]
    timeout = environ.get(Constants.ENV_TIMEOUT)
    if timeout and timeout.strip():
        try:
            out["request_timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"Invalid {Constants.ENV_TIMEOUT}: {timeout!r}") from exc
    return out


def build_config(args: Any = None, environ: Optional[Mapping[str, str]] = None) -> ResolverConfig:
    """Assemble a ResolverConfig from defaults, config file, environment and CLI args."""
    settings: Dict[str, Any] = {}
    config_path = getattr(args, "CONFIG", None)
    if config_path:
        settings.update(load_config_file(config_path))
    settings.update(env_overrides(environ))

    registries = getattr(args, "REGISTRY", None)
    if registries:
        settings["registry_urls"] = list(registries)
    strategy = getattr(args, "STRATEGY", None)
    if strategy:
        settings["registry_strategy"] = strategy
    timeout = getattr(args, "TIMEOUT", None)
    if timeout is not None:
        settings["request_timeout"] = float(timeout)

    return replace(ResolverConfig(), **settings)
