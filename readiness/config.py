from __future__ import annotations

"""Application configuration.

Values are resolved in three layers: built-in defaults, an optional YAML file
(`config/app.yaml` unless another path is given) and `READINESS_*`
environment variables. The submission endpoint and the question catalog are
configuration, never module-level constants, so tests can point the client at
a fake endpoint and inject their own catalog.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError
from .io_paths import CONFIG_DIR, STATE_DIR

logger = logging.getLogger(__name__)

DEFAULT_FORM_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbwgMSVSDhTbeJQI-HjagVyD8CUwvzENaddGyUIXUY2J4PS2CFwwyESaMBsvM3NPlods/exec"
)
DEFAULT_CONFIG_PATH = CONFIG_DIR / "app.yaml"

ENV_PREFIX = "READINESS_"


@dataclass(frozen=True)
class AppConfig:
    form_url: str = DEFAULT_FORM_URL
    # Seconds before the submission request is abandoned as a transport error
    request_timeout: float = 15.0
    default_region: str = "KE"
    state_dir: Path = field(default_factory=lambda: STATE_DIR)
    state_slot: str = "ai_readiness_form"
    export_filename: str = "AI_Readiness_Assessment.pdf"
    catalog_path: Optional[Path] = None
    debug: bool = False

    @property
    def state_path(self) -> Path:
        return Path(self.state_dir) / f"{self.state_slot}.json"


def _coerce(name: str, value: Any) -> Any:
    if name == "request_timeout":
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"request_timeout must be a number, got {value!r}") from None
        if timeout <= 0:
            raise ConfigError("request_timeout must be > 0")
        return timeout
    if name == "debug":
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if name in {"state_dir", "catalog_path"}:
        return Path(value) if value not in (None, "") else None
    if name == "default_region":
        region = str(value).strip().upper()
        if len(region) != 2 or not region.isalpha():
            raise ConfigError(f"default_region must be a two-letter region code, got {value!r}")
        return region
    if name in {"form_url", "state_slot", "export_filename"}:
        text = str(value).strip()
        if not text:
            raise ConfigError(f"{name} must not be empty")
        if name == "form_url" and not text.startswith(("http://", "https://")):
            raise ConfigError(f"form_url must be an http(s) URL, got {text!r}")
        return text
    raise ConfigError(f"Unknown configuration key '{name}'")


def _apply(config: AppConfig, values: Mapping[str, Any]) -> AppConfig:
    updates: Dict[str, Any] = {}
    for name, value in values.items():
        coerced = _coerce(str(name), value)
        if name == "state_dir" and coerced is None:
            continue
        updates[str(name)] = coerced
    return replace(config, **updates) if updates else config


def _env_values(environ: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for name in (
        "form_url",
        "request_timeout",
        "default_region",
        "state_dir",
        "state_slot",
        "export_filename",
        "catalog_path",
        "debug",
    ):
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            out[name] = raw
    return out


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Resolve the application configuration.

    An explicit `path` must exist; the default `config/app.yaml` is optional.
    """
    config = AppConfig()
    explicit = path is not None
    path = Path(path) if explicit else DEFAULT_CONFIG_PATH

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to read config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        config = _apply(config, data)
        logger.debug("Loaded config from %s", path)
    elif explicit:
        raise ConfigError(f"Config file not found: {path}")

    config = _apply(config, _env_values(os.environ if environ is None else environ))
    return config


__all__ = ["AppConfig", "DEFAULT_FORM_URL", "load_config"]
