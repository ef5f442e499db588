from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.errors import ConfigurationError
from ..core.platform import host_utc_offset


class GeoConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  latitude: float = Field(ge=-90, le=90)
  longitude: float = Field(ge=-180, le=180)
  utc_offset: int = Field(ge=-12, le=14)


class RefreshPolicy(str, Enum):
  DAILY = "daily"
  # Compute sunrise/sunset once at startup and keep it for the whole run.
  ONCE = "once"


class Settings(BaseModel):
  geo: GeoConfig
  refresh: RefreshPolicy = RefreshPolicy.DAILY
  poll_interval: float = Field(default=60.0, gt=0)


def _describe(err: ValidationError) -> str:
  parts = []
  for e in err.errors():
    loc = ".".join(str(p) for p in e["loc"] if p != "geo") or "config"
    parts.append(f"{loc}: {e['msg']}")
  return "; ".join(parts)


def build_settings(raw: Dict[str, Any]) -> Settings:
  """Validate a flat mapping of config keys into Settings.

  ``utc_offset`` falls back to the host's current offset when absent.
  """
  raw = {k: v for k, v in raw.items() if v is not None}
  geo_raw = {k: raw.pop(k) for k in ("latitude", "longitude", "utc_offset") if k in raw}
  missing = [k for k in ("latitude", "longitude") if k not in geo_raw]
  if missing:
    raise ConfigurationError(f"Missing required setting(s): {', '.join(missing)}")
  if "utc_offset" not in geo_raw:
    geo_raw["utc_offset"] = host_utc_offset()
  try:
    return Settings(geo=GeoConfig(**geo_raw), **raw)
  except ValidationError as e:
    raise ConfigurationError(f"Invalid configuration: {_describe(e)}") from e


def load_settings(path: Optional[Union[str, Path]] = None, overrides: Optional[Dict[str, Any]] = None) -> Settings:
  raw: Dict[str, Any] = {}
  if path is not None:
    try:
      loaded = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
      raise ConfigurationError(f"Cannot read config {path}: {e}") from e
    if loaded is None:
      loaded = {}
    if not isinstance(loaded, dict):
      raise ConfigurationError(f"Config {path} must be a mapping of settings")
    raw.update(loaded)
  raw.update({k: v for k, v in (overrides or {}).items() if v is not None})
  return build_settings(raw)
