from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from typing import Any, Optional

from csvwordfreq.constants import (CONFIG_ENV, DATA_DIR, DELIMITER, LOG_LEVEL,
                                   TARGET_COLUMN, TOP_N)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
  pass


@dataclass(frozen=True)
class Config:
  """Everything a run needs to know, passed into the walk at construction time."""
  data_dir: str = DATA_DIR
  column: int = TARGET_COLUMN
  delimiter: str = DELIMITER
  top_n: int = TOP_N
  # use the csv module instead of the plain split, so quoted fields survive
  quoted: bool = False
  log_level: str = LOG_LEVEL

  def __post_init__(self) -> None:
    if not isinstance(self.data_dir, str) or not self.data_dir:
      raise ConfigError("data_dir must be a non-empty path")
    if not _is_int(self.column) or self.column < 0:
      raise ConfigError(f"column must be a non-negative integer, got {self.column!r}")
    if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
      raise ConfigError(f"delimiter must be a single character, got {self.delimiter!r}")
    if not _is_int(self.top_n) or self.top_n < 0:
      raise ConfigError(f"top_n must be a non-negative integer, got {self.top_n!r}")
    if not isinstance(self.quoted, bool):
      raise ConfigError(f"quoted must be true or false, got {self.quoted!r}")
    if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
      raise ConfigError(f"unknown log level {self.log_level!r}")
    object.__setattr__(self, "log_level", self.log_level.upper())

  @classmethod
  def from_dict(cls, values: dict[str, Any]) -> Config:
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
      raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
    return cls(**values)

  def with_overrides(self, **overrides: Any) -> Config:
    # None means "not given on the command line"
    given = {k: v for k, v in overrides.items() if v is not None}
    if not given:
      return self
    try:
      return dataclasses.replace(self, **given)
    except TypeError as e:
      raise ConfigError(str(e)) from e


def _is_int(value: Any) -> bool:
  return isinstance(value, int) and not isinstance(value, bool)


def read_config(file_path: str) -> dict[str, Any]:
  """Read and return the content of a JSON configuration file."""
  try:
    with open(file_path, "r") as file:
      config = json.load(file)
  except OSError as e:
    raise ConfigError(f"cannot read config file {file_path}: {e.strerror}") from e
  except json.JSONDecodeError as e:
    raise ConfigError(f"invalid JSON in config file {file_path}: {e}") from e
  if not isinstance(config, dict):
    raise ConfigError(f"config file {file_path} must hold a JSON object")
  return config


def load_config(file_path: Optional[str] = None, **overrides: Any) -> Config:
  """Defaults, then the JSON file (explicit path or $WC_CONFIG), then overrides."""
  if file_path is None:
    file_path = os.getenv(CONFIG_ENV)
  config = Config.from_dict(read_config(file_path)) if file_path else Config()
  return config.with_overrides(**overrides)
