"""
plugingen - CubeEngine plugin wrapper generator
Copyright © 2025 Ilona Tag

This file is part of plugingen.

plugingen is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

plugingen is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with plugingen. If not, see <https://www.gnu.org/licenses/>.

Contact: Ilona Tag, plugingen maintainer (see pyproject.toml).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

import yaml
from django.conf import settings

from plugingen.constants import SUPPORTED_OPTIONS
from utils.env import env_mapping, env_str

"""
Build option loading for the plugin generator.

Build options are the key/value pairs a build passes to the generator
(version, module id, display name, team, ...). They are collected once per
run into a read-only BuildOptions object that is handed explicitly to every
resolver call.

Sources, later ones win:
  1. YAML options file (flat mapping of option key -> value)
  2. PLUGINGEN_OPTIONS env var (JSON object)
  3. explicit overrides (e.g. -A key=value on the command line)
"""

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_FILENAME = "plugingen_options.yaml"


@dataclass(frozen=True)
class BuildOptions:
  values: Mapping[str, str] = field(default_factory=dict)

  def __post_init__(self):
    object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

  def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
    return self.values.get(name, default)

  def __contains__(self, name: str) -> bool:
    return name in self.values

  def unrecognized(self) -> list[str]:
    """Option keys no generator component reads."""
    return sorted(k for k in self.values if k not in SUPPORTED_OPTIONS)


def _find_options_path(explicit_path: str | None = None) -> Optional[Path]:
  """
  Locate the options file:

  1. explicit_path argument (must exist)
  2. Django settings.PLUGINGEN_OPTIONS_PATH
  3. env var PLUGINGEN_OPTIONS_PATH
  4. ./config/plugingen_options.yaml

  Returns None when only the implicit locations were tried and none exists.

  Raises:
      FileNotFoundError: if an explicitly configured file does not exist.
  """
  if explicit_path:
    p = Path(explicit_path)
    if not p.exists():
      raise FileNotFoundError(f"Build options file not found: {p}")
    return p

  configured = getattr(settings, "PLUGINGEN_OPTIONS_PATH", None) or env_str("PLUGINGEN_OPTIONS_PATH")
  if configured:
    p = Path(configured)
    if not p.exists():
      raise FileNotFoundError(
        f"Build options file not found: {p}. "
        "Check PLUGINGEN_OPTIONS_PATH."
      )
    return p

  fallback = Path.cwd() / "config" / DEFAULT_OPTIONS_FILENAME
  return fallback if fallback.exists() else None


def _stringify(data: Mapping, source: str, skip_empty: bool = False) -> Dict[str, str]:
  if not isinstance(data, Mapping):
    raise ValueError(f"Build options from {source} must be a mapping of key -> value.")
  out: Dict[str, str] = {}
  for key, value in data.items():
    if value is None or (skip_empty and value == ""):
      continue
    if isinstance(value, bool):
      value = "true" if value else "false"
    out[str(key)] = str(value)
  return out


def parse_option_pairs(pairs: Iterable[str] | None) -> Dict[str, str]:
  """Parse ['key=value', ...] as passed via -A on the command line."""
  out: Dict[str, str] = {}
  for raw in pairs or []:
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
      raise ValueError(f"Invalid build option '{raw}'. Expected KEY=VALUE.")
    out[key] = value
  return out


def load_build_options(
  options_path: Optional[str] = None,
  overrides: Optional[Mapping[str, str]] = None,
) -> BuildOptions:
  """Collect build options from file, environment and explicit overrides."""
  values: Dict[str, str] = {}

  path = _find_options_path(options_path)
  if path is not None:
    # BaseLoader keeps scalars as written: `version: 1.10` stays "1.10".
    # A bare `key:` loads as "" and counts as absent.
    with open(path, "r", encoding="utf-8") as f:
      data = yaml.load(f, Loader=yaml.BaseLoader) or {}
    values.update(_stringify(data, str(path), skip_empty=True))
    logger.debug("Loaded %d build options from %s", len(values), path)

  env_values = env_mapping("PLUGINGEN_OPTIONS")
  if env_values:
    values.update(_stringify(env_values, "PLUGINGEN_OPTIONS"))

  if overrides:
    values.update(_stringify(overrides, "overrides"))

  options = BuildOptions(values)
  for key in options.unrecognized():
    logger.warning("Build option '%s' is not recognized by the plugin generator.", key)
  return options
