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

from dataclasses import dataclass

from plugingen.config.build_options import BuildOptions
from plugingen.constants import (
  OPTION_VERSION,
  OPTION_ID,
  OPTION_NAME,
  OPTION_DESCRIPTION,
  OPTION_TEAM,
  OPTION_URL,
  OPTION_LIBCUBE_VERSION,
  OPTION_SOURCE_VERSION,
  OPTION_FALLBACKS,
  SOURCE_VERSION_PLACEHOLDER,
  UNKNOWN,
)


@dataclass(frozen=True)
class ResolvedOptions:
  """Option values for one element, every fallback already applied."""
  version: str
  module_id: str
  name: str
  description: str
  team: str
  url: str
  source_version: str
  libcube_version: str


def resolve_option(options: BuildOptions, name: str, fallback: str) -> str:
  """
  Return the build option `name`, or `fallback` when the build did not set it.
  Absence is never an error.
  """
  value = options.get(name)
  return fallback if value is None else value


def resolve_source_version(options: BuildOptions) -> str:
  """
  Source-control revision baked into the plugin.

  An unfiltered placeholder means the build had no git metadata; it is
  treated exactly like a missing option.
  """
  value = resolve_option(options, OPTION_SOURCE_VERSION, UNKNOWN)
  if value == SOURCE_VERSION_PLACEHOLDER:
    return UNKNOWN
  return value


def resolve_module_id(options: BuildOptions, simple_name: str) -> str:
  return resolve_option(options, OPTION_ID, simple_name.lower())


def resolve_libcube_version(options: BuildOptions) -> str:
  return resolve_option(options, OPTION_LIBCUBE_VERSION, OPTION_FALLBACKS[OPTION_LIBCUBE_VERSION])


def resolve_options(options: BuildOptions, simple_name: str) -> ResolvedOptions:
  def _get(name: str) -> str:
    return resolve_option(options, name, OPTION_FALLBACKS[name])

  return ResolvedOptions(
    version=_get(OPTION_VERSION),
    module_id=resolve_module_id(options, simple_name),
    name=_get(OPTION_NAME),
    description=_get(OPTION_DESCRIPTION),
    team=_get(OPTION_TEAM),
    url=_get(OPTION_URL),
    source_version=resolve_source_version(options),
    libcube_version=resolve_libcube_version(options),
  )
