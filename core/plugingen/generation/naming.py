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
  PLUGIN_CLASS_PREFIX,
  PLUGIN_ID_PREFIX,
  PLUGIN_NAME_PREFIX,
  ID_CONSTANT_SUFFIX,
  VERSION_CONSTANT_SUFFIX,
  OPTION_NAME,
  OPTION_FALLBACKS,
)
from plugingen.generation.options import resolve_option, resolve_module_id


@dataclass(frozen=True)
class PluginIdentifiers:
  class_name: str
  upper_name: str
  id_constant: str
  version_constant: str
  qualified_id: str
  display_name: str


def build_plugin_class_name(simple_name: str) -> str:
  """
  Returns the name of the generated wrapper class.
  Example: 'Economy' -> 'PluginEconomy'
  """
  return f"{PLUGIN_CLASS_PREFIX}{simple_name}"


def build_constant_name(simple_name: str, suffix: str) -> str:
  """
  Returns a constant field name on the wrapper class.
  Example: ('Economy', '_ID') -> 'ECONOMY_ID'
  """
  return f"{simple_name.upper()}{suffix}"


def build_qualified_id(options: BuildOptions, simple_name: str) -> str:
  """
  Plugin id as registered with the loader.
  The module id option falls back to the lower-cased simple name:
  'Economy' -> 'cubeengine-economy'
  """
  return PLUGIN_ID_PREFIX + resolve_module_id(options, simple_name)


def build_display_name(options: BuildOptions) -> str:
  return PLUGIN_NAME_PREFIX + resolve_option(options, OPTION_NAME, OPTION_FALLBACKS[OPTION_NAME])


def derive_identifiers(simple_name: str, options: BuildOptions) -> PluginIdentifiers:
  """All names derived from one element; a pure function of its inputs."""
  return PluginIdentifiers(
    class_name=build_plugin_class_name(simple_name),
    upper_name=simple_name.upper(),
    id_constant=build_constant_name(simple_name, ID_CONSTANT_SUFFIX),
    version_constant=build_constant_name(simple_name, VERSION_CONSTANT_SUFFIX),
    qualified_id=build_qualified_id(options, simple_name),
    display_name=build_display_name(options),
  )
