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

from typing import List, Sequence

from plugingen.config.build_options import BuildOptions
from plugingen.constants import CORE_DEPENDENCY_ID
from plugingen.declarations import DependencyDescriptor
from plugingen.generation.options import resolve_libcube_version


def build_core_dependency(options: BuildOptions) -> DependencyDescriptor:
  """The required dependency every non-core plugin has on cubeengine-core."""
  return DependencyDescriptor(
    identifier=CORE_DEPENDENCY_ID,
    version=resolve_libcube_version(options),
    optional=False,
  )


def merge_dependencies(
  declared: Sequence[DependencyDescriptor],
  is_core: bool,
  options: BuildOptions,
) -> List[DependencyDescriptor]:
  """
  Final dependency list for one element, in rendering order.

  Declared dependencies keep their order. Non-core elements get the core
  dependency appended last; the core itself never depends on itself.

  No de-duplication: a module that also declares cubeengine-core lists it
  twice.
  """
  merged = list(declared)
  if not is_core:
    merged.append(build_core_dependency(options))
  return merged
