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

from dataclasses import dataclass
from typing import Tuple

from plugingen.config.build_options import BuildOptions
from plugingen.constants import AUTHORS_SUFFIX, RESOURCE_PACKAGE, LANG_RESOURCE_TEMPLATE
from plugingen.declarations import DependencyDescriptor, ModuleDeclaration
from plugingen.generation import naming
from plugingen.generation.dependencies import merge_dependencies
from plugingen.generation.options import resolve_options


@dataclass(frozen=True)
class GeneratedDescriptor:
  """
  Fully resolved context for one plugin wrapper.
  Built once per element, consumed by the renderer and the emitter.
  """
  class_name: str
  upper_name: str
  id_constant: str
  version_constant: str
  qualified_id: str
  display_name: str

  version: str
  description: str
  url: str
  authors: str
  source_version: str

  dependencies: Tuple[DependencyDescriptor, ...] = ()

  @property
  def lang_resource_name(self) -> str:
    # relative to the resource package, e.g. 'cubeengine-economy/lang/en_us.lang'
    return LANG_RESOURCE_TEMPLATE.format(qualified_id=self.qualified_id)

  @property
  def lang_resource_path(self) -> str:
    return f"{RESOURCE_PACKAGE}/{self.lang_resource_name}"


def map_declaration_to_descriptor(
  declaration: ModuleDeclaration,
  options: BuildOptions,
) -> GeneratedDescriptor:
  """
  Merge a declaration, its dependencies and the build options into the
  descriptor the renderer works from.
  """
  ids = naming.derive_identifiers(declaration.simple_name, options)
  resolved = resolve_options(options, declaration.simple_name)
  deps = merge_dependencies(declaration.dependencies, declaration.is_core, options)

  return GeneratedDescriptor(
    class_name=ids.class_name,
    upper_name=ids.upper_name,
    id_constant=ids.id_constant,
    version_constant=ids.version_constant,
    qualified_id=ids.qualified_id,
    display_name=ids.display_name,
    version=resolved.version,
    description=resolved.description,
    url=resolved.url,
    authors=resolved.team + AUTHORS_SUFFIX,
    source_version=resolved.source_version,
    dependencies=tuple(deps),
  )
