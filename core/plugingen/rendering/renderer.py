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

from typing import Iterable, List

from plugingen.declarations import DependencyDescriptor, ModuleDeclaration
from plugingen.generation.mappers import GeneratedDescriptor

# Imports every wrapper carries, in emission order. The LibCube import is
# only valid outside of the core itself.
BASE_IMPORTS_BEFORE_LIBCUBE = (
  "javax.inject.Inject",
  "com.google.inject.Injector",
  "org.spongepowered.api.plugin.Plugin",
  "org.spongepowered.api.plugin.Dependency",
  "org.cubeengine.libcube.CubeEnginePlugin",
)
LIBCUBE_IMPORT = "org.cubeengine.libcube.LibCube"
BASE_IMPORTS_AFTER_LIBCUBE = (
  "org.spongepowered.api.Sponge",
)

PLUGIN_BASE_CLASS = "CubeEnginePlugin"

ANNOTATION_INDENT = " " * 8
MEMBER_INDENT = " " * 4


def render_java_bool(value: bool) -> str:
  return "true" if value else "false"


def render_dependency(dep: DependencyDescriptor) -> str:
  """Fields are emitted verbatim; the version is not checked."""
  return (
    f'@Dependency(id = "{dep.identifier}", '
    f'version = "{dep.version}", '
    f"optional = {render_java_bool(dep.optional)})"
  )


def render_dependency_list(deps: Iterable[DependencyDescriptor]) -> str:
  return ",\n".join(render_dependency(d) for d in deps)


def render_imports(declaration: ModuleDeclaration, is_core: bool) -> List[str]:
  imports = list(BASE_IMPORTS_BEFORE_LIBCUBE)
  if not is_core:
    imports.append(LIBCUBE_IMPORT)
  imports.extend(BASE_IMPORTS_AFTER_LIBCUBE)
  imports.append(declaration.qualified_name)
  return [f"import {name};" for name in imports]


def render_plugin_annotation(descriptor: GeneratedDescriptor) -> List[str]:
  d = descriptor
  return [
    f"@Plugin(id = {d.class_name}.{d.id_constant},",
    f'{ANNOTATION_INDENT}name = "{d.display_name}",',
    f"{ANNOTATION_INDENT}version = {d.class_name}.{d.version_constant},",
    f'{ANNOTATION_INDENT}description = "{d.description}",',
    f'{ANNOTATION_INDENT}url = "{d.url}",',
    f'{ANNOTATION_INDENT}authors = "{d.authors}",',
    f"{ANNOTATION_INDENT}dependencies = {{{render_dependency_list(d.dependencies)}}})",
  ]


def render_class_body(declaration: ModuleDeclaration, descriptor: GeneratedDescriptor) -> List[str]:
  d = descriptor
  m = MEMBER_INDENT
  return [
    f"public class {d.class_name} extends {PLUGIN_BASE_CLASS}",
    "{",
    f'{m}public static final String {d.id_constant} = "{d.qualified_id}";',
    f'{m}public static final String {d.version_constant} = "{d.version}";',
    "",
    f"{m}public {d.class_name}()",
    f"{m}{{",
    # super() is indented by nine spaces in the published wrapper format
    f"{m}     super({declaration.simple_name}.class);",
    f"{m}}}",
    "",
    f"{m}public String sourceVersion()",
    f"{m}{{",
    f'{m}{m}return "{d.source_version}";',
    f"{m}}}",
    "}",
  ]


def render_plugin_source(
  declaration: ModuleDeclaration,
  descriptor: GeneratedDescriptor,
  is_core: bool,
) -> str:
  """
  Render the complete wrapper source for one element.

  Layout:
    package clause
    imports (LibCube only for non-core elements)
    @Plugin(...) metadata block
    class with id/version constants, constructor and sourceVersion()
  """
  lines: List[str] = [f"package {declaration.package};", ""]
  lines.extend(render_imports(declaration, is_core))
  lines.append("")
  lines.extend(render_plugin_annotation(descriptor))
  lines.extend(render_class_body(declaration, descriptor))
  return "\n".join(lines) + "\n"
