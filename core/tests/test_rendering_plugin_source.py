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

from plugingen.config.build_options import BuildOptions
from plugingen.declarations import DependencyDescriptor
from plugingen.generation.mappers import map_declaration_to_descriptor
from plugingen.rendering.renderer import (
  render_dependency,
  render_dependency_list,
  render_plugin_source,
)


ECONOMY_SOURCE = """\
package org.example;

import javax.inject.Inject;
import com.google.inject.Injector;
import org.spongepowered.api.plugin.Plugin;
import org.spongepowered.api.plugin.Dependency;
import org.cubeengine.libcube.CubeEnginePlugin;
import org.cubeengine.libcube.LibCube;
import org.spongepowered.api.Sponge;
import org.example.Economy;

@Plugin(id = PluginEconomy.ECONOMY_ID,
        name = "CubeEngine - Economy Module",
        version = PluginEconomy.ECONOMY_VERSION,
        description = "unknown",
        url = "",
        authors = "unknown Team",
        dependencies = {@Dependency(id = "cubeengine-core", version = "3.2", optional = false)})
public class PluginEconomy extends CubeEnginePlugin
{
    public static final String ECONOMY_ID = "cubeengine-economy";
    public static final String ECONOMY_VERSION = "1.0";

    public PluginEconomy()
    {
         super(Economy.class);
    }

    public String sourceVersion()
    {
        return "unknown";
    }
}
"""


def _render(declaration, options):
  descriptor = map_declaration_to_descriptor(declaration, options)
  return render_plugin_source(declaration, descriptor, declaration.is_core)


# ---------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------

def test_render_dependency_uses_java_booleans():
  dep = DependencyDescriptor("chat", "2.0", True)
  assert render_dependency(dep) == '@Dependency(id = "chat", version = "2.0", optional = true)'


def test_render_dependency_keeps_version_expression_verbatim():
  dep = DependencyDescriptor("cubeengine-core", "[1.0,2.0)", False)
  assert 'version = "[1.0,2.0)"' in render_dependency(dep)


def test_render_dependency_list_joins_with_comma_newline():
  deps = [DependencyDescriptor("a", "1", False), DependencyDescriptor("b", "2", True)]
  rendered = render_dependency_list(deps)

  assert rendered == (
    '@Dependency(id = "a", version = "1", optional = false),\n'
    '@Dependency(id = "b", version = "2", optional = true)'
  )


def test_render_dependency_list_empty():
  assert render_dependency_list([]) == ""


# ---------------------------------------------------------------------
# Full source
# ---------------------------------------------------------------------

def test_render_module_source_exact(economy_module, economy_options):
  assert _render(economy_module, economy_options) == ECONOMY_SOURCE


def test_render_core_source_omits_libcube_import_and_dependencies(economy_core, economy_options):
  source = _render(economy_core, economy_options)

  assert "import org.cubeengine.libcube.LibCube;" not in source
  assert "import org.cubeengine.libcube.CubeEnginePlugin;" in source
  assert "dependencies = {})" in source
  # otherwise identical to the module wrapper
  expected = (
    ECONOMY_SOURCE
    .replace("import org.cubeengine.libcube.LibCube;\n", "")
    .replace('{@Dependency(id = "cubeengine-core", version = "3.2", optional = false)}', "{}")
  )
  assert source == expected


def test_render_declared_dependency_before_core(economy_module_with_chat, economy_options):
  source = _render(economy_module_with_chat, economy_options)

  assert (
    'dependencies = {@Dependency(id = "chat", version = "2.0", optional = true),\n'
    '@Dependency(id = "cubeengine-core", version = "3.2", optional = false)})\n'
  ) in source


def test_render_all_options(economy_module):
  options = BuildOptions({
    "cubeengine.module.id": "eco",
    "cubeengine.module.name": "Economy",
    "cubeengine.module.version": "2.1.0",
    "cubeengine.module.description": "Money for everyone",
    "cubeengine.module.team": "CubeEngine",
    "cubeengine.module.url": "https://cubeengine.org",
    "cubeengine.module.sourceversion": "master-abc123",
  })
  source = _render(economy_module, options)

  assert 'public static final String ECONOMY_ID = "cubeengine-eco";' in source
  assert 'public static final String ECONOMY_VERSION = "2.1.0";' in source
  assert '        description = "Money for everyone",\n' in source
  assert '        url = "https://cubeengine.org",\n' in source
  assert '        authors = "CubeEngine Team",\n' in source
  assert 'return "master-abc123";' in source


def test_render_is_deterministic(economy_module_with_chat, economy_options):
  descriptor = map_declaration_to_descriptor(economy_module_with_chat, economy_options)

  first = render_plugin_source(economy_module_with_chat, descriptor, False)
  second = render_plugin_source(economy_module_with_chat, descriptor, False)

  assert first == second
