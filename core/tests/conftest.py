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

import pytest

from plugingen.config.build_options import BuildOptions
from plugingen.declarations import (
  DependencyDescriptor,
  ElementKind,
  GenerationRound,
  ModuleDeclaration,
)
from plugingen.emission.sinks import InMemorySink
from plugingen.generation.plugin_generation_service import PluginGenerationService


# -------------------------------------------------------------------
# Build options
# -------------------------------------------------------------------
@pytest.fixture
def economy_options():
  """Options a typical module build passes in."""
  return BuildOptions({
    "cubeengine.module.id": "economy",
    "cubeengine.module.name": "Economy Module",
    "cubeengine.module.version": "1.0",
    "cubeengine.module.libcube.version": "3.2",
  })


@pytest.fixture
def empty_options():
  return BuildOptions()


# -------------------------------------------------------------------
# Declarations
# -------------------------------------------------------------------
@pytest.fixture
def economy_module():
  return ModuleDeclaration(simple_name="Economy", package="org.example")


@pytest.fixture
def economy_core():
  return ModuleDeclaration(simple_name="Economy", package="org.example", kind=ElementKind.CORE)


@pytest.fixture
def chat_dependency():
  return DependencyDescriptor(identifier="chat", version="2.0", optional=True)


@pytest.fixture
def economy_module_with_chat(chat_dependency):
  return ModuleDeclaration(
    simple_name="Economy",
    package="org.example",
    dependencies=(chat_dependency,),
  )


# -------------------------------------------------------------------
# Generation
# -------------------------------------------------------------------
@pytest.fixture
def memory_sink():
  return InMemorySink()


@pytest.fixture
def plugin_generation_service(economy_options, memory_sink):
  """PluginGenerationService writing into memory."""
  return PluginGenerationService(economy_options, memory_sink)


@pytest.fixture
def multi_module_service(memory_sink):
  """
  Service for rounds with several elements. No module id option, so every
  element derives its own plugin id from its simple name.
  """
  return PluginGenerationService(
    BuildOptions({"cubeengine.module.libcube.version": "3.2"}),
    memory_sink,
  )


@pytest.fixture
def mixed_round():
  """Core listed first on purpose: modules must still be generated first."""
  return GenerationRound(declarations=(
    ModuleDeclaration(simple_name="LibCube", package="org.cubeengine.libcube", kind=ElementKind.CORE),
    ModuleDeclaration(simple_name="Economy", package="org.example"),
    ModuleDeclaration(simple_name="Chat", package="org.example.chat"),
  ))
