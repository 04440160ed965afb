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

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from plugingen.constants import MODULE_ANNOTATION, CORE_ANNOTATION

"""
Input model for the plugin generator.

A declaration is what a build hands over for one annotated type. It is
immutable and lives for exactly one generation round.
"""


class ElementKind(Enum):
  MODULE = MODULE_ANNOTATION
  CORE = CORE_ANNOTATION


@dataclass(frozen=True)
class DependencyDescriptor:
  """
  (identifier, version expression, optional flag) for one inter-module
  requirement. Fields are rendered verbatim.
  """
  identifier: str
  version: str = ""
  optional: bool = False


@dataclass(frozen=True)
class ModuleDeclaration:
  simple_name: str
  package: str
  dependencies: Tuple[DependencyDescriptor, ...] = ()
  kind: ElementKind = ElementKind.MODULE

  @property
  def is_core(self) -> bool:
    return self.kind is ElementKind.CORE

  @property
  def qualified_name(self) -> str:
    return f"{self.package}.{self.simple_name}"


@dataclass
class GenerationRound:
  """
  One processing round as seen by the generator.

  processing_over marks the final round a build runs after all sources
  are known; nothing is generated in it.
  """
  declarations: Sequence[ModuleDeclaration] = field(default_factory=tuple)
  processing_over: bool = False

  def elements_annotated_with(self, kind: ElementKind) -> List[ModuleDeclaration]:
    return [d for d in self.declarations if d.kind is kind]
