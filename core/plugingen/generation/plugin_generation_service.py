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
from dataclasses import dataclass
from typing import List

from plugingen.config.build_options import BuildOptions
from plugingen.declarations import ElementKind, GenerationRound, ModuleDeclaration
from plugingen.emission.emitter import ArtifactEmitter
from plugingen.emission.sinks import OutputSink
from plugingen.generation.mappers import GeneratedDescriptor, map_declaration_to_descriptor
from plugingen.rendering.renderer import render_plugin_source

logger = logging.getLogger(__name__)

# Modules first, then the core: the order a round has always been processed in.
KIND_ORDER = (ElementKind.MODULE, ElementKind.CORE)


@dataclass(frozen=True)
class GenerationResult:
  declaration: ModuleDeclaration
  descriptor: GeneratedDescriptor
  source_location: str
  resource_location: str


class PluginGenerationService:
  """
  Responsible for turning declared modules (and the core) into plugin
  wrappers:

    resolve options -> merge dependencies -> derive names -> render -> emit

  One element is finished completely before the next one starts. The
  BuildOptions are only read.
  """

  def __init__(self, options: BuildOptions, sink: OutputSink):
    self.options = options
    self.emitter = ArtifactEmitter(sink)

  def build_descriptor(self, declaration: ModuleDeclaration) -> GeneratedDescriptor:
    return map_declaration_to_descriptor(declaration, self.options)

  def render(self, declaration: ModuleDeclaration) -> str:
    """Render the wrapper source without writing anything."""
    descriptor = self.build_descriptor(declaration)
    return render_plugin_source(declaration, descriptor, declaration.is_core)

  def generate(self, declaration: ModuleDeclaration) -> GenerationResult:
    """
    Generate both artifacts for one element.
    PluginGenerationError from the emitter propagates unchanged.
    """
    descriptor = self.build_descriptor(declaration)
    text = render_plugin_source(declaration, descriptor, declaration.is_core)
    emitted = self.emitter.emit(declaration, descriptor, text)

    logger.info(
      "Generated %s for %s (id=%s, %d dependencies)",
      descriptor.class_name,
      declaration.qualified_name,
      descriptor.qualified_id,
      len(descriptor.dependencies),
    )
    return GenerationResult(
      declaration=declaration,
      descriptor=descriptor,
      source_location=emitted.source_location,
      resource_location=emitted.resource_location,
    )

  def process(self, generation_round: GenerationRound) -> List[GenerationResult]:
    """
    Generate wrappers for every annotated element of a round.

    The final round (processing_over) produces nothing. A failure aborts the
    whole round; elements generated before it keep their files.
    """
    if generation_round.processing_over:
      return []

    results: List[GenerationResult] = []
    for kind in KIND_ORDER:
      for declaration in generation_round.elements_annotated_with(kind):
        results.append(self.generate(declaration))

    logger.info("Plugin generation round finished: %d plugin(s) generated.", len(results))
    return results
