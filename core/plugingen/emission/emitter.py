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

from plugingen.constants import RESOURCE_PACKAGE
from plugingen.declarations import ModuleDeclaration
from plugingen.emission.sinks import OutputSink
from plugingen.exceptions import PluginGenerationError
from plugingen.generation.mappers import GeneratedDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmittedArtifacts:
  source_location: str
  resource_location: str


class ArtifactEmitter:
  """
  Writes the two artifacts of one plugin through an OutputSink:

  - the wrapper source, named <package>.<PluginClass>
  - an empty lang resource at assets/<qualified id>/lang/en_us.lang

  Each writer is closed on every exit path. An OSError from the sink is
  fatal for the element and surfaces as PluginGenerationError; files that
  were already written are left alone.
  """

  def __init__(self, sink: OutputSink):
    self.sink = sink

  def write_source(self, qualified_name: str, text: str) -> str:
    try:
      with self.sink.open_source(qualified_name) as writer:
        writer.write(text)
    except OSError as exc:
      raise PluginGenerationError(f"Could not write plugin source '{qualified_name}': {exc}") from exc
    location = self.sink.source_location(qualified_name)
    logger.debug("Wrote plugin source %s (%d chars)", location, len(text))
    return location

  def write_empty_resource(self, package: str, relative_name: str) -> str:
    try:
      with self.sink.open_resource(package, relative_name):
        pass
    except OSError as exc:
      raise PluginGenerationError(
        f"Could not create resource '{package}/{relative_name}': {exc}"
      ) from exc
    location = self.sink.resource_location(package, relative_name)
    logger.debug("Created empty resource %s", location)
    return location

  def emit(
    self,
    declaration: ModuleDeclaration,
    descriptor: GeneratedDescriptor,
    source_text: str,
  ) -> EmittedArtifacts:
    source = self.write_source(f"{declaration.package}.{descriptor.class_name}", source_text)
    resource = self.write_empty_resource(RESOURCE_PACKAGE, descriptor.lang_resource_name)
    return EmittedArtifacts(source_location=source, resource_location=resource)
