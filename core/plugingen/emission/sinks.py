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

import io
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Dict, Iterator, Set, TextIO

from plugingen.constants import SOURCE_FILE_EXTENSION

"""
Output sinks.

A sink hands out one writer per artifact, scoped as a context manager. Like
a compiler's filer, a sink refuses to create the same artifact twice in one
run (FileExistsError).
"""


class OutputSink(ABC):

  def __init__(self) -> None:
    self._created: Set[str] = set()

  @staticmethod
  def source_location(qualified_name: str) -> str:
    """'org.example.PluginEconomy' -> 'org/example/PluginEconomy.java'"""
    return qualified_name.replace(".", "/") + SOURCE_FILE_EXTENSION

  @staticmethod
  def resource_location(package: str, relative_name: str) -> str:
    """('assets', 'cubeengine-economy/lang/en_us.lang') -> 'assets/cubeengine-economy/lang/en_us.lang'"""
    prefix = package.replace(".", "/")
    return f"{prefix}/{relative_name}" if prefix else relative_name

  def _claim(self, location: str) -> None:
    if location in self._created:
      raise FileExistsError(f"Attempt to recreate artifact '{location}' in the same run.")
    self._created.add(location)

  def open_source(self, qualified_name: str) -> ContextManager[TextIO]:
    location = self.source_location(qualified_name)
    self._claim(location)
    return self._open_source(location)

  def open_resource(self, package: str, relative_name: str) -> ContextManager[TextIO]:
    location = self.resource_location(package, relative_name)
    self._claim(location)
    return self._open_resource(location)

  @abstractmethod
  def _open_source(self, location: str) -> ContextManager[TextIO]:
    raise NotImplementedError

  @abstractmethod
  def _open_resource(self, location: str) -> ContextManager[TextIO]:
    raise NotImplementedError


class FilesystemSink(OutputSink):
  """
  Writes sources below source_root and resources below class_root,
  mirroring the package layout. Existing files from earlier runs are
  overwritten.
  """

  def __init__(self, source_root: Path | str, class_root: Path | str) -> None:
    super().__init__()
    self.source_root = Path(source_root)
    self.class_root = Path(class_root)

  @staticmethod
  def _open_path(path: Path) -> TextIO:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("w", encoding="utf-8", newline="\n")

  def _open_source(self, location: str) -> ContextManager[TextIO]:
    return self._open_path(self.source_root / location)

  def _open_resource(self, location: str) -> ContextManager[TextIO]:
    return self._open_path(self.class_root / location)


class InMemorySink(OutputSink):
  """Keeps every artifact in memory, keyed by location. Used for dry runs."""

  def __init__(self) -> None:
    super().__init__()
    self.sources: Dict[str, str] = {}
    self.resources: Dict[str, str] = {}

  @contextmanager
  def _buffer(self, target: Dict[str, str], location: str) -> Iterator[TextIO]:
    buf = io.StringIO()
    try:
      yield buf
    finally:
      # whatever was written stays, even if the writer failed midway
      target[location] = buf.getvalue()

  def _open_source(self, location: str) -> ContextManager[TextIO]:
    return self._buffer(self.sources, location)

  def _open_resource(self, location: str) -> ContextManager[TextIO]:
    return self._buffer(self.resources, location)
