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
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml
from django.core.exceptions import ValidationError

from plugingen.declarations import (
  DependencyDescriptor,
  ElementKind,
  GenerationRound,
  ModuleDeclaration,
)
from plugingen.generation.validators import (
  validate_dependency_id,
  validate_java_identifier,
  validate_package_name,
)

logger = logging.getLogger(__name__)

"""
Manifest format:

  modules:
    - name: org.cubeengine.module.economy.Economy
      dependencies:
        - id: cubeengine-chat
          version: "2.0"
          optional: true
    - org.cubeengine.module.fun.Fun          # shorthand, no dependencies
  cores:
    - name: org.cubeengine.libcube.LibCube

Instead of `name`, an entry may give `package` and `simple_name`.
A dependency may use `value` instead of `id` (the annotation's attribute name).
"""

MANIFEST_SECTIONS = {
  "modules": ElementKind.MODULE,
  "cores": ElementKind.CORE,
}

_YAML_BOOLS = {"true": True, "false": False}


def split_qualified_name(name: str) -> Tuple[str, str]:
  """'org.example.Economy' -> ('org.example', 'Economy')"""
  package, _, simple_name = (name or "").strip().rpartition(".")
  return package, simple_name


def _parse_dependency(raw: Any, context: str) -> DependencyDescriptor:
  if isinstance(raw, str):
    raw = {"id": raw}
  if not isinstance(raw, Mapping):
    raise ValidationError(f"{context}: dependency must be a mapping or an id string.")

  identifier = raw.get("id", raw.get("value"))
  identifier = None if identifier is None else str(identifier)
  validate_dependency_id(identifier, context=context)

  version = raw.get("version")
  version = "" if version is None else str(version)

  optional = raw.get("optional", False)
  if isinstance(optional, str) and optional.strip().lower() in _YAML_BOOLS:
    optional = _YAML_BOOLS[optional.strip().lower()]
  if not isinstance(optional, bool):
    raise ValidationError(f"{context}: 'optional' must be true or false, got {optional!r}.")

  return DependencyDescriptor(identifier=identifier, version=version, optional=optional)


def _parse_declaration(raw: Any, kind: ElementKind, context: str) -> ModuleDeclaration:
  if isinstance(raw, str):
    raw = {"name": raw}
  if not isinstance(raw, Mapping):
    raise ValidationError(f"{context}: entry must be a mapping or a qualified class name.")

  for key in ("name", "package", "simple_name"):
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
      raise ValidationError(f"{context}: '{key}' must be a string, got {value!r}.")

  if raw.get("name"):
    package, simple_name = split_qualified_name(raw["name"])
  else:
    package = (raw.get("package") or "").strip()
    simple_name = (raw.get("simple_name") or "").strip()

  validate_package_name(package, context=context)
  validate_java_identifier(simple_name, context=context)

  raw_deps = raw.get("dependencies") or []
  if kind is ElementKind.CORE and raw_deps:
    raise ValidationError(f"{context}: the core cannot declare dependencies.")
  if not isinstance(raw_deps, list):
    raise ValidationError(f"{context}: 'dependencies' must be a list.")

  deps = tuple(
    _parse_dependency(d, context=f"{context}.dependencies[{i}]")
    for i, d in enumerate(raw_deps)
  )
  return ModuleDeclaration(
    simple_name=simple_name,
    package=package,
    dependencies=deps,
    kind=kind,
  )


def parse_declarations(data: Mapping[str, Any] | None) -> GenerationRound:
  """Build a GenerationRound from an already-parsed manifest mapping."""
  data = data or {}
  if not isinstance(data, Mapping):
    raise ValidationError("Manifest must be a mapping with 'modules' and/or 'cores'.")

  unknown = sorted(set(data) - set(MANIFEST_SECTIONS))
  if unknown:
    raise ValidationError(f"Unknown manifest section(s): {', '.join(unknown)}.")

  declarations: List[ModuleDeclaration] = []
  seen: Dict[str, str] = {}
  for section, kind in MANIFEST_SECTIONS.items():
    entries = data.get(section) or []
    if not isinstance(entries, list):
      raise ValidationError(f"'{section}' must be a list.")
    for i, raw in enumerate(entries):
      decl = _parse_declaration(raw, kind, context=f"{section}[{i}]")
      if decl.qualified_name in seen:
        raise ValidationError(
          f"{section}[{i}]: '{decl.qualified_name}' is already declared in {seen[decl.qualified_name]}."
        )
      seen[decl.qualified_name] = f"{section}[{i}]"
      declarations.append(decl)

  return GenerationRound(declarations=tuple(declarations))


def load_declarations(manifest_path: str | Path) -> GenerationRound:
  """
  Read a declaration manifest from disk.

  Raises:
      FileNotFoundError: if the manifest does not exist.
      ValidationError: if an entry is malformed.
  """
  path = Path(manifest_path)
  if not path.exists():
    raise FileNotFoundError(f"Declaration manifest not found: {path}")

  # BaseLoader keeps every scalar as written, so `version: 2.10` stays "2.10".
  with open(path, "r", encoding="utf-8") as f:
    data = yaml.load(f, Loader=yaml.BaseLoader)

  generation_round = parse_declarations(data)
  logger.debug("Loaded %d declaration(s) from %s", len(generation_round.declarations), path)
  return generation_round
