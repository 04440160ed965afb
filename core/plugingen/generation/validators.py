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

import re

from django.core.exceptions import ValidationError

# --- Validators for declarations read from a manifest ---
# The generator itself trusts its input; these run only where declarations
# enter the system.

JAVA_IDENTIFIER_REGEX = r"^[A-Za-z_$][A-Za-z0-9_$]*$"
JAVA_IDENTIFIER_VALIDATOR = re.compile(JAVA_IDENTIFIER_REGEX)

JAVA_KEYWORDS = frozenset({
  "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
  "class", "const", "continue", "default", "do", "double", "else", "enum",
  "extends", "final", "finally", "float", "for", "goto", "if", "implements",
  "import", "instanceof", "int", "interface", "long", "native", "new",
  "package", "private", "protected", "public", "return", "short", "static",
  "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
  "transient", "try", "void", "volatile", "while",
  "true", "false", "null",
})


def validate_java_identifier(name: str, context: str = "name"):
  """Validate a simple type name (e.g. 'Economy')."""
  if not JAVA_IDENTIFIER_VALIDATOR.match(name or "") or name in JAVA_KEYWORDS:
    raise ValidationError(
      f"{context}: '{name}' is not a valid Java identifier. "
      "Rules: letters / digits / underscore / $, must not start with a digit, no keywords."
    )


def validate_package_name(package: str, context: str = "package"):
  """Validate a dotted package name (e.g. 'org.cubeengine.module.economy')."""
  if not package:
    raise ValidationError(f"{context}: a module must live in a named package.")
  for part in package.split("."):
    validate_java_identifier(part, context=context)


def validate_dependency_id(identifier: str, context: str = "dependency"):
  if not (identifier or "").strip():
    raise ValidationError(f"{context}: dependency id must not be empty.")
  if '"' in identifier or "\\" in identifier:
    raise ValidationError(
      f"{context}: '{identifier}' contains characters that cannot appear in a plugin id."
    )
