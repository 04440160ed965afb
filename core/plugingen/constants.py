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

"""
Fixed names and literals shared by the plugin generator.

Option keys are the processor options a build passes in (javac -A style).
Everything here is read-only; the generator never mutates these values.
"""

# ------------------------------------------------------------------
# Build option keys
# ------------------------------------------------------------------
OPTION_PREFIX = "cubeengine.module."

OPTION_VERSION = OPTION_PREFIX + "version"
OPTION_ID = OPTION_PREFIX + "id"
OPTION_NAME = OPTION_PREFIX + "name"
OPTION_DESCRIPTION = OPTION_PREFIX + "description"
OPTION_TEAM = OPTION_PREFIX + "team"
OPTION_URL = OPTION_PREFIX + "url"
OPTION_LIBCUBE_VERSION = OPTION_PREFIX + "libcube.version"
OPTION_SPONGE_VERSION = OPTION_PREFIX + "sponge.version"
OPTION_SOURCE_VERSION = OPTION_PREFIX + "sourceversion"

SUPPORTED_OPTIONS = (
  OPTION_VERSION,
  OPTION_ID,
  OPTION_NAME,
  OPTION_DESCRIPTION,
  OPTION_TEAM,
  OPTION_URL,
  OPTION_LIBCUBE_VERSION,
  OPTION_SPONGE_VERSION,
  OPTION_SOURCE_VERSION,
)

# ------------------------------------------------------------------
# Fallbacks
# ------------------------------------------------------------------
UNKNOWN = "unknown"

# The module id falls back to the lower-cased simple name, so it has no
# entry here.
OPTION_FALLBACKS = {
  OPTION_VERSION: UNKNOWN,
  OPTION_NAME: UNKNOWN,
  OPTION_DESCRIPTION: UNKNOWN,
  OPTION_TEAM: UNKNOWN,
  OPTION_URL: "",
  OPTION_LIBCUBE_VERSION: UNKNOWN,
  OPTION_SPONGE_VERSION: UNKNOWN,
  OPTION_SOURCE_VERSION: UNKNOWN,
}

# Left behind by the build when git metadata could not be filtered in.
SOURCE_VERSION_PLACEHOLDER = "${githead.branch}-${githead.commit}"

# ------------------------------------------------------------------
# Naming literals
# ------------------------------------------------------------------
PLUGIN_CLASS_PREFIX = "Plugin"
PLUGIN_ID_PREFIX = "cubeengine-"
PLUGIN_NAME_PREFIX = "CubeEngine - "
AUTHORS_SUFFIX = " Team"
ID_CONSTANT_SUFFIX = "_ID"
VERSION_CONSTANT_SUFFIX = "_VERSION"

CORE_DEPENDENCY_ID = PLUGIN_ID_PREFIX + "core"

# ------------------------------------------------------------------
# Declaration kinds (the two annotations a build can carry)
# ------------------------------------------------------------------
ANNOTATION_PACKAGE = "org.cubeengine.processor."
MODULE_ANNOTATION = ANNOTATION_PACKAGE + "Module"
CORE_ANNOTATION = ANNOTATION_PACKAGE + "Core"

# ------------------------------------------------------------------
# Artifact locations
# ------------------------------------------------------------------
SOURCE_FILE_EXTENSION = ".java"
RESOURCE_PACKAGE = "assets"
LANG_RESOURCE_TEMPLATE = "{qualified_id}/lang/en_us.lang"
