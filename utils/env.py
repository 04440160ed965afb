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

import json
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
  """Get env var as string with default; empty counts as unset."""
  val = os.getenv(key)
  return val if val not in (None, "") else default


def env_mapping(key: str) -> Dict[str, object]:
  """
  Get env var parsed as a JSON object.

  Unset or empty -> {}. Anything that is not a JSON object is ignored with
  a warning so a stray shell export does not break a build.
  """
  val = os.getenv(key)
  if not val:
    return {}
  try:
    data = json.loads(val)
  except json.JSONDecodeError as exc:
    logger.warning("Ignoring %s: not valid JSON (%s).", key, exc)
    return {}
  if not isinstance(data, dict):
    logger.warning("Ignoring %s: expected a JSON object, got %s.", key, type(data).__name__)
    return {}
  return data
