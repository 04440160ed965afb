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
Django settings for running the plugin generator (management command + tests).
The generator needs no database, templates or web stack.
"""

from pathlib import Path

from utils.env import env_str

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env_str("PLUGINGEN_SECRET_KEY", "plugingen-not-secret")
DEBUG = False
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
  "plugingen",
]

DATABASES = {
  "default": {
    "ENGINE": "django.db.backends.sqlite3",
    "NAME": ":memory:",
  }
}

USE_TZ = True

# Optional; see plugingen.config.build_options for the lookup order.
PLUGINGEN_OPTIONS_PATH = env_str("PLUGINGEN_OPTIONS_PATH")

LOGGING = {
  "version": 1,
  "disable_existing_loggers": False,
  "formatters": {
    "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
  },
  "handlers": {
    "console": {"class": "logging.StreamHandler", "formatter": "simple"},
  },
  "loggers": {
    "plugingen": {
      "handlers": ["console"],
      "level": env_str("PLUGINGEN_LOG_LEVEL", "INFO"),
    },
  },
}
