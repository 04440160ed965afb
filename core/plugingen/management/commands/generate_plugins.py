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
Management command to generate CubeEngine plugin wrappers.

Reads declared modules from a YAML manifest, collects the build options and
writes one wrapper source plus one empty lang resource per declaration.
"""

from pathlib import Path

import yaml
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from plugingen.config.build_options import load_build_options, parse_option_pairs
from plugingen.discovery.manifest import load_declarations
from plugingen.emission.sinks import FilesystemSink, InMemorySink
from plugingen.exceptions import PluginGenerationError
from plugingen.generation.plugin_generation_service import PluginGenerationService
from utils.env import env_str

DEFAULT_SOURCE_OUTPUT = Path("build") / "generated" / "sources"
DEFAULT_CLASS_OUTPUT = Path("build") / "generated" / "resources"


class Command(BaseCommand):
  help = "Generate plugin wrapper sources and lang stubs for all declared modules."

  def add_arguments(self, parser):
    parser.add_argument(
      "--manifest",
      "-m",
      dest="manifest",
      help=(
        "YAML manifest listing the declared modules and cores. "
        "Defaults to PLUGINGEN_MANIFEST_PATH."
      ),
    )
    parser.add_argument(
      "--options",
      dest="options_path",
      help="YAML file with build options (cubeengine.module.* keys).",
    )
    parser.add_argument(
      "-A",
      "--option",
      action="append",
      dest="option_pairs",
      default=[],
      metavar="KEY=VALUE",
      help="Single build option, e.g. -A cubeengine.module.version=1.0. Repeatable; wins over --options.",
    )
    parser.add_argument(
      "--source-output",
      dest="source_output",
      default=str(DEFAULT_SOURCE_OUTPUT),
      help="Directory for generated sources.",
    )
    parser.add_argument(
      "--class-output",
      dest="class_output",
      default=str(DEFAULT_CLASS_OUTPUT),
      help="Directory for generated resources.",
    )
    parser.add_argument(
      "--dry-run",
      action="store_true",
      dest="dry_run",
      help="Only show what would be generated; do not write any files.",
    )

  def handle(self, *args, **options):
    dry_run = options.get("dry_run", False)

    manifest = options.get("manifest") or env_str("PLUGINGEN_MANIFEST_PATH")
    if not manifest:
      raise CommandError("No manifest given. Use --manifest or set PLUGINGEN_MANIFEST_PATH.")

    try:
      overrides = parse_option_pairs(options.get("option_pairs"))
      build_options = load_build_options(options.get("options_path"), overrides=overrides)
      generation_round = load_declarations(manifest)
    except (FileNotFoundError, ValueError) as exc:
      raise CommandError(str(exc)) from exc
    except yaml.YAMLError as exc:
      raise CommandError(f"Could not parse YAML: {exc}") from exc
    except ValidationError as exc:
      raise CommandError("; ".join(exc.messages)) from exc

    if not generation_round.declarations:
      self.stdout.write(self.style.WARNING("No modules declared. Nothing to do."))
      return

    if dry_run:
      sink = InMemorySink()
    else:
      sink = FilesystemSink(options["source_output"], options["class_output"])

    svc = PluginGenerationService(build_options, sink)
    try:
      results = svc.process(generation_round)
    except PluginGenerationError as exc:
      raise CommandError(str(exc)) from exc

    prefix = "[DRY-RUN] " if dry_run else ""
    for result in results:
      self.stdout.write(
        f"{prefix}{result.descriptor.qualified_id}: "
        f"{result.source_location}, {result.resource_location}"
      )

    if dry_run:
      self.stdout.write(self.style.WARNING("Dry-run completed. No files were written."))
    else:
      self.stdout.write(self.style.SUCCESS(f"Done. {len(results)} plugin wrapper(s) generated."))
