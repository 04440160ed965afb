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

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


MANIFEST = """\
modules:
  - name: org.example.Economy
    dependencies:
      - id: chat
        version: "2.0"
        optional: true
"""


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path, settings):
  monkeypatch.delenv("PLUGINGEN_OPTIONS", raising=False)
  monkeypatch.delenv("PLUGINGEN_OPTIONS_PATH", raising=False)
  monkeypatch.delenv("PLUGINGEN_MANIFEST_PATH", raising=False)
  settings.PLUGINGEN_OPTIONS_PATH = None
  monkeypatch.chdir(tmp_path)


@pytest.fixture
def manifest(tmp_path):
  path = tmp_path / "plugins.yaml"
  path.write_text(MANIFEST, encoding="utf-8")
  return path


def _run(*args):
  out = StringIO()
  call_command("generate_plugins", *args, stdout=out)
  return out.getvalue()


def test_generate_plugins_writes_files(tmp_path, manifest):
  src = tmp_path / "out" / "src"
  classes = tmp_path / "out" / "classes"

  output = _run(
    "--manifest", str(manifest),
    "-A", "cubeengine.module.id=economy",
    "-A", "cubeengine.module.name=Economy Module",
    "-A", "cubeengine.module.version=1.0",
    "-A", "cubeengine.module.libcube.version=3.2",
    "--source-output", str(src),
    "--class-output", str(classes),
  )

  source = (src / "org" / "example" / "PluginEconomy.java").read_text(encoding="utf-8")
  assert 'public static final String ECONOMY_ID = "cubeengine-economy";' in source
  assert 'name = "CubeEngine - Economy Module",' in source
  assert (
    '{@Dependency(id = "chat", version = "2.0", optional = true),\n'
    '@Dependency(id = "cubeengine-core", version = "3.2", optional = false)}'
  ) in source
  assert (classes / "assets" / "cubeengine-economy" / "lang" / "en_us.lang").exists()
  assert "1 plugin wrapper(s) generated" in output


def test_generate_plugins_default_output_dirs(tmp_path, manifest):
  _run("--manifest", str(manifest))

  assert (tmp_path / "build" / "generated" / "sources" / "org" / "example" / "PluginEconomy.java").exists()
  assert (
    tmp_path / "build" / "generated" / "resources" / "assets" / "cubeengine-economy" / "lang" / "en_us.lang"
  ).exists()


def test_generate_plugins_options_file(tmp_path, manifest):
  options = tmp_path / "opts.yaml"
  options.write_text("cubeengine.module.version: 4.2.0\ncubeengine.module.team: CubeEngine\n", encoding="utf-8")

  _run("--manifest", str(manifest), "--options", str(options), "-A", "cubeengine.module.version=5.0")

  source = (tmp_path / "build" / "generated" / "sources" / "org" / "example" / "PluginEconomy.java").read_text(
    encoding="utf-8"
  )
  assert 'ECONOMY_VERSION = "5.0";' in source
  assert 'authors = "CubeEngine Team",' in source


def test_generate_plugins_decimal_versions_render_as_written(tmp_path, manifest):
  options = tmp_path / "opts.yaml"
  options.write_text(
    "cubeengine.module.version: 1.10\ncubeengine.module.libcube.version: 3.20\n", encoding="utf-8"
  )

  _run("--manifest", str(manifest), "--options", str(options))

  source = (tmp_path / "build" / "generated" / "sources" / "org" / "example" / "PluginEconomy.java").read_text(
    encoding="utf-8"
  )
  assert 'ECONOMY_VERSION = "1.10";' in source
  assert '@Dependency(id = "cubeengine-core", version = "3.20", optional = false)' in source


def test_generate_plugins_dry_run_writes_nothing(tmp_path, manifest):
  output = _run("--manifest", str(manifest), "--dry-run")

  assert "[DRY-RUN] cubeengine-economy: org/example/PluginEconomy.java" in output
  assert "Dry-run completed" in output
  assert not (tmp_path / "build").exists()


def test_generate_plugins_manifest_from_env(tmp_path, manifest, monkeypatch):
  monkeypatch.setenv("PLUGINGEN_MANIFEST_PATH", str(manifest))
  output = _run("--dry-run")
  assert "cubeengine-economy" in output


def test_generate_plugins_empty_manifest(tmp_path):
  path = tmp_path / "empty.yaml"
  path.write_text("modules: []\n", encoding="utf-8")

  assert "Nothing to do" in _run("--manifest", str(path))


def test_generate_plugins_requires_manifest():
  with pytest.raises(CommandError):
    _run()


def test_generate_plugins_missing_manifest(tmp_path):
  with pytest.raises(CommandError):
    _run("--manifest", str(tmp_path / "missing.yaml"))


def test_generate_plugins_invalid_manifest(tmp_path):
  path = tmp_path / "bad.yaml"
  path.write_text("modules:\n  - Economy\n", encoding="utf-8")

  with pytest.raises(CommandError, match="named package"):
    _run("--manifest", str(path))


def test_generate_plugins_non_string_name(tmp_path):
  path = tmp_path / "bad.yaml"
  path.write_text("modules:\n  - name: {package: org.example}\n", encoding="utf-8")

  with pytest.raises(CommandError, match="must be a string"):
    _run("--manifest", str(path))


def test_generate_plugins_malformed_option(manifest):
  with pytest.raises(CommandError):
    _run("--manifest", str(manifest), "-A", "cubeengine.module.version")


def test_generate_plugins_write_failure(tmp_path, manifest):
  blocker = tmp_path / "blocked"
  blocker.write_text("file, not a directory", encoding="utf-8")

  with pytest.raises(CommandError) as excinfo:
    _run("--manifest", str(manifest), "--source-output", str(blocker))

  assert excinfo.value.__cause__ is not None
