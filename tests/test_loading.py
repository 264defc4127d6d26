import json
from pathlib import Path

import pytest

from siteconf import ValidationError, load_configuration, load_configuration_file

ASTRO_YAML = """\
site: https://burrow-io.github.io
base: /
output: static
build:
  assets: assets
"""


def test_load_yaml_matches_builtin(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text(ASTRO_YAML)
    assert load_configuration_file(path) == load_configuration()


def test_load_json(tmp_path: Path):
    path = tmp_path / "site.json"
    path.write_text(
        json.dumps({"site": "https://example.org", "base": "/docs/", "output": "server"})
    )
    config = load_configuration_file(path)
    assert config.base == "/docs/"
    assert config.output_mode == "server"
    assert config.assets_dir_name == "_astro"


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_configuration_file(tmp_path / "absent.yaml")


def test_unsupported_suffix(tmp_path: Path):
    path = tmp_path / "site.toml"
    path.write_text('site = "https://example.org"\n')
    with pytest.raises(ValidationError, match="unsupported file type"):
        load_configuration_file(path)


def test_unparseable_yaml(tmp_path: Path):
    path = tmp_path / "site.yml"
    path.write_text("site: [unclosed\n")
    with pytest.raises(ValidationError, match="cannot parse"):
        load_configuration_file(path)


def test_top_level_must_be_mapping(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text("- https://example.org\n")
    with pytest.raises(ValidationError, match="top level must be a mapping"):
        load_configuration_file(path)


def test_unknown_keys_and_missing_site(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text("outDir: dist\n")
    with pytest.raises(ValidationError) as exc_info:
        load_configuration_file(path)
    assert exc_info.value.errors == [
        "site.yaml: unknown option 'outDir'",
        "site.yaml: site is required",
    ]


def test_build_must_be_mapping(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text("site: https://example.org\nbuild: assets\n")
    with pytest.raises(ValidationError, match="build: expected a mapping"):
        load_configuration_file(path)


def test_traversal_in_file_rejected(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text("site: https://example.org\nbuild:\n  assets: ../secrets\n")
    with pytest.raises(ValidationError, match="assetsDirName"):
        load_configuration_file(path)


def test_non_utf8_file_rejected(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_bytes(b"\xff\xfesite: https://example.org\n")
    with pytest.raises(ValidationError, match="cannot parse"):
        load_configuration_file(path)


def test_directory_is_not_a_configuration(tmp_path: Path):
    path = tmp_path / "dir.yaml"
    path.mkdir()
    with pytest.raises(FileNotFoundError):
        load_configuration_file(path)


def test_accepts_str_path(tmp_path: Path):
    path = tmp_path / "site.yaml"
    path.write_text(ASTRO_YAML)
    assert load_configuration_file(str(path)) == load_configuration()
